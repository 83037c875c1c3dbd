"""Settings for infragraph, merged from CLI flags and environment.

Priority chain (highest to lowest):
  1. Init kwargs  -- CLI flags passed by Click
  2. Env vars     -- ``INFRAGRAPH_*`` prefix
  3. Code defaults
"""

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfragraphSettings(BaseSettings):
    """Unified settings object stored in ``click.Context.obj``.

    Attributes:
        verbose: Emit DEBUG-level logs.
        log_json: Render logs as JSON lines instead of console output.
        validate_on_import: Reject imported graphs that violate structural
            invariants instead of loading them verbatim.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="INFRAGRAPH_")

    verbose: bool = False
    log_json: bool = False
    validate_on_import: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> "InfragraphSettings":
        """Construct settings, letting CLI flags that were set win.

        Unset (falsy) flags are dropped so env vars and defaults apply.
        """
        overrides = {k: v for k, v in cli_flags.items() if v}
        return cls(**overrides)
