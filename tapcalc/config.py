"""Runtime settings for tapcalc.

Settings come from TAPCALC_* environment variables and can be overridden by
CLI flags. Defaults keep phone-calculator behaviour: repeated
decimal points are accepted and integer division by zero is fatal.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    return env.get(key, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Accumulator behaviour switches plus the log level."""

    strict_decimal: bool = False
    float_division_by_zero: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from TAPCALC_STRICT_DECIMAL, TAPCALC_FLOAT_DIV_ZERO
        and TAPCALC_LOG_LEVEL.

        Args:
            env: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if env is None else env
        return cls(
            strict_decimal=_env_flag(env, "TAPCALC_STRICT_DECIMAL"),
            float_division_by_zero=_env_flag(env, "TAPCALC_FLOAT_DIV_ZERO"),
            log_level=env.get("TAPCALC_LOG_LEVEL", "WARNING").upper(),
        )

    def with_overrides(
        self,
        strict_decimal: Optional[bool] = None,
        float_division_by_zero: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> Settings:
        """Return a copy with every non-None argument applied."""
        changes = {}
        if strict_decimal is not None:
            changes["strict_decimal"] = strict_decimal
        if float_division_by_zero is not None:
            changes["float_division_by_zero"] = float_division_by_zero
        if log_level is not None:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)


def configure_logging(settings: Settings) -> None:
    """Route tapcalc loggers through a stderr RichHandler.

    Only levels below WARNING install the handler; otherwise the caller's
    logging setup is left alone.
    """
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int) or level >= logging.WARNING:
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
        force=True,
    )
