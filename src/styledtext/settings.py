"""Runtime settings with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

__all__ = ["Settings", "load_settings"]

LOGGER = logging.getLogger(__name__)
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "STYLEDTEXT_TRACE_REBASE": "trace_rebase",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Diagnostics toggles for attributed text containers."""

    trace_rebase: bool = False

    def with_overrides(self, overrides: Mapping[str, Any]) -> Settings:
        """Return a copy with known fields replaced; unknown keys are ignored."""

        known = {item.name for item in fields(self)}
        applicable = {key: value for key, value in overrides.items() if key in known}
        ignored = sorted(set(overrides) - known)
        if ignored:
            LOGGER.debug("Ignoring unknown settings overrides: %s", ", ".join(ignored))
        return replace(self, **applicable) if applicable else self


def load_settings(
    env: Mapping[str, str] | None = None,
    *,
    base: Settings | None = None,
) -> Settings:
    """Build :class:`Settings` from ``base`` plus environment overrides."""

    environ = os.environ if env is None else env
    settings = base or Settings()
    overrides: Dict[str, Any] = {}
    for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value is not None:
            overrides[field_name] = value.strip().lower() in _TRUE_VALUES
    if overrides:
        settings = settings.with_overrides(overrides)
    return settings
