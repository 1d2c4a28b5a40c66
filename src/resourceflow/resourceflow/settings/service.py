from __future__ import annotations

import logging
from dataclasses import replace

from ..common.validators import require_number
from ..core.constants import MAX_WEEKLY_HOURS
from .model import SETTING_KEYS, Settings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

# (min, max, label) per stored key
_LIMITS = {
    "buffer": (0.0, 100.0, "Buffer"),
    "canadaHours": (0.0, MAX_WEEKLY_HOURS, "Canada hours"),
    "brazilHours": (0.0, MAX_WEEKLY_HOURS, "Brazil hours"),
}


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> Settings:
        """Stored values over defaults; unparsable rows fall back to the default."""
        stored = self._settings.get_all()
        current = Settings()
        changes: dict = {}
        for key, attr in SETTING_KEYS.items():
            raw = stored.get(key)
            if raw is None:
                continue
            try:
                changes[attr] = float(raw)
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid stored setting %s=%r", key, raw)
        return replace(current, **changes)

    def update(self, payload: dict) -> Settings:
        """Partial update keyed by camelCase names. Every value is validated before any write."""
        values: dict[str, float] = {}
        for key, attr in SETTING_KEYS.items():
            raw = payload.get(key, payload.get(attr))
            if raw is None:
                continue
            lo, hi, label = _LIMITS[key]
            values[key] = require_number(raw, label, min_value=lo, max_value=hi)

        for key, value in values.items():
            self._settings.upsert(key=key, value=f"{value:g}")
        if values:
            logger.info("Updated settings: %s", ", ".join(sorted(values)))
        return self.get()
