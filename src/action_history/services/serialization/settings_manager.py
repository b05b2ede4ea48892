"""
Settings Manager - loads and saves history settings.

Settings are stored as a JSON file.
"""

import json
import logging
import os
from typing import Optional

from ...models.config.history_settings import HistorySettings

logger = logging.getLogger(__name__)


# Global instance
_settings_manager: Optional['SettingsManager'] = None


def get_settings_manager() -> 'SettingsManager':
    """Get or create global SettingsManager instance."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


class SettingsManager:
    """Service for loading and saving HistorySettings."""

    def __init__(self, config_path: str = "history_settings.json"):
        self.config_path = config_path

    def load_settings(self) -> Optional[HistorySettings]:
        """Load settings from the config file."""
        if not os.path.exists(self.config_path):
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                logger.error("Error loading settings from %s: expected a JSON object", self.config_path)
                return None

            return HistorySettings.from_dict(data)

        except (OSError, ValueError) as e:
            logger.error("Error loading settings from %s: %s", self.config_path, e)
            return None

    def save_settings(self, settings: HistorySettings) -> bool:
        """Save settings to the config file."""
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=4, ensure_ascii=False)
            return True

        except OSError as e:
            logger.error("Error saving settings to %s: %s", self.config_path, e)
            return False
