"""SettingsStore — JSON-file persistence for SttApiSettings snapshots."""
import json
import logging
from pathlib import Path

from stt_api.constants import (
    DEFAULT_SETTINGS_PATH,
    MSG_SETTINGS_LOAD_FAILED,
    MSG_SETTINGS_SAVED,
)
from stt_api.settings import SttApiSettings, default_settings

logger = logging.getLogger(__name__)


class SettingsStore:

    def __init__(self, path: Path = Path(DEFAULT_SETTINGS_PATH)) -> None:
        self._path = path

    def get_settings(self) -> SttApiSettings:
        """Read a fresh snapshot. Missing or unreadable files yield the defaults."""
        match self._path.exists():
            case False:
                return default_settings()
            case True:
                pass
        try:
            with open(self._path) as f:
                raw = json.load(f)
            return SttApiSettings.from_dict(raw)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(MSG_SETTINGS_LOAD_FAILED, e)
            return default_settings()

    def write_settings(self, settings: SttApiSettings) -> None:
        with open(self._path, "w") as f:
            json.dump(settings.to_dict(), f, indent=2)
        logger.debug(MSG_SETTINGS_SAVED, self._path)
