from dataclasses import dataclass
from pathlib import Path
import logging
import os
from dotenv import load_dotenv

from stt_api.constants import DEFAULT_SETTINGS_PATH


@dataclass(frozen=True)
class Config:
    log_level: str
    settings_path: Path

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        log_level = os.getenv("LOG_LEVEL", "INFO")
        settings_path = os.getenv("STT_SETTINGS_PATH") or DEFAULT_SETTINGS_PATH

        return cls._validate(
            log_level=log_level,
            settings_path=settings_path,
        )

    @staticmethod
    def _validate(log_level: str, settings_path: str) -> "Config":
        match logging.getLevelName(log_level.upper()):
            case int():
                pass
            case _:
                raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

        match Path(settings_path):
            case p if p.is_dir():
                raise ValueError(f"STT_SETTINGS_PATH must be a file, got directory {settings_path}")
            case _:
                pass

        return Config(
            log_level=log_level.upper(),
            settings_path=Path(settings_path),
        )
