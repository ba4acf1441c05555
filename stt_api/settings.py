"""STT API settings — immutable snapshot of the user's provider configuration."""
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from stt_api.constants import (
    CUSTOM_PROVIDER_ID,
    DEFAULT_MODEL,
    DEFAULT_PROVIDER_ID,
    DEFAULT_PROVIDERS,
    LANGUAGE_AUTO,
)


@dataclass(frozen=True)
class SttApiProvider:
    id: str
    label: str
    base_url: str

    @property
    def allow_base_url_edit(self) -> bool:
        return self.id == CUSTOM_PROVIDER_ID

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "base_url": self.base_url,
            "allow_base_url_edit": self.allow_base_url_edit,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SttApiProvider":
        return cls(id=raw["id"], label=raw.get("label", raw["id"]), base_url=raw["base_url"])


def default_providers() -> tuple[SttApiProvider, ...]:
    return tuple(SttApiProvider(id=i, label=label, base_url=url) for i, label, url in DEFAULT_PROVIDERS)


def _str_entries(raw: Any) -> dict[str, str]:
    """Keep only string values; anything else counts as absent."""
    match raw:
        case dict():
            return {k: v for k, v in raw.items() if isinstance(v, str)}
        case _:
            return {}


@dataclass(frozen=True)
class SttApiSettings:
    """Snapshot captured once per operation; mutations produce a new copy."""

    enabled: bool = False
    provider_id: str = DEFAULT_PROVIDER_ID
    providers: tuple[SttApiProvider, ...] = field(default_factory=default_providers)
    api_keys: Mapping[str, str] = field(default_factory=dict)
    models: Mapping[str, str] = field(default_factory=dict)
    selected_language: str = LANGUAGE_AUTO

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_keys", MappingProxyType(dict(self.api_keys)))
        object.__setattr__(self, "models", MappingProxyType(dict(self.models)))

    def __hash__(self) -> int:
        return hash((
            self.enabled,
            self.provider_id,
            self.providers,
            tuple(sorted(self.api_keys.items())),
            tuple(sorted(self.models.items())),
            self.selected_language,
        ))

    def provider(self, provider_id: str) -> Optional[SttApiProvider]:
        return next((p for p in self.providers if p.id == provider_id), None)

    def active_provider(self) -> Optional[SttApiProvider]:
        return self.provider(self.provider_id)

    def api_key_for(self, provider_id: str) -> str:
        return self.api_keys.get(provider_id, "")

    def model_for(self, provider_id: str) -> str:
        return self.models.get(provider_id, DEFAULT_MODEL)

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "provider_id": self.provider_id,
            "providers": [p.to_dict() for p in self.providers],
            "api_keys": dict(self.api_keys),
            "models": dict(self.models),
            "selected_language": self.selected_language,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SttApiSettings":
        defaults = cls()
        match raw.get("providers"):
            case list() as items if items:
                providers = tuple(map(SttApiProvider.from_dict, items))
            case _:
                providers = defaults.providers
        return cls(
            enabled=bool(raw.get("enabled", defaults.enabled)),
            provider_id=raw.get("provider_id", defaults.provider_id),
            providers=providers,
            api_keys=_str_entries(raw.get("api_keys")),
            models=_str_entries(raw.get("models")),
            selected_language=raw.get("selected_language") or defaults.selected_language,
        )


def default_settings() -> SttApiSettings:
    return SttApiSettings()
