"""Settings commands — load snapshot, modify a copy, persist the copy.

Every command that names a provider validates the id against the stored
provider list before anything is written.
"""
import dataclasses

from stt_api.errors import BaseUrlEditNotAllowedError, ProviderNotFoundError
from stt_api.settings import SttApiProvider, SttApiSettings
from stt_api.settings_store import SettingsStore


def _require_provider(settings: SttApiSettings, provider_id: str) -> SttApiProvider:
    match settings.provider(provider_id):
        case None:
            raise ProviderNotFoundError(provider_id)
        case provider:
            return provider


def get_stt_api_settings(store: SettingsStore) -> SttApiSettings:
    return store.get_settings()


def set_stt_api_enabled(store: SettingsStore, enabled: bool) -> None:
    settings = store.get_settings()
    store.write_settings(dataclasses.replace(settings, enabled=enabled))


def set_stt_api_provider(store: SettingsStore, provider_id: str) -> None:
    settings = store.get_settings()
    _require_provider(settings, provider_id)
    store.write_settings(dataclasses.replace(settings, provider_id=provider_id))


def set_stt_api_base_url(store: SettingsStore, provider_id: str, base_url: str) -> None:
    settings = store.get_settings()
    provider = _require_provider(settings, provider_id)
    match provider.allow_base_url_edit:
        case False:
            raise BaseUrlEditNotAllowedError(provider.label)
        case True:
            pass
    edited = dataclasses.replace(provider, base_url=base_url)
    providers = tuple(edited if p.id == provider_id else p for p in settings.providers)
    store.write_settings(dataclasses.replace(settings, providers=providers))


def set_stt_api_key(store: SettingsStore, provider_id: str, api_key: str) -> None:
    settings = store.get_settings()
    _require_provider(settings, provider_id)
    api_keys = {**settings.api_keys, provider_id: api_key}
    store.write_settings(dataclasses.replace(settings, api_keys=api_keys))


def set_stt_api_model(store: SettingsStore, provider_id: str, model: str) -> None:
    settings = store.get_settings()
    _require_provider(settings, provider_id)
    models = {**settings.models, provider_id: model}
    store.write_settings(dataclasses.replace(settings, models=models))


def set_selected_language(store: SettingsStore, language: str) -> None:
    settings = store.get_settings()
    store.write_settings(dataclasses.replace(settings, selected_language=language))
