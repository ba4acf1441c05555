"""Entry point — wires Config → SettingsStore → settings commands / transcription."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from stt_api import commands
from stt_api.audio.wav import read_f32le
from stt_api.config import Config
from stt_api.constants import MSG_OK, MSG_SETTINGS_STATUS
from stt_api.errors import SttApiError
from stt_api.resolver import transcribe_with_stt_api
from stt_api.settings import SttApiSettings
from stt_api.settings_store import SettingsStore

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _mask(secret: str) -> str:
    match secret.strip():
        case "":
            return "(none)"
        case s:
            return f"…{s[-4:]}"


def format_status(settings: SttApiSettings) -> str:
    provider = settings.active_provider()
    return MSG_SETTINGS_STATUS % (
        "yes" if settings.enabled else "no",
        settings.provider_id,
        provider.label if provider else "missing",
        provider.base_url if provider else "-",
        settings.model_for(settings.provider_id),
        _mask(settings.api_key_for(settings.provider_id)),
        settings.selected_language,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stt-api", description="OpenAI-compatible STT settings and transcription")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="print the current STT API settings")
    sub.add_parser("enable", help="enable the STT API")
    sub.add_parser("disable", help="disable the STT API")
    p = sub.add_parser("provider", help="select the active provider")
    p.add_argument("provider_id")
    p = sub.add_parser("base-url", help="set the base URL of the custom provider")
    p.add_argument("provider_id")
    p.add_argument("base_url")
    p = sub.add_parser("api-key", help="set a provider's API key")
    p.add_argument("provider_id")
    p.add_argument("api_key")
    p = sub.add_parser("model", help="set a provider's model")
    p.add_argument("provider_id")
    p.add_argument("model")
    p = sub.add_parser("language", help="set the spoken language, or 'auto'")
    p.add_argument("language")
    p = sub.add_parser("transcribe", help="transcribe raw float32 LE samples (16 kHz mono)")
    p.add_argument("path", type=Path)
    return parser


def run(args: argparse.Namespace, store: SettingsStore) -> str:
    match args.command:
        case "show":
            return format_status(commands.get_stt_api_settings(store))
        case "enable" | "disable":
            commands.set_stt_api_enabled(store, args.command == "enable")
        case "provider":
            commands.set_stt_api_provider(store, args.provider_id)
        case "base-url":
            commands.set_stt_api_base_url(store, args.provider_id, args.base_url)
        case "api-key":
            commands.set_stt_api_key(store, args.provider_id, args.api_key)
        case "model":
            commands.set_stt_api_model(store, args.provider_id, args.model)
        case "language":
            commands.set_selected_language(store, args.language)
        case "transcribe":
            samples = read_f32le(args.path.read_bytes())
            return asyncio.run(transcribe_with_stt_api(store.get_settings(), samples))
    return MSG_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    store = SettingsStore(config.settings_path)
    try:
        print(run(args, store))
    except (SttApiError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
