"""All magic values live here — no inline literals anywhere else."""

# Audio container (linear PCM, mono, 16 kHz, 16-bit)
SAMPLE_RATE = 16000
WAV_HEADER_SIZE = 44
PCM_SCALE = 32767

# Transcription endpoint
TRANSCRIPTIONS_PATH = "/audio/transcriptions"
AUDIO_FILENAME = "audio.wav"
AUDIO_MEDIA_TYPE = "audio/wav"
RESPONSE_FORMAT = "json"
FIELD_FILE = "file"
FIELD_MODEL = "model"
FIELD_LANGUAGE = "language"
FIELD_RESPONSE_FORMAT = "response_format"
AUTH_HEADER = "Authorization"
AUTH_SCHEME = "Bearer"

# Settings
DEFAULT_MODEL = "whisper-1"
LANGUAGE_AUTO = "auto"
CUSTOM_PROVIDER_ID = "custom"
DEFAULT_PROVIDER_ID = "openai"
DEFAULT_PROVIDERS = (
    ("openai", "OpenAI", "https://api.openai.com/v1"),
    ("groq", "Groq", "https://api.groq.com/openai/v1"),
    (CUSTOM_PROVIDER_ID, "Custom", "http://localhost:8000/v1"),
)
DEFAULT_SETTINGS_PATH = ".stt_api_settings.json"

# Log messages
MSG_SENDING_REQUEST = "Sending STT request to %s (model: %s, language: %s)"
MSG_REQUEST_OK = "STT transcription successful: %d chars"
MSG_RESPONSE_BODY = "STT API response: %s"
MSG_HTTP_ERROR_LOG = "STT API error (%s): %s"
MSG_SETTINGS_LOAD_FAILED = "Settings load failed: %s, using defaults"
MSG_SETTINGS_SAVED = "Saved STT settings to %s"

# Error replies
MSG_ERR_NOT_ENABLED = "STT API is not enabled"
MSG_ERR_NO_PROVIDER = "No STT API provider configured"
MSG_ERR_PROVIDER_NOT_FOUND = "Provider '%s' not found"
MSG_ERR_BASE_URL_LOCKED = "Provider '%s' does not allow editing the base URL"
MSG_ERR_REQUEST_BUILD = "Failed to build STT request: %s"
MSG_ERR_NETWORK = "Failed to send STT request: %s"
MSG_ERR_READ_BODY = "Failed to read response body: %s"
MSG_ERR_HTTP_STATUS = "STT API error (%s): %s"
MSG_ERR_PARSE = "Failed to parse STT response: %s. Body: %s"
MSG_ERR_EMPTY = "STT API returned empty transcription — no speech detected"

# CLI
MSG_SETTINGS_STATUS = (
    "STT API\n"
    "  Enabled  : %s\n"
    "  Provider : %s (%s)\n"
    "  Base URL : %s\n"
    "  Model    : %s\n"
    "  API key  : %s\n"
    "  Language : %s\n"
)
MSG_OK = "OK"
