"""Configuration via environment variables or a per-request config object."""

import base64
import binascii
import json
from collections.abc import Mapping
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings

from youtube_mcp.errors import ConfigError

DEFAULT_TRANSCRIPT_LANGUAGE = "en"


class Transport(str, Enum):
    STDIO = "stdio"
    STREAMABLE_HTTP = "streamable-http"


class Settings(BaseSettings):
    """YouTube credentials and defaults read from the process environment."""

    youtube_api_key: SecretStr | None = None
    youtube_transcript_lang: str = DEFAULT_TRANSCRIPT_LANGUAGE


class ServerSettings(BaseSettings):
    """Process-level options for the transports."""

    youtube_mcp_transport: Transport = Transport.STDIO
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


class ServerConfig(BaseModel):
    """Configuration supplied by the hosting environment for one server instance."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("apiKey", "youtubeApiKey", "api_key"),
        description="YouTube Data API key",
    )
    transcript_language: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "transcriptLanguage", "youtubeTranscriptLang", "transcript_language"
        ),
        description="Default language for YouTube transcripts",
    )

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> "ServerConfig":
        """Build a config from HTTP query parameters.

        ``config`` may hold a base64-encoded JSON object; flat ``apiKey`` and
        ``transcriptLanguage`` parameters are applied on top of it.
        """
        data: dict = {}
        encoded = params.get("config")
        if encoded:
            data.update(_decode_config_param(encoded))
        for key in ("apiKey", "transcriptLanguage"):
            if params.get(key):
                data[key] = params[key]
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid server config: {e}") from e


class EffectiveConfig(BaseModel):
    """Resolved configuration, fixed for the lifetime of one server instance."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr | None = None
    transcript_language: str = DEFAULT_TRANSCRIPT_LANGUAGE


def _decode_config_param(encoded: str) -> dict:
    # '+' arrives as a space when the query string was not percent-encoded
    raw = encoded.replace(" ", "+")
    raw += "=" * (-len(raw) % 4)
    try:
        decoded = json.loads(base64.b64decode(raw, altchars=b"-_"))
    except (binascii.Error, ValueError) as e:
        raise ConfigError(f"Malformed config parameter: {e}") from e
    if not isinstance(decoded, dict):
        raise ConfigError("Malformed config parameter: expected a JSON object")
    return decoded


def _secret_or_none(value: SecretStr | None) -> SecretStr | None:
    if value is None or not value.get_secret_value():
        return None
    return value


def resolve_config(supplied: ServerConfig | None = None) -> EffectiveConfig:
    """Merge a supplied config with the environment.

    Fields set on ``supplied`` win; otherwise the environment, read now, is
    used; the API key stays unset and the transcript language falls back to
    ``"en"`` when neither source has a value.
    """
    settings = Settings()
    api_key = None
    language = None
    if supplied is not None:
        api_key = _secret_or_none(supplied.api_key)
        language = supplied.transcript_language or None

    return EffectiveConfig(
        api_key=api_key or _secret_or_none(settings.youtube_api_key),
        transcript_language=(
            language or settings.youtube_transcript_lang or DEFAULT_TRANSCRIPT_LANGUAGE
        ),
    )
