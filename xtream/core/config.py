from pydantic_settings import BaseSettings, SettingsConfigDict

from xtream.core.constants import DEFAULT_STREAM_FORMAT


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    XTREAM_URL: str = ""
    XTREAM_USERNAME: str = ""
    XTREAM_PASSWORD: str = ""
    XTREAM_PREFERRED_FORMAT: str = DEFAULT_STREAM_FORMAT
    # One of "none", "Camel Case", "Standardized", "JSON:API"
    XTREAM_SERIALIZER: str = "none"
    XTREAM_TIMEOUT: float = 10.0


settings = Settings()
