from pydantic import BaseModel, Field, field_validator, model_validator

from xtream.core.constants import DEFAULT_STREAM_FORMAT


class ClientOptions(BaseModel):
    """Connection details for one Xtream account."""

    url: str = Field(default="", validate_default=True)
    username: str = ""
    password: str = ""
    preferred_format: str = Field(default=DEFAULT_STREAM_FORMAT, description="Preferred live stream container")

    @field_validator("url", mode="before")
    @classmethod
    def validate_url(cls, value: str | None) -> str:
        if not value or not str(value).strip():
            raise ValueError("The Xtream URL is required")
        return str(value).strip().rstrip("/")

    @field_validator("username", "password", mode="before")
    @classmethod
    def strip_credentials(cls, value: str | None) -> str:
        return str(value).strip() if value else ""

    @field_validator("preferred_format", mode="before")
    @classmethod
    def default_format(cls, value: str | None) -> str:
        return value or DEFAULT_STREAM_FORMAT

    @model_validator(mode="after")
    def validate_credentials(self):
        if not self.username or not self.password:
            raise ValueError("The authentication credentials are required")
        return self
