from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from xtream.services.mappers.common import require


class StreamKind(str, Enum):
    CHANNEL = "channel"
    EPISODE = "episode"
    MOVIE = "movie"


class TimeShift(BaseModel):
    """A catch-up window on an archived live channel."""

    start: datetime
    duration: int = Field(gt=0, description="Length of the window in minutes")


class StreamDescriptor(BaseModel):
    """
    Everything needed to build a playable URL for one stream.

    The kind is explicit so URL construction never has to guess from payload fields.
    Episodes and movies are served as files, so they always carry a container extension.
    """

    kind: StreamKind
    id: str
    extension: str | None = None
    timeshift: TimeShift | None = None

    @model_validator(mode="after")
    def check_extension(self) -> "StreamDescriptor":
        if self.kind is not StreamKind.CHANNEL and not self.extension:
            raise ValueError(f"A container extension is required for {self.kind.value} streams")
        return self

    @classmethod
    def for_channel(cls, channel: dict[str, Any], timeshift: TimeShift | None = None) -> "StreamDescriptor":
        return cls(
            kind=StreamKind.CHANNEL,
            id=str(require(channel, "stream_id", "channel")),
            timeshift=timeshift,
        )

    @classmethod
    def for_episode(cls, episode: dict[str, Any]) -> "StreamDescriptor":
        return cls(
            kind=StreamKind.EPISODE,
            id=str(require(episode, "id", "episode")),
            extension=require(episode, "container_extension", "episode"),
        )

    @classmethod
    def for_movie_listing(cls, movie: dict[str, Any]) -> "StreamDescriptor":
        return cls(
            kind=StreamKind.MOVIE,
            id=str(require(movie, "stream_id", "movie")),
            extension=require(movie, "container_extension", "movie"),
        )

    @classmethod
    def for_movie(cls, movie: dict[str, Any]) -> "StreamDescriptor":
        """Build a descriptor from a movie detail payload, which keeps its stream data under movie_data."""
        return cls.for_movie_listing(require(movie, "movie_data", "movie"))
