"""
Standardized output records.

Field names are consistent across entity kinds: every record has an `id`, dates are
datetimes, flags are booleans, lists are lists. Provider fields that are not renamed are
kept as extra fields.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

Number = int | float


class StandardModel(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class StandardProfile(StandardModel):
    """The account behind the credentials; `id` is the username."""

    id: str | None = None
    username: str | None = None
    password: str | None = None
    message: str | None = None
    status: str | None = None
    isTrial: bool = False
    activeConnections: Number | None = None
    maxConnections: Number | None = None
    allowedOutputFormats: list[str] = Field(default_factory=list)
    createdAt: datetime | None = None
    # None for accounts without an expiry date
    expiresAt: datetime | None = None


class StandardServerInfo(StandardModel):
    """The panel serving the account; `id` is its URL."""

    id: str | None = None
    url: str | None = None
    port: str | None = None
    httpsPort: str | None = None
    serverProtocol: str | None = None
    rtmpPort: str | None = None
    timezone: str | None = None
    timeNow: datetime | None = None


class StandardCategory(StandardModel):
    """A live, VOD or series category. `parentId` is an extra field, present only for child categories."""

    id: str
    name: str | None = None


class StandardChannel(StandardModel):
    id: str
    name: str | None = None
    number: Number | None = None
    epgId: str | None = None
    logo: str | None = None
    thumbnail: str | None = None
    customSid: str | None = None
    directSource: str | None = None
    tvArchive: bool = False
    tvArchiveDuration: Number | None = Field(default=None, description="Archive depth in days")
    url: str | None = None
    createdAt: datetime | None = None
    categoryIds: list[str] = Field(default_factory=list)


class StandardMovieListing(StandardModel):
    id: str
    name: str | None = None
    title: str | None = None
    year: str | None = None
    plot: str | None = None
    poster: str | None = None
    voteAverage: Number | None = None
    releaseDate: datetime | None = None
    duration: Number | None = Field(default=None, description="Runtime in seconds")
    cast: list[str] = Field(default_factory=list)
    director: list[str] = Field(default_factory=list)
    genre: list[str] = Field(default_factory=list)
    youtubeId: str | None = None
    containerExtension: str | None = None
    url: str | None = None
    createdAt: datetime | None = None
    categoryIds: list[str] = Field(default_factory=list)


class MovieRating(StandardModel):
    mpaa: str | None = None
    age: Number | None = None


class StandardMovie(StandardModel):
    id: str
    name: str | None = None
    originalName: str | None = None
    informationUrl: str | None = None
    tmdbId: str | None = None
    cover: str | None = None
    poster: str | None = None
    releaseDate: datetime | None = None
    youtubeId: str | None = None
    director: list[str] = Field(default_factory=list)
    actors: list[str] = Field(default_factory=list)
    cast: list[str] = Field(default_factory=list)
    genre: list[str] = Field(default_factory=list)
    description: str | None = None
    plot: str | None = None
    country: str | None = None
    rating: MovieRating = Field(default_factory=MovieRating)
    duration: Number | None = Field(default=None, description="Runtime in seconds")
    durationFormatted: str | None = None
    bitrate: Number | None = None
    subtitles: list[Any] = Field(default_factory=list)
    voteAverage: Number | None = None
    containerExtension: str | None = None
    url: str | None = None
    createdAt: datetime | None = None
    categoryIds: list[str] = Field(default_factory=list)


class StandardEpisode(StandardModel):
    id: str
    number: Number | None = None
    title: str | None = None
    plot: str | None = None
    seasonNumber: Number | None = None
    releaseDate: datetime | None = None
    duration: Number | None = Field(default=None, description="Runtime in seconds")
    durationFormatted: str | None = None
    poster: str | None = None
    cover: str | None = None
    tmdbId: str | None = None
    voteAverage: Number | None = None
    containerExtension: str | None = None
    url: str | None = None
    createdAt: datetime | None = None
    seasonId: str
    showId: str


class StandardSeason(StandardModel):
    id: str
    name: str | None = None
    number: Number | None = None
    overview: str | None = None
    episodeCount: Number | None = None
    voteAverage: Number | None = None
    cover: str | None = None
    releaseDate: datetime | None = None
    showId: str
    episodes: list[StandardEpisode] = Field(default_factory=list)


class StandardShowListing(StandardModel):
    id: str
    name: str | None = None
    title: str | None = None
    year: str | None = None
    plot: str | None = None
    voteAverage: Number | None = None
    poster: str | None = None
    cover: str | None = None
    releaseDate: datetime | None = None
    duration: Number | None = Field(default=None, description="Average episode runtime in seconds")
    youtubeId: str | None = None
    cast: list[str] = Field(default_factory=list)
    director: list[str] = Field(default_factory=list)
    genre: list[str] = Field(default_factory=list)
    updatedAt: datetime | None = None
    categoryIds: list[str] = Field(default_factory=list)


class StandardShow(StandardShowListing):
    seasons: list[StandardSeason] = Field(default_factory=list)


class StandardEPGListing(StandardModel):
    id: str
    epgId: str | None = None
    channelId: str | None = None
    title: str | None = None
    description: str | None = None
    language: str | None = None
    start: datetime | None = None
    end: datetime | None = None


class StandardFullEPGListing(StandardEPGListing):
    nowPlaying: bool = False
    hasArchive: bool = False
