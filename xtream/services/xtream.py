import asyncio
from typing import Any

import httpx
from loguru import logger

from xtream.core.config import settings
from xtream.core.constants import DEFAULT_STREAM_FORMAT, PROFILE_PREFETCH_ACTIONS
from xtream.core.exceptions import NotFoundError
from xtream.models.options import ClientOptions
from xtream.models.stream import StreamDescriptor, TimeShift
from xtream.services.client import XtreamClient
from xtream.services.serializers import SerializerSet, SerializerType, get_serializer, raw_serializer
from xtream.services.streams import generate_stream_url


def paginate(items: list[Any], page: int | None, limit: int | None) -> list[Any]:
    """Slice one page out of a full listing; both page and limit are needed to page."""
    if not page or not limit:
        return items
    start = (page - 1) * limit
    return items[start : start + limit]


class Xtream:
    """
    Client for one Xtream Codes account.

    Fetches provider payloads, attaches playable URLs and hands the result to the
    serializer set chosen at construction time, which decides the output shape.
    """

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        preferred_format: str = DEFAULT_STREAM_FORMAT,
        serializer: SerializerSet | SerializerType | str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.options = ClientOptions(
            url=url,
            username=username,
            password=password,
            preferred_format=preferred_format,
        )
        if serializer is None:
            serializer = raw_serializer
        elif not isinstance(serializer, SerializerSet):
            serializer = get_serializer(serializer)
        self.serializers = serializer

        self.user_profile: dict[str, Any] | None = None
        self._profile_lock = asyncio.Lock()
        self._client = XtreamClient(
            base_url=self.options.url,
            username=self.options.username,
            password=self.options.password,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, **overrides: Any) -> "Xtream":
        """Build a client from the XTREAM_* environment settings."""
        kwargs = {
            "url": settings.XTREAM_URL,
            "username": settings.XTREAM_USERNAME,
            "password": settings.XTREAM_PASSWORD,
            "preferred_format": settings.XTREAM_PREFERRED_FORMAT,
            "serializer": settings.XTREAM_SERIALIZER,
            "timeout": settings.XTREAM_TIMEOUT,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    @property
    def serializer_type(self) -> str:
        return self.serializers.type

    @property
    def base_url(self) -> str:
        return self.options.url

    async def close(self):
        await self._client.close()

    async def __aenter__(self) -> "Xtream":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _ensure_profile(self) -> None:
        """Stream URLs depend on the account's allowed formats, so fetch the profile once."""
        if self.user_profile is not None:
            return
        async with self._profile_lock:
            if self.user_profile is None:
                profile = await self._client.call("get_profile")
                self.user_profile = profile.get("user_info") or {}
                logger.info(f"Loaded Xtream profile for {self.options.username}")

    async def _request(self, action: str, **params: Any) -> Any:
        if action in PROFILE_PREFETCH_ACTIONS:
            await self._ensure_profile()
        return await self._client.call(action, **params)

    def generate_stream_url(self, stream: StreamDescriptor) -> str:
        """Playable URL for a channel, episode or movie of this account."""
        allowed = (self.user_profile or {}).get("allowed_output_formats") or []
        return generate_stream_url(
            stream,
            base_url=self.options.url,
            username=self.options.username,
            password=self.options.password,
            preferred_format=self.options.preferred_format,
            allowed_formats=allowed,
        )

    def generate_timeshift_url(self, channel: dict[str, Any], timeshift: TimeShift) -> str:
        return self.generate_stream_url(StreamDescriptor.for_channel(channel, timeshift=timeshift))

    async def get_profile(self) -> Any:
        profile = await self._request("get_profile")
        return self.serializers.profile(profile["user_info"])

    async def get_server_info(self) -> Any:
        profile = await self._request("get_server_info")
        return self.serializers.server_info(profile["server_info"])

    async def get_channel_categories(self) -> Any:
        categories = await self._request("get_live_categories")
        return self.serializers.channel_categories(categories)

    async def get_movie_categories(self) -> Any:
        categories = await self._request("get_vod_categories")
        return self.serializers.movie_categories(categories)

    async def get_show_categories(self) -> Any:
        categories = await self._request("get_series_categories")
        return self.serializers.show_categories(categories)

    async def get_channels(
        self,
        category_id: str | int | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Any:
        channels = await self._request("get_live_streams", category_id=category_id)
        channels = paginate(channels, page, limit)
        for channel in channels:
            channel["url"] = self.generate_stream_url(StreamDescriptor.for_channel(channel))
        return self.serializers.channels(channels)

    async def get_movies(
        self,
        category_id: str | int | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Any:
        movies = await self._request("get_vod_streams", category_id=category_id)
        movies = paginate(movies, page, limit)
        for movie in movies:
            movie["url"] = self.generate_stream_url(StreamDescriptor.for_movie_listing(movie))
        return self.serializers.movies(movies)

    async def get_movie(self, movie_id: str | int) -> Any:
        movie = await self._request("get_vod_info", vod_id=movie_id)

        # unknown ids come back with an empty list in place of the info object
        if not movie or movie.get("info") == [] or not movie.get("movie_data"):
            raise NotFoundError("Movie Not Found")

        movie["url"] = self.generate_stream_url(StreamDescriptor.for_movie(movie))
        return self.serializers.movie(movie)

    async def get_shows(
        self,
        category_id: str | int | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Any:
        shows = await self._request("get_series", category_id=category_id)
        return self.serializers.shows(paginate(shows, page, limit))

    async def get_show(self, show_id: str | int) -> Any:
        show = await self._request("get_series_info", series_id=show_id)

        info = show.get("info") if isinstance(show, dict) else None
        if not isinstance(info, dict) or info.get("name") is None:
            raise NotFoundError("Show Not Found")
        if info.get("series_id") in (None, ""):
            info["series_id"] = show_id

        episodes = show.get("episodes") or {}
        groups = episodes.values() if isinstance(episodes, dict) else episodes
        for group in groups:
            for episode in group if isinstance(group, list) else [group]:
                episode["url"] = self.generate_stream_url(StreamDescriptor.for_episode(episode))

        return self.serializers.show(show)

    async def get_short_epg(self, channel_id: str | int, limit: int | None = None) -> Any:
        epg = await self._request("get_short_epg", stream_id=channel_id, limit=limit)
        return self.serializers.short_epg(epg)

    async def get_full_epg(self, channel_id: str | int) -> Any:
        epg = await self._request("get_simple_data_table", stream_id=channel_id)
        return self.serializers.full_epg(epg)
