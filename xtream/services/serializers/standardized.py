"""
Standardized serializers.

Every entity goes through its mapper and is then validated into the matching
`xtream.models.standardized` record, so consumers get the same field names and types
whichever panel the data came from. Collections are plain lists and a show detail nests
its seasons, which nest their episodes.
"""

from typing import Any

from xtream.models.standardized import (
    StandardCategory,
    StandardChannel,
    StandardEpisode,
    StandardFullEPGListing,
    StandardEPGListing,
    StandardMovie,
    StandardMovieListing,
    StandardProfile,
    StandardSeason,
    StandardServerInfo,
    StandardShow,
    StandardShowListing,
)
from xtream.services.mappers import (
    epg_listings,
    map_category,
    map_channel,
    map_full_epg_listing,
    map_movie,
    map_movie_listing,
    map_profile,
    map_server_info,
    map_short_epg_listing,
    map_show,
    map_show_listing,
)
from xtream.services.serializers.base import define_serializers


def profile(payload: dict[str, Any]) -> StandardProfile:
    return StandardProfile.model_validate(map_profile(payload))


def server_info(payload: dict[str, Any]) -> StandardServerInfo:
    return StandardServerInfo.model_validate(map_server_info(payload))


def categories(payload: list[dict[str, Any]]) -> list[StandardCategory]:
    # parentId is only carried as an extra field when the category has a parent
    return [StandardCategory.model_validate(map_category(category)) for category in payload]


def channels(payload: list[dict[str, Any]]) -> list[StandardChannel]:
    return [StandardChannel.model_validate(map_channel(channel)) for channel in payload]


def movies(payload: list[dict[str, Any]]) -> list[StandardMovieListing]:
    return [StandardMovieListing.model_validate(map_movie_listing(movie)) for movie in payload]


def movie(payload: dict[str, Any]) -> StandardMovie:
    return StandardMovie.model_validate(map_movie(payload))


def shows(payload: list[dict[str, Any]]) -> list[StandardShowListing]:
    return [StandardShowListing.model_validate(map_show_listing(show)) for show in payload]


def show(payload: dict[str, Any]) -> StandardShow:
    graph = map_show(payload)
    seasons = []
    for season in graph.seasons:
        episodes = [StandardEpisode.model_validate(episode) for episode in graph.episodes_of(season["id"])]
        seasons.append(StandardSeason.model_validate({**season, "episodes": episodes}))
    return StandardShow.model_validate({**graph.show, "seasons": seasons})


def short_epg(payload: dict[str, Any]) -> list[StandardEPGListing]:
    return [StandardEPGListing.model_validate(map_short_epg_listing(listing)) for listing in epg_listings(payload)]


def full_epg(payload: dict[str, Any]) -> list[StandardFullEPGListing]:
    return [StandardFullEPGListing.model_validate(map_full_epg_listing(listing)) for listing in epg_listings(payload)]


standardized_serializer = define_serializers(
    "Standardized",
    profile=profile,
    server_info=server_info,
    channel_categories=categories,
    movie_categories=categories,
    show_categories=categories,
    channels=channels,
    movies=movies,
    movie=movie,
    shows=shows,
    show=show,
    short_epg=short_epg,
    full_epg=full_epg,
)
