"""
JSON:API serializers (https://jsonapi.org/).

Every entity becomes a resource object `{type, id, attributes, relationships}` and every
response is a `{"data": ...}` document. Links between entities (categories, parents,
seasons, episodes, channels) are expressed as relationships rather than embedded ids, and
a show detail carries its seasons and episodes in `included`.
"""

from typing import Any

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
from xtream.services.mappers.common import omit
from xtream.services.serializers.base import define_serializers


def identifier(type: str, id: Any) -> dict[str, str]:
    return {"type": type, "id": str(id)}


def to_one(type: str, id: Any) -> dict[str, Any] | None:
    if id is None or id == "":
        return None
    return {"data": identifier(type, id)}


def to_many(type: str, ids: list[Any]) -> dict[str, Any] | None:
    if not ids:
        return None
    return {"data": [identifier(type, id) for id in ids]}


def resource(
    type: str,
    record: dict[str, Any],
    exclude: tuple[str, ...] = (),
    **relationships: dict[str, Any] | None,
) -> dict[str, Any]:
    """
    Turn a mapped record into a resource object.

    `id` and the keys in `exclude` are lifted out of the attributes. Relationships that
    resolved to None are dropped, and so is the whole relationships member when none are left.
    """
    document = {
        "type": type,
        "id": str(record["id"]),
        "attributes": omit(record, ("id",) + exclude),
    }
    links = {name: value for name, value in relationships.items() if value is not None}
    if links:
        document["relationships"] = links
    return document


def category_resource(category: dict[str, Any], type: str) -> dict[str, Any]:
    record = map_category(category)
    return resource(type, record, ("parentId",), parent=to_one(type, record.get("parentId")))


def category_serializer(type: str):
    def serialize(payload: list[dict[str, Any]]) -> dict[str, Any]:
        return {"data": [category_resource(category, type) for category in payload]}

    return serialize


def profile(payload: dict[str, Any]) -> dict[str, Any]:
    return {"data": resource("user-profile", map_profile(payload))}


def server_info(payload: dict[str, Any]) -> dict[str, Any]:
    return {"data": resource("server-info", map_server_info(payload))}


def channel_resource(channel: dict[str, Any]) -> dict[str, Any]:
    record = map_channel(channel)
    return resource(
        "channel",
        record,
        ("categoryIds",),
        categories=to_many("channel-category", record["categoryIds"]),
    )


def channels(payload: list[dict[str, Any]]) -> dict[str, Any]:
    return {"data": [channel_resource(channel) for channel in payload]}


def movie_resource(record: dict[str, Any]) -> dict[str, Any]:
    return resource(
        "movie",
        record,
        ("categoryIds",),
        categories=to_many("movie-category", record["categoryIds"]),
    )


def movies(payload: list[dict[str, Any]]) -> dict[str, Any]:
    return {"data": [movie_resource(map_movie_listing(movie)) for movie in payload]}


def movie(payload: dict[str, Any]) -> dict[str, Any]:
    return {"data": movie_resource(map_movie(payload))}


def shows(payload: list[dict[str, Any]]) -> dict[str, Any]:
    data = []
    for show in payload:
        record = map_show_listing(show)
        data.append(
            resource(
                "show",
                record,
                ("categoryIds",),
                categories=to_many("show-category", record["categoryIds"]),
            )
        )
    return {"data": data}


def show(payload: dict[str, Any]) -> dict[str, Any]:
    graph = map_show(payload)
    show_id = graph.show["id"]

    seasons = [
        resource(
            "season",
            season,
            ("showId",),
            show=to_one("show", show_id),
            episodes=to_many("episode", [episode["id"] for episode in graph.episodes_of(season["id"])]),
        )
        for season in graph.seasons
    ]
    episodes = [
        resource(
            "episode",
            episode,
            ("showId", "seasonId"),
            season=to_one("season", episode["seasonId"]),
            show=to_one("show", show_id),
        )
        for episode in graph.episodes
    ]

    data = resource(
        "show",
        graph.show,
        ("categoryIds",),
        categories=to_many("show-category", graph.show["categoryIds"]),
        seasons=to_many("season", [season["id"] for season in graph.seasons]),
        episodes=to_many("episode", [episode["id"] for episode in graph.episodes]),
    )
    return {"data": data, "included": seasons + episodes}


def epg_resource(record: dict[str, Any]) -> dict[str, Any]:
    return resource("epg-listing", record, ("channelId",), channel=to_one("channel", record.get("channelId")))


def short_epg(payload: dict[str, Any]) -> dict[str, Any]:
    return {"data": [epg_resource(map_short_epg_listing(listing)) for listing in epg_listings(payload)]}


def full_epg(payload: dict[str, Any]) -> dict[str, Any]:
    return {"data": [epg_resource(map_full_epg_listing(listing)) for listing in epg_listings(payload)]}


jsonapi_serializer = define_serializers(
    "JSON:API",
    profile=profile,
    server_info=server_info,
    channel_categories=category_serializer("channel-category"),
    movie_categories=category_serializer("movie-category"),
    show_categories=category_serializer("show-category"),
    channels=channels,
    movies=movies,
    movie=movie,
    shows=shows,
    show=show,
    short_epg=short_epg,
    full_epg=full_epg,
)
