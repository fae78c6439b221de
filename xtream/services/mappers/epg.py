from typing import Any

from xtream.services.mappers.common import omit, require
from xtream.utils.fields import decode_base64_text, to_bool, to_date, to_epoch_date, to_str_id
from xtream.utils.keys import normalize_keys

_SHORT_CONSUMED = (
    "id",
    "channelId",
    "lang",
    "startTimestamp",
    "stopTimestamp",
    "stop",
    "start",
    "end",
    "title",
    "description",
)

_FULL_CONSUMED = _SHORT_CONSUMED + ("nowPlaying", "hasArchive")


def epg_listings(payload: dict[str, Any] | None) -> list[dict[str, Any]]:
    """The listing array of a get_short_epg / get_simple_data_table response."""
    if not isinstance(payload, dict):
        return []
    return payload.get("epg_listings") or []


def _listing_fields(data: dict[str, Any], consumed: tuple[str, ...]) -> dict[str, Any]:
    return {
        "id": to_str_id(require(data, "id", "epg listing")),
        **omit(data, consumed),
        "start": to_date(data.get("start")),
        "title": decode_base64_text(data.get("title")),
        "description": decode_base64_text(data.get("description")),
        "language": data.get("lang") or None,
        "channelId": to_str_id(data.get("channelId")),
    }


def map_short_epg_listing(listing: dict[str, Any]) -> dict[str, Any]:
    """Normalize a get_short_epg listing, whose `end` is epoch seconds."""
    data = normalize_keys(listing, deep=True)
    return {**_listing_fields(data, _SHORT_CONSUMED), "end": to_epoch_date(data.get("end"))}


def map_full_epg_listing(listing: dict[str, Any]) -> dict[str, Any]:
    """Normalize a get_simple_data_table listing, whose `end` is already a date."""
    data = normalize_keys(listing, deep=True)
    return {
        **_listing_fields(data, _FULL_CONSUMED),
        "end": to_date(data.get("end")),
        "nowPlaying": to_bool(data.get("nowPlaying")),
        "hasArchive": to_bool(data.get("hasArchive")),
    }
