from typing import Any

from xtream.services.mappers.common import category_ids, omit, require
from xtream.utils.fields import to_bool, to_epoch_date, to_number, to_str_id
from xtream.utils.keys import normalize_keys

_CONSUMED = (
    "added",
    "num",
    "streamId",
    "streamType",
    "categoryId",
    "categoryIds",
    "streamIcon",
    "epgChannelId",
    "tvArchive",
    "tvArchiveDuration",
)


def map_channel(channel: dict[str, Any]) -> dict[str, Any]:
    """Normalize a live channel from get_live_streams."""
    data = normalize_keys(channel)

    return {
        "id": to_str_id(require(data, "streamId", "channel")),
        "number": to_number(data.get("num")),
        **omit(data, _CONSUMED),
        "tvArchive": to_bool(data.get("tvArchive")),
        "tvArchiveDuration": to_number(data.get("tvArchiveDuration")),
        "logo": data.get("streamIcon"),
        "epgId": data.get("epgChannelId"),
        "createdAt": to_epoch_date(data.get("added")),
        "categoryIds": category_ids(data),
    }
