from typing import Any

from xtream.services.mappers.common import omit
from xtream.utils.fields import to_bool, to_epoch_date, to_number
from xtream.utils.keys import normalize_keys


def map_profile(profile: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize the user_info block of get_profile.

    exp_date is null for accounts that never expire, which gives expiresAt None.
    """
    data = normalize_keys(profile)

    return {
        "id": data.get("username"),
        **omit(data, ("auth", "expDate", "maxConnections", "activeCons", "createdAt", "isTrial")),
        "isTrial": to_bool(data.get("isTrial")),
        "maxConnections": to_number(data.get("maxConnections")),
        "activeConnections": to_number(data.get("activeCons")),
        "createdAt": to_epoch_date(data.get("createdAt")),
        "expiresAt": to_epoch_date(data.get("expDate")),
    }


def map_server_info(server_info: dict[str, Any]) -> dict[str, Any]:
    """Normalize the server_info block of get_server_info."""
    data = normalize_keys(server_info)

    return {
        "id": data.get("url"),
        **omit(data, ("timestampNow", "timeNow")),
        "timeNow": to_epoch_date(data.get("timestampNow")),
    }
