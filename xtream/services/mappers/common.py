from collections.abc import Iterable, Mapping
from typing import Any

from xtream.core.exceptions import MalformedPayloadError
from xtream.utils.fields import to_number, to_str_id


def require(data: Mapping[str, Any], key: str, entity: str) -> Any:
    """Fetch an identity field, failing loudly when the provider left it out."""
    value = data.get(key) if isinstance(data, Mapping) else None
    if value is None or value == "":
        raise MalformedPayloadError(entity, key)
    return value


def omit(data: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Everything in data except keys, i.e. the fields a mapper passes through untouched."""
    excluded = set(keys)
    return {key: value for key, value in data.items() if key not in excluded}


def as_mapping(value: Any) -> dict[str, Any]:
    """Providers send [] instead of {} for empty objects."""
    return dict(value) if isinstance(value, Mapping) else {}


def category_ids(data: Mapping[str, Any]) -> list[str]:
    """
    Stringified category ids of a camel-cased record.

    Older panels only send the primary categoryId, so that is used when categoryIds is missing.
    """
    ids = data.get("categoryIds")
    if ids is None:
        primary = data.get("categoryId")
        ids = [primary] if primary not in (None, "") else []
    return [to_str_id(value) for value in ids if value is not None]


def minutes_to_seconds(value: Any) -> int | float | None:
    minutes = to_number(value)
    return minutes * 60 if minutes is not None else None
