import base64
import binascii
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any


def to_number(value: Any) -> int | float | None:
    """
    Coerce a provider number that may arrive as a string.

    Integral strings give an int, other numeric strings a float.
    None, empty strings and anything non-numeric give None.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def to_bool(value: Any) -> bool:
    """Provider flags are 1/0 or "1"/"0"; only a one is true."""
    return value == 1 or value == "1"


def to_epoch_date(value: Any) -> datetime | None:
    """Convert epoch seconds (string or number) into an aware UTC datetime."""
    seconds = to_number(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def to_date(value: Any) -> datetime | None:
    """
    Parse a provider date such as "2024-06-15" or "2025-03-03 13:57:02".

    Naive values are read as UTC. Unparsable values give None instead of an invalid date.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def split_list(value: Any) -> list[str]:
    """Split a comma separated provider list, trimming every token."""
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item).strip() for item in value]
    return [token.strip() for token in str(value).split(",")]


def decode_base64_text(value: str | None) -> str | None:
    """Decode base64 transport text (EPG titles and descriptions) into UTF-8."""
    if value is None:
        return None
    try:
        raw = base64.b64decode(value + "=" * (-len(value) % 4), validate=True)
    except (binascii.Error, ValueError):
        return value
    return raw.decode("utf-8", errors="replace")


def to_str_id(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def first_present(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first value under keys that is neither None nor an empty string."""
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None
