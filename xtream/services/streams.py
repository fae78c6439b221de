from collections.abc import Sequence

from loguru import logger

from xtream.core.constants import (
    DEFAULT_STREAM_FORMAT,
    LIVE_PATH,
    MOVIE_PATH,
    SERIES_PATH,
    TIMESHIFT_PATH,
    TIMESHIFT_START_FORMAT,
)
from xtream.models.stream import StreamDescriptor, StreamKind


def resolve_live_format(preferred_format: str, allowed_formats: Sequence[str] | None) -> str:
    """
    Pick the container for a live stream.

    The preferred format is used when the account allows it, otherwise the first allowed one.
    RTMP is not served over the live path so it maps to MPEG-TS.
    """
    fmt = preferred_format or DEFAULT_STREAM_FORMAT

    if allowed_formats and fmt not in allowed_formats:
        logger.warning(f"Format '{fmt}' not in allowed formats {list(allowed_formats)}, using '{allowed_formats[0]}'")
        fmt = allowed_formats[0]

    if fmt == "rtmp":
        return DEFAULT_STREAM_FORMAT
    return fmt


def generate_stream_url(
    stream: StreamDescriptor,
    *,
    base_url: str,
    username: str,
    password: str,
    preferred_format: str = DEFAULT_STREAM_FORMAT,
    allowed_formats: Sequence[str] | None = None,
) -> str:
    """Build the playable URL for a channel, episode or movie."""
    base = base_url.rstrip("/")

    if stream.kind is StreamKind.CHANNEL:
        if stream.timeshift is not None:
            start = stream.timeshift.start.strftime(TIMESHIFT_START_FORMAT)
            return (
                f"{base}/{TIMESHIFT_PATH}/{username}/{password}/"
                f"{stream.timeshift.duration}/{start}/{stream.id}.{DEFAULT_STREAM_FORMAT}"
            )
        fmt = resolve_live_format(preferred_format, allowed_formats)
        return f"{base}/{LIVE_PATH}/{username}/{password}/{stream.id}.{fmt}"

    prefix = SERIES_PATH if stream.kind is StreamKind.EPISODE else MOVIE_PATH
    return f"{base}/{prefix}/{username}/{password}/{stream.id}.{stream.extension}"
