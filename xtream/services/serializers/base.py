from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any

Serializer = Callable[[Any], Any]


def identity(payload: Any) -> Any:
    return payload


@dataclass(frozen=True)
class SerializerSet:
    """
    One output shape: a stable type name plus one function per entity kind.

    The client hands each function the decoded provider payload for that kind and returns
    whatever it produces.
    """

    type: str
    profile: Serializer = identity
    server_info: Serializer = identity
    channel_categories: Serializer = identity
    movie_categories: Serializer = identity
    show_categories: Serializer = identity
    channels: Serializer = identity
    movies: Serializer = identity
    movie: Serializer = identity
    shows: Serializer = identity
    show: Serializer = identity
    short_epg: Serializer = identity
    full_epg: Serializer = identity


SERIALIZER_NAMES = frozenset(f.name for f in fields(SerializerSet) if f.name != "type")


def define_serializers(type: str, **functions: Serializer) -> SerializerSet:
    """
    Build a serializer set from per-entity functions.

    Entity kinds without a function pass the provider payload through unchanged.
    """
    unknown = set(functions) - SERIALIZER_NAMES
    if unknown:
        raise ValueError(f"Unknown serializer function(s): {', '.join(sorted(unknown))}")
    return SerializerSet(type=type, **functions)


raw_serializer = define_serializers("none")
