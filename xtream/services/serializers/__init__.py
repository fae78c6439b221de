from enum import Enum

from xtream.services.serializers.base import SerializerSet, define_serializers, raw_serializer
from xtream.services.serializers.camelcase import camel_case_serializer
from xtream.services.serializers.jsonapi import jsonapi_serializer
from xtream.services.serializers.standardized import standardized_serializer


class SerializerType(Enum):
    NONE = "none"
    CAMEL_CASE = "Camel Case"
    STANDARDIZED = "Standardized"
    JSON_API = "JSON:API"


SERIALIZERS: dict[SerializerType, SerializerSet] = {
    SerializerType.NONE: raw_serializer,
    SerializerType.CAMEL_CASE: camel_case_serializer,
    SerializerType.STANDARDIZED: standardized_serializer,
    SerializerType.JSON_API: jsonapi_serializer,
}


def get_serializer(name: str | SerializerType) -> SerializerSet:
    """Look up a built-in serializer set by its shape name, e.g. "JSON:API"."""
    try:
        return SERIALIZERS[SerializerType(name)]
    except ValueError:
        raise ValueError(
            f"Unknown serializer '{name}', expected one of: {', '.join(t.value for t in SerializerType)}"
        ) from None


__all__ = [
    "SERIALIZERS",
    "SerializerSet",
    "SerializerType",
    "camel_case_serializer",
    "define_serializers",
    "get_serializer",
    "jsonapi_serializer",
    "raw_serializer",
    "standardized_serializer",
]
