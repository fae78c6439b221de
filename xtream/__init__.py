from xtream.core.exceptions import MalformedPayloadError, NotFoundError, XtreamError, XtreamRequestError
from xtream.core.version import __version__
from xtream.models.stream import StreamDescriptor, StreamKind, TimeShift
from xtream.services.serializers import (
    SerializerSet,
    SerializerType,
    camel_case_serializer,
    define_serializers,
    get_serializer,
    jsonapi_serializer,
    raw_serializer,
    standardized_serializer,
)
from xtream.services.xtream import Xtream

__all__ = [
    "MalformedPayloadError",
    "NotFoundError",
    "SerializerSet",
    "SerializerType",
    "StreamDescriptor",
    "StreamKind",
    "TimeShift",
    "Xtream",
    "XtreamError",
    "XtreamRequestError",
    "__version__",
    "camel_case_serializer",
    "define_serializers",
    "get_serializer",
    "jsonapi_serializer",
    "raw_serializer",
    "standardized_serializer",
]
