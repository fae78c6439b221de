class XtreamError(Exception):
    """Base class for every error raised by the Xtream client."""


class XtreamRequestError(XtreamError):
    """The provider answered with a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(XtreamError):
    """The provider signalled that the requested item does not exist."""


class MalformedPayloadError(XtreamError, ValueError):
    """A payload is missing the identity field that a mapper needs."""

    def __init__(self, entity: str, field: str):
        super().__init__(f"{entity} payload is missing required field '{field}'")
        self.entity = entity
        self.field = field
