"""Link field exceptions."""


class LinkFieldError(Exception):
    """Base class for link field errors."""


class RecordShapeError(LinkFieldError, ValueError):
    """Raised when a record or record type payload lacks a required field."""


class MoveReferenceError(LinkFieldError):
    """Raised when a reference cannot be removed from its current parent."""
