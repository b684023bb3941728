"""Exceptions raised at the persistence and interchange boundaries."""


class RemoteError(Exception):
    """Base class for any failed call against the remote store."""

    pass


class ValidationError(RemoteError):
    """Raised when an entry (or a record claiming to be one) has a bad shape."""

    pass


class MissingIdentifierError(ValidationError):
    """Raised when a delete is requested without a usable entry id."""

    pass


class TransportError(RemoteError):
    """Raised when the remote store is unreachable or reports failure."""

    pass


class MalformedRowError(ValueError):
    """Raised when a CSV line cannot be split into fields."""

    pass
