"""Domain errors raised by the catalog layer."""


class CatalogError(Exception):
    """Base class for catalog errors that map onto an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """The requested identifier, author or title has no match."""

    status_code = 404


class InternalError(CatalogError):
    """Unexpected failure while completing a deferred lookup."""

    status_code = 500


class CatalogLoadError(Exception):
    """The catalog source could not be read or validated."""
