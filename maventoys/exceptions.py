class MavenToysError(Exception):
    """Base exception for the Maven Toys API."""

    def __init__(self, message=None):
        self.message = message or "An error occurred in the Maven Toys API"
        super().__init__(self.message)

    def to_dict(self):
        return {"message": self.message}


class IdNotFound(MavenToysError):
    """A lookup by identifier found no row; surfaces as 404."""


class GeneralException(MavenToysError):
    """Any other failure inside a service operation; surfaces as 500.

    ``message`` is the stable operation prefix shown to clients, while
    ``str(exc)`` also carries the cause for logs.
    """

    def __init__(self, message=None, cause=None):
        super().__init__(message or "Unexpected error")
        self.cause = cause

    def __str__(self):
        if self.cause is not None:
            return f"{self.message}: CAUSE: {self.cause}"
        return self.message


class InvalidRequest(MavenToysError):
    """Arguments are well-formed but inconsistent with each other; surfaces as 400."""
