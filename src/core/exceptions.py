"""Custom exceptions shared across layers."""


class ScavengerHuntError(Exception):
    """Base for every error raised by this application."""


# --- Persistence / collaborators ---
class PersistenceError(ScavengerHuntError):
    """Storage or connectivity failure inside a repository."""


class StorageError(ScavengerHuntError):
    """Blob store could not save the image."""


# A failing blob store is an upstream dependency fault.
UpstreamDependencyError = StorageError


# --- Service level errors (carry everything needed for an error payload) ---
class ServiceError(ScavengerHuntError):
    """Error that is translated into an HTTP error response."""

    title = "Error"
    status_code = 500

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else [message]


class ValidationError(ServiceError):
    title = "Validation Error"
    status_code = 400


class BadRequestError(ServiceError):
    title = "Bad Request"
    status_code = 400


class UnauthorizedError(ServiceError):
    title = "Unauthorized"
    status_code = 401


class NotFoundError(ServiceError):
    title = "Not Found"
    status_code = 404

    def __init__(
        self, message: str, details: list[str] | None = None, title: str | None = None
    ) -> None:
        super().__init__(message, details)
        if title is not None:
            self.title = title


class BadGatewayError(ServiceError):
    title = "Bad Gateway Error"
    status_code = 502
