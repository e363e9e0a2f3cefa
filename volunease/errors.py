"""Error types raised by the services and mapped to HTTP responses in main."""


class VolunEaseError(Exception):
    """Base class for errors that end a request with a known status."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(VolunEaseError):
    status_code = 401
    message = "Unauthorised"


class Forbidden(VolunEaseError):
    status_code = 403
    message = "Forbidden"


class NotFound(VolunEaseError):
    status_code = 404
    message = "Not found"


class Conflict(VolunEaseError):
    status_code = 409
    message = "Conflict"


class CapacityExhausted(Conflict):
    """Raised when a post has no volunteer slots left."""

    message = "No volunteer slots left for this post"


class InternalError(VolunEaseError):
    pass
