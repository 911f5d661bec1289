"""Domain exceptions raised by the service layer.

Routers never catch these; ``notes_app.main`` registers handlers that turn
them into JSON error responses with the matching status code.
"""


class NotesAppError(Exception):
    """Base class for all application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(NotesAppError):
    """Malformed input: empty note body, too-short update text, invalid URL."""

    status_code = 422


class NotFoundError(NotesAppError):
    """Referenced note does not exist."""

    status_code = 404


class PreconditionError(NotesAppError):
    """Operation requires state that is missing, e.g. no webhook configured."""

    status_code = 400


class AuthenticationError(NotesAppError):
    """No authenticated user identity on the request."""

    status_code = 401


class NotificationDeliveryFailure(NotesAppError):
    """Outbound webhook POST failed. Logged by the notifier, never surfaced."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Webhook delivery to {url} failed: {reason}")
        self.url = url
        self.reason = reason
