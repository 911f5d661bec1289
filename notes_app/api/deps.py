"""Shared API dependencies."""
from fastapi import Request

from notes_app.config import get_settings
from notes_app.exceptions import AuthenticationError

settings = get_settings()


def get_current_user_id(request: Request) -> str:
    """
    Dependency returning the authenticated user's id.

    Sessions are handled upstream; the user id arrives in the configured
    header. Requests without it never reach a data operation.
    """
    user_id = request.headers.get(settings.user_id_header, "").strip()
    if not user_id:
        raise AuthenticationError("Not authenticated")
    return user_id
