"""Translation of registry outcomes into HTTP terms."""

from fastapi import Request, status

from tinyapp.common.headers import build_base_url, get_forwarded_path_prefix
from tinyapp.common.url_builder import build_short_url
from tinyapp.results import ErrorKind


STATUS_BY_ERROR = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID: status.HTTP_403_FORBIDDEN,
}

UNAUTHENTICATED_MESSAGE = "Please log in or register to manage short URLs."


def status_for(kind: ErrorKind) -> int:
    return STATUS_BY_ERROR[kind]


def message_for(kind: ErrorKind, short_id: str = "") -> str:
    """User-facing message for an error kind."""
    if kind is ErrorKind.NOT_FOUND:
        return f"Short URL '{short_id}' does not exist."
    if kind is ErrorKind.FORBIDDEN:
        return f"You do not own short URL '{short_id}'."
    if kind is ErrorKind.CONFLICT:
        return "Email and password are required, and the email must not already be registered."
    return "Invalid email or password."


def short_url_for(request: Request, short_id: str) -> str:
    """Absolute redirect URL for ``short_id`` as seen by the client."""
    config = request.app.state.config
    headers = dict(request.headers)
    
    base_url = build_base_url(
        headers=headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    path_prefix = get_forwarded_path_prefix(headers) or config.path_prefix
    
    return build_short_url(short_id=short_id, base_url=base_url, path_prefix=path_prefix)
