"""Session helpers. The session cookie is signed by SessionMiddleware."""

import secrets
from typing import Optional

from fastapi import Request

from tinyapp.registry.models import AccountRecord


ACCOUNT_KEY = "account_id"
VISITOR_KEY = "visitor_id"


async def current_account(request: Request) -> Optional[AccountRecord]:
    """Account of the logged-in user, or None.
    
    A session pointing at an account that no longer exists (e.g. after a
    restart) is treated as logged out.
    """
    account_id = request.session.get(ACCOUNT_KEY)
    if not account_id:
        return None
    
    account = await request.app.state.service.get_account(account_id)
    if account is None:
        request.session.pop(ACCOUNT_KEY, None)
    return account


def ensure_visitor_id(request: Request) -> str:
    """Visitor id for this browser, assigned on first use."""
    visitor_id = request.session.get(VISITOR_KEY)
    if not visitor_id:
        visitor_id = secrets.token_urlsafe(12)
        request.session[VISITOR_KEY] = visitor_id
    return visitor_id


def start_session(request: Request, account_id: str) -> None:
    request.session[ACCOUNT_KEY] = account_id


def end_session(request: Request) -> None:
    # The visitor id survives logout so unique visit counts stay per browser
    request.session.pop(ACCOUNT_KEY, None)
