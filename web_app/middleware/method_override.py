"""HTTP method override for HTML forms."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


OVERRIDE_PARAM = "_method"
ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """Let ``POST /path?_method=DELETE`` reach the DELETE route.
    
    Browsers can only submit forms with GET or POST. Only POST requests are
    rewritten, and only to PUT, PATCH or DELETE.
    """
    
    async def dispatch(self, request: Request, call_next: Callable):
        if request.method == "POST":
            override = request.query_params.get(OVERRIDE_PARAM, "").upper()
            if override in ALLOWED_METHODS:
                # call_next runs the app on this same scope dict
                request.scope["method"] = override
        
        return await call_next(request)
