"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from tinyapp.results import ErrorKind
from ..responses import (
    UNAUTHENTICATED_MESSAGE,
    message_for,
    short_url_for,
    status_for,
)
from ..session import current_account, end_session, ensure_visitor_id, start_session

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


def render_error(request: Request, status_code: int, message: str, user=None) -> HTMLResponse:
    """Render the shared error page."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {"user": user, "status_code": status_code, "error_message": message},
        status_code=status_code,
    )


def redirect(url: str) -> RedirectResponse:
    # 303 so browsers follow up with GET after POST/PUT/DELETE
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", include_in_schema=False)
async def homepage(request: Request):
    """Send logged-in users to their links, everyone else to login."""
    user = await current_account(request)
    return redirect("/urls" if user else "/login")


@router.get("/urls", response_class=HTMLResponse, include_in_schema=False)
async def list_urls(request: Request):
    """List the current user's short URLs."""
    user = await current_account(request)
    if user is None:
        return render_error(request, status.HTTP_401_UNAUTHORIZED, UNAUTHENTICATED_MESSAGE)

    links = await request.app.state.service.list_links(user.account_id)
    return templates.TemplateResponse(
        request,
        "urls_index.html",
        {
            "user": user,
            "links": links,
            "short_urls": {link.short_id: short_url_for(request, link.short_id) for link in links},
        },
    )


@router.get("/urls/new", response_class=HTMLResponse, include_in_schema=False)
async def new_url_form(request: Request):
    user = await current_account(request)
    if user is None:
        return redirect("/login")
    return templates.TemplateResponse(request, "urls_new.html", {"user": user})


@router.post("/urls", include_in_schema=False)
async def create_url(request: Request, long_url: str = Form("")):
    """Handle form submission to create a short URL."""
    user = await current_account(request)
    if user is None:
        return render_error(request, status.HTTP_401_UNAUTHORIZED, UNAUTHENTICATED_MESSAGE)

    short_id = await request.app.state.service.create_link(long_url.strip(), user.account_id)
    return redirect(f"/urls/{short_id}")


@router.get("/urls/{short_id}", response_class=HTMLResponse, include_in_schema=False)
async def show_url(request: Request, short_id: str):
    """Show one short URL with its edit form and visit statistics."""
    user = await current_account(request)
    if user is None:
        return render_error(request, status.HTTP_401_UNAUTHORIZED, UNAUTHENTICATED_MESSAGE)

    result = await request.app.state.service.get_owned_link(short_id, user.account_id)
    if not result.ok:
        return render_error(request, status_for(result.error), message_for(result.error, short_id), user)

    link = result.value
    return templates.TemplateResponse(
        request,
        "urls_show.html",
        {
            "user": user,
            "link": link,
            "short_url": short_url_for(request, short_id),
        },
    )


@router.put("/urls/{short_id}", include_in_schema=False)
async def update_url(request: Request, short_id: str, long_url: str = Form("")):
    """Replace the destination of a short URL (form posts with ?_method=PUT)."""
    user = await current_account(request)
    if user is None:
        return render_error(request, status.HTTP_401_UNAUTHORIZED, UNAUTHENTICATED_MESSAGE)

    result = await request.app.state.service.update_link(short_id, user.account_id, long_url.strip())
    if not result.ok:
        return render_error(request, status_for(result.error), message_for(result.error, short_id), user)

    return redirect("/urls")


@router.delete("/urls/{short_id}", include_in_schema=False)
async def delete_url(request: Request, short_id: str):
    """Delete a short URL (form posts with ?_method=DELETE)."""
    user = await current_account(request)
    if user is None:
        return render_error(request, status.HTTP_401_UNAUTHORIZED, UNAUTHENTICATED_MESSAGE)

    result = await request.app.state.service.delete_link(short_id, user.account_id)
    if not result.ok:
        return render_error(request, status_for(result.error), message_for(result.error, short_id), user)

    return redirect("/urls")


@router.get("/u/{short_id}", include_in_schema=False)
async def follow_short_url(request: Request, short_id: str):
    """Redirect to the destination and count the visit. No login needed."""
    visitor_id = ensure_visitor_id(request)
    result = await request.app.state.service.visit(short_id, visitor_id)

    if not result.ok:
        user = await current_account(request)
        return render_error(request, status_for(result.error), message_for(result.error, short_id), user)

    # 302 rather than 301 so every visit reaches us and is counted
    return RedirectResponse(url=result.value, status_code=status.HTTP_302_FOUND)


@router.get("/register", response_class=HTMLResponse, include_in_schema=False)
async def register_form(request: Request):
    if await current_account(request):
        return redirect("/urls")
    return templates.TemplateResponse(request, "register.html", {"user": None})


@router.post("/register", include_in_schema=False)
async def register(request: Request, email: str = Form(""), password: str = Form("")):
    """Create an account and log it in."""
    result = await request.app.state.service.register(email, password)
    if not result.ok:
        return templates.TemplateResponse(
            request,
            "register.html",
            {"user": None, "error_message": message_for(result.error), "email": email},
            status_code=status_for(result.error),
        )

    start_session(request, result.value)
    return redirect("/urls")


@router.get("/login", response_class=HTMLResponse, include_in_schema=False)
async def login_form(request: Request):
    if await current_account(request):
        return redirect("/urls")
    return templates.TemplateResponse(request, "login.html", {"user": None})


@router.post("/login", include_in_schema=False)
async def login(request: Request, email: str = Form(""), password: str = Form("")):
    """Check credentials; unknown email and wrong password look the same."""
    result = await request.app.state.service.login(email, password)
    if not result.ok:
        return templates.TemplateResponse(
            request,
            "login.html",
            {"user": None, "error_message": message_for(ErrorKind.INVALID), "email": email},
            status_code=status_for(ErrorKind.INVALID),
        )

    start_session(request, result.value)
    return redirect("/urls")


@router.post("/logout", include_in_schema=False)
async def logout(request: Request):
    end_session(request)
    return redirect("/login")


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    health = await request.app.state.service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )
