"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware
from .middleware.method_override import MethodOverrideMiddleware


def create_app(
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        service_instance: TinyAppService instance (may be None and set later
            in the lifespan handler)
        config: Configuration instance
        logger: Optional logger for request logging
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="TinyApp",
        description="URL shortener with accounts, link ownership and visit analytics",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    
    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    
    # Last added runs first: logging, then method override, then session
    app.add_middleware(
        SessionMiddleware,
        secret_key=config.session_secret_key,
        session_cookie=config.session_cookie,
        max_age=config.session_max_age,
        same_site="lax",
        https_only=config.session_https_only,
    )
    app.add_middleware(MethodOverrideMiddleware)
    app.add_middleware(
        LoggingMiddleware,
        logger=logger.getChild("web") if logger else None,
    )
    
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])
    
    return app
