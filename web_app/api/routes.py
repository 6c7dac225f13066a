"""API routes implementation."""

from typing import List

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from tinyapp.registry.models import LinkRecord
from .schemas import (
    LinkResponse,
    LinkStatsResponse,
    VisitResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from ..responses import UNAUTHENTICATED_MESSAGE, message_for, short_url_for, status_for
from ..session import current_account

router = APIRouter()


def _link_response(request: Request, link: LinkRecord) -> LinkResponse:
    return LinkResponse(
        short_id=link.short_id,
        short_url=short_url_for(request, link.short_id),
        long_url=link.long_url,
        created_at=link.created_at,
        total_visits=link.total_visits,
        unique_visits=link.unique_visits,
    )


async def _require_account_id(request: Request) -> str:
    user = await current_account(request)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHENTICATED_MESSAGE,
        )
    return user.account_id


@router.get(
    "/urls",
    response_model=List[LinkResponse],
    responses={
        401: {"model": ErrorResponse, "description": "Not logged in"},
    },
    summary="List my short URLs",
    description="List the short URLs owned by the logged-in account.",
)
async def list_urls(request: Request):
    """List the caller's short URLs."""
    account_id = await _require_account_id(request)
    links = await request.app.state.service.list_links(account_id)
    return [_link_response(request, link) for link in links]


@router.get(
    "/urls/{short_id}",
    response_model=LinkStatsResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Not logged in"},
        403: {"model": ErrorResponse, "description": "Short URL owned by another account"},
        404: {"model": ErrorResponse, "description": "Short id not found"},
    },
    summary="Get short URL statistics",
    description="Get a short URL owned by the caller, including its visit log.",
)
async def get_url_stats(request: Request, short_id: str):
    """Get statistics for one of the caller's short URLs."""
    account_id = await _require_account_id(request)
    result = await request.app.state.service.get_owned_link(short_id, account_id)
    
    if not result.ok:
        raise HTTPException(
            status_code=status_for(result.error),
            detail=message_for(result.error, short_id),
        )
    
    link = result.value
    return LinkStatsResponse(
        **_link_response(request, link).model_dump(),
        visits=[
            VisitResponse(visitor_id=visit.visitor_id, timestamp=visit.timestamp)
            for visit in link.visit_log
        ],
    )


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    stats = await request.app.state.service.get_statistics()
    return StatisticsResponse(**stats)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    health = await request.app.state.service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        registries="healthy" if health["registries"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
