"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class LinkResponse(BaseModel):
    """A short URL owned by the caller."""
    
    short_id: str = Field(..., description="The short id")
    short_url: str = Field(..., description="The complete short URL")
    long_url: str = Field(..., description="The destination URL")
    created_at: datetime = Field(..., description="Creation timestamp")
    total_visits: int = Field(..., ge=0, description="Redirects served")
    unique_visits: int = Field(..., ge=0, description="Distinct visitors")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_id": "b2xVn2",
                    "short_url": "http://localhost:8080/u/b2xVn2",
                    "long_url": "http://www.lighthouselabs.ca",
                    "created_at": "2024-01-01T12:00:00Z",
                    "total_visits": 3,
                    "unique_visits": 2,
                }
            ]
        }
    }


class VisitResponse(BaseModel):
    """One redirect traversal."""
    
    visitor_id: str
    timestamp: datetime


class LinkStatsResponse(LinkResponse):
    """A short URL with its full visit log."""
    
    visits: List[VisitResponse] = Field(default_factory=list, description="Visits, oldest first")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    registries: str = Field(..., description="Registry status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    detail: str = Field(..., description="Error message")


class StatisticsResponse(BaseModel):
    """Statistics response."""
    
    total_links: int
    total_accounts: int
    total_visits: int
    storage: str
