"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class CreateRequest(BaseModel):
    """Request to shorten a URL."""

    url: Optional[str] = Field("", description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
                {"url": "example.com"},
            ]
        }
    }


class CreateResponse(BaseModel):
    """Response after shortening a URL."""

    url: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [{"url": "http://localhost:3000/aB3-"}]
        }
    }


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    code: int = Field(..., description="HTTP status code")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    urls: int = Field(..., description="Number of stored short URLs")
    visits: int = Field(..., description="Number of recorded visits")
    timestamp: datetime = Field(..., description="Check timestamp")
