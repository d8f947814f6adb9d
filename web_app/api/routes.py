"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from pydantic import ValidationError as SchemaValidationError

from .schemas import CreateRequest, CreateResponse, ErrorResponse, HealthResponse
from shortener.errors import ContentTypeError, ValidationError
from shortener.common.headers import build_base_url
from shortener.common.url_builder import build_short_url

router = APIRouter()


async def parse_create_request(request: Request) -> CreateRequest:
    """Parse the JSON body of a create request.

    Raises:
        ContentTypeError: If the body is not declared as JSON
        ValidationError: If the body is not a JSON object of the right shape
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        raise ContentTypeError()

    try:
        data = await request.json()
    except ValueError:
        raise ValidationError("invalid JSON body")

    if not isinstance(data, dict):
        raise ValidationError("invalid JSON body")

    try:
        return CreateRequest.model_validate(data)
    except SchemaValidationError:
        raise ValidationError("url must be a string")


@router.post(
    "/new",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. URLs without a scheme are stored with http://.",
)
async def create_url(request: Request):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    body = await parse_create_request(request)
    short_url = await service.create_short_url(body.url)

    base_url = build_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    return CreateResponse(url=build_short_url(short_url.id, base_url))


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["storage"] else "unhealthy",
        urls=health["urls"],
        visits=health["visits"],
        timestamp=datetime.now(timezone.utc),
    )
