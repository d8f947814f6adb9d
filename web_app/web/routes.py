"""Redirect routes implementation."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from shortener.common.headers import client_ip

router = APIRouter()


@router.get("/{url_id}", include_in_schema=False)
async def visit_url(request: Request, url_id: str):
    """Redirect to the original URL and record the visit in the background."""
    service = request.app.state.service

    # Raises NotFoundError (404) for unknown ids
    short_url = await service.get_short_url(url_id)

    service.record_visit(
        url_id=short_url.id,
        ip=client_ip(request.headers, request.client.host if request.client else None),
        referer=request.headers.get("referer", ""),
        user_agent=request.headers.get("user-agent", ""),
    )

    return RedirectResponse(url=short_url.url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
