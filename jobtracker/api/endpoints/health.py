"""
Health check endpoint.
"""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_class=PlainTextResponse)
async def health_check() -> str:
    """
    Liveness probe.

    Returns 200 OK with a plain-text body while the process is serving
    requests. Does not touch the database and needs no credentials.
    """
    return "Server is healthy"
