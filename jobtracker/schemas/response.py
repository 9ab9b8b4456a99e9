"""
Uniform response envelope.

Every API response body is built by one of the two constructors below:

    {"status": "success", "data": ..., "message": ..., "metadata": ...}
    {"status": "error", "message": ..., "code": ...}

Keys without a value are left out of the body entirely, so a response that
carries no pagination never has a `metadata` key.
"""

import math
from typing import Any, Dict, Optional
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field


class PaginationMeta(BaseModel):
    """Pagination details attached to list responses"""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")

    @classmethod
    def from_total(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        """Build metadata for a page, with totalPages = ceil(total / limit)."""
        return cls(total=total, page=page, limit=limit, total_pages=math.ceil(total / limit))


def _encode(value: Any) -> Any:
    return jsonable_encoder(value, by_alias=True, exclude_none=True)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    metadata: Any = None
) -> Dict[str, Any]:
    """
    Build a success envelope.

    Args:
        data: Payload for the client (models are encoded with their wire aliases)
        message: Short description of the outcome, e.g. "Job Created"
        metadata: Extra context such as PaginationMeta

    Returns:
        JSON-ready dictionary
    """
    body: Dict[str, Any] = {"status": "success"}
    if data is not None:
        body["data"] = _encode(data)
    if message is not None:
        body["message"] = message
    if metadata is not None:
        body["metadata"] = _encode(metadata)
    return body


def error_response(message: str, code: Optional[str] = None) -> Dict[str, Any]:
    """
    Build an error envelope.

    Args:
        message: Human-readable description of what went wrong
        code: Optional machine-readable error code, e.g. "JOB_NOT_FOUND"

    Returns:
        JSON-ready dictionary
    """
    body: Dict[str, Any] = {"status": "error", "message": message}
    if code is not None:
        body["code"] = code
    return body
