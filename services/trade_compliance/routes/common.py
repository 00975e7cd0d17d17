"""
Request Helpers
===============

JSON body handling shared by the trade compliance routes.

Both endpoints read the raw request instead of a Pydantic body model
so that every client input error is a 400 with a readable message.

Version: 0.1.0
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import HTTPException, Request, status


JSON_MEDIA_TYPE = "application/json"


async def read_json_object(request: Request) -> dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Raises:
        HTTPException: 400 if the content type is not JSON, the body does
            not parse, or the top-level value is not an object.
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Expected JSON body.",
        )

    try:
        body = await request.json()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body.",
        ) from e

    if not isinstance(body, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid JSON body.",
        )
    return body


def string_field(body: dict[str, Any], key: str) -> str:
    """Trimmed string value; missing or non-string values read as empty."""
    value = body.get(key)
    if not isinstance(value, str):
        return ""
    return value.strip()


def utc_timestamp() -> str:
    """Current instant as an ISO-8601 UTC string."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
