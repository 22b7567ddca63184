"""
Common dependencies for route handlers.
"""
import json

from fastapi import Request

from housing_portal.exceptions import MalformedInput
from housing_portal.services import PortalServices, build_sql_services

_services = None


def get_services() -> PortalServices:
    """Database-backed workflow services, created on first use."""
    global _services
    if _services is None:
        _services = build_sql_services()
    return _services


async def read_json_body(request: Request):
    """Parsed JSON request body; MalformedInput if it is not valid JSON."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInput("Request body must be valid JSON") from e
