"""
Origin allowlist for browser-facing proxy routes.

The CORS middleware only decorates responses; this check actually refuses
requests whose Origin is not on the list.
"""

import re

from fastapi import Request

from src.config import get_settings
from src.core.exceptions import OriginNotAllowedError


def origin_allowed(origin: str | None) -> bool:
    """
    Check an Origin header against the configured allowlist.

    Requests without an Origin (curl, server to server) are allowed.
    """
    if not origin:
        return True

    api = get_settings().api
    if origin in api.cors_origin_list:
        return True
    if api.cors_origin_regex and re.fullmatch(api.cors_origin_regex, origin):
        return True
    return False


async def require_allowed_origin(request: Request) -> None:
    """Route dependency rejecting disallowed origins with 403."""
    origin = request.headers.get("origin")
    if not origin_allowed(origin):
        raise OriginNotAllowedError(origin or "")
