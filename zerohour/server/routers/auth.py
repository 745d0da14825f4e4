from __future__ import annotations

import logging
import secrets
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from zerohour.errors import ZeroHourError, ErrorCode
from zerohour.server.state import ApplicationState, get_state

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

async def verify_admin_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    app_state: ApplicationState = Depends(get_state),
) -> bool:
    """
    Require `Authorization: Bearer <admin token>` on admin endpoints.

    HTTPBearer yields None both when the header is absent and when it is
    not a Bearer header, so the raw header tells the two apart.
    """
    endpoint = str(request.url.path)

    if credentials is None:
        if not request.headers.get("Authorization"):
            logger.warning("Admin request without Authorization header", extra={"endpoint": endpoint})
            raise ZeroHourError(
                ErrorCode.AUTH_TOKEN_MISSING,
                "Authorization header required. Use: Authorization: Bearer <token>",
                details={"endpoint": endpoint},
            )
        logger.warning("Admin request with malformed Authorization header", extra={"endpoint": endpoint})
        raise ZeroHourError(
            ErrorCode.AUTH_TOKEN_MALFORMED,
            "Invalid authorization format. Use: Authorization: Bearer <token>",
            details={"endpoint": endpoint},
        )

    # Only "Bearer <token>" with exactly one token is accepted
    if not credentials.credentials or " " in credentials.credentials.strip():
        raise ZeroHourError(
            ErrorCode.AUTH_TOKEN_MALFORMED,
            "Invalid authorization format. Use: Authorization: Bearer <token>",
            details={"endpoint": endpoint},
        )

    expected = app_state.config.security.admin_token
    if not secrets.compare_digest(credentials.credentials.encode(), expected.encode()):
        logger.warning("Admin request with invalid token", extra={"endpoint": endpoint})
        raise ZeroHourError(
            ErrorCode.AUTH_TOKEN_INVALID,
            "Invalid admin token.",
            details={"endpoint": endpoint},
        )

    return True
