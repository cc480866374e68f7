import hmac
import logging
from fastapi import Request, HTTPException

from config.app_config import get_admin_identity, get_admin_token

logger = logging.getLogger(__name__)


def _request_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return ""


def _check_token(token: str) -> dict:
    expected = get_admin_token()
    if not expected:
        raise HTTPException(
            status_code=500,
            detail="ADMIN_API_TOKEN not configured. Set this environment variable."
        )

    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    if not hmac.compare_digest(token, expected):
        logger.warning("Rejected admin request with an invalid token")
        raise HTTPException(status_code=401, detail="Invalid admin token")

    return get_admin_identity()


async def get_current_admin(request: Request) -> dict:
    """
    Admin authentication via `Authorization: Bearer <ADMIN_API_TOKEN>`.
    Returns the admin identity recorded on writes such as enrolledBy.
    """
    return _check_token(_request_token(request))


async def get_current_admin_for_download(request: Request) -> dict:
    """Same as get_current_admin, also accepting ?token= for browser downloads"""
    token = _request_token(request) or request.query_params.get("token", "")
    return _check_token(token)
