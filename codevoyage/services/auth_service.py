from fastapi import Header, HTTPException, status
from typing import Optional
import logging

logger = logging.getLogger(__name__)

SIGN_IN_REQUIRED = "Please sign in to save roadmaps"

async def get_current_user(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Return the owner id forwarded by the upstream auth layer.

    Sign-in itself happens outside this service; requests reach us with the
    authenticated user's id in the ``X-User-Id`` header.
    """
    if not x_user_id or not x_user_id.strip():
        logger.warning("Rejected request without an authenticated user")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=SIGN_IN_REQUIRED
        )
    return x_user_id.strip()
