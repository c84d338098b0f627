from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

ERROR_MESSAGE = "Error fetching users"


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


@router.get("/users")
def get_all_users(request: Request):
    """Return every stored user as {"users": [...]}; any failure becomes a 500."""
    try:
        users = _get_user_service(request).get_users()
        return JSONResponse({"users": users}, status_code=200)
    except Exception:
        logger.exception("Failed to fetch users")
        return JSONResponse({"message": ERROR_MESSAGE}, status_code=500)
