import logging
from typing import Any

from fastapi import APIRouter, Body, Response

from solosphere.schemas.results import SuccessResponse
from solosphere.services import session_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


@router.post("/jwt", response_model=SuccessResponse)
async def issue_session(response: Response, identity: dict[str, Any] = Body(...)):
    token = session_service.issue(identity)
    response.set_cookie(**session_service.session_cookie_kwargs(token))
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def revoke_session(response: Response):
    # Only the cookie goes away; the token itself stays valid until it expires.
    response.delete_cookie(**session_service.clear_session_cookie_kwargs())
    logger.debug("Session cookie cleared")
    return SuccessResponse()
