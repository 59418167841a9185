from fastapi import HTTPException, Request

from solosphere.config import settings
from solosphere.services import session_service


async def require_session(request: Request) -> dict:
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized access")
    try:
        return session_service.decode(token)
    except session_service.SessionError as exc:
        raise HTTPException(status_code=401, detail=f"Token verification failed: {exc}") from exc
