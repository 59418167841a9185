from datetime import datetime, timedelta, timezone

import jwt

from solosphere.config import settings

ALGORITHM = "HS256"


# Only the signature and expiry are checked; the other registered claims are
# whatever the client asserted when the token was issued.
DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "require": ["exp"],
}


class SessionError(Exception):
    pass


def _secret() -> str:
    if not settings.secret_key:
        raise RuntimeError("SECRET_KEY is not configured")
    return settings.secret_key


def issue(identity: dict) -> str:
    """Sign whatever identity the client supplied; there is no credential check."""
    now = datetime.now(timezone.utc)
    claims = {
        **identity,
        "iat": now,
        "exp": now + timedelta(days=settings.session_ttl_days),
    }
    return jwt.encode(claims, _secret(), algorithm=ALGORITHM)


def decode(token: str) -> dict:
    try:
        return dict(jwt.decode(token, _secret(), algorithms=[ALGORITHM], options=DECODE_OPTIONS))
    except jwt.PyJWTError as exc:
        raise SessionError(str(exc)) from exc


def _cookie_attributes() -> dict:
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }


def session_cookie_kwargs(token: str) -> dict:
    return {
        "key": settings.session_cookie_name,
        "value": token,
        **_cookie_attributes(),
    }


def clear_session_cookie_kwargs() -> dict:
    return {"key": settings.session_cookie_name, **_cookie_attributes()}
