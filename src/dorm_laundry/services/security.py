'''
Session cookie handling: reading the token and setting/clearing the cookie.
'''
from typing import Annotated, Optional

from fastapi import Cookie, HTTPException, Response, status

from ..common.config import settings
from ..common.logger import log
from ..common import messages
from ..core.access import is_admin


def get_auth_token(
    auth_token: Annotated[Optional[str], Cookie(alias=settings.AUTH_COOKIE_NAME)] = None,
) -> str:
    """
    Dependency returning the session token from the `auth_token` cookie.
    A missing cookie or an empty value is a client error; the backend is not contacted.
    """
    if not auth_token:
        log.warning("Proxy request without auth_token cookie.")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=messages.TOKEN_NOT_FOUND,
        )
    return auth_token


def cookie_max_age(role: Optional[str]) -> int:
    """Admin sessions last one day, plain users seven."""
    if is_admin(role):
        return settings.ADMIN_COOKIE_MAX_AGE
    return settings.USER_COOKIE_MAX_AGE


def set_auth_cookie(response: Response, token: str, role: Optional[str] = None) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=cookie_max_age(role),
        path="/",
        secure=settings.COOKIE_SECURE,
        httponly=True,
        samesite="strict",
    )


def clear_auth_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value="",
        max_age=0,
        expires=0,
        path="/",
        secure=settings.COOKIE_SECURE,
        httponly=True,
        samesite="strict",
    )
