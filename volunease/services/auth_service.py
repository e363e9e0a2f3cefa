import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from fastapi import Cookie, Depends, Response
from jose import jwt, JWTError

from ..config import settings
from ..errors import Forbidden, InternalError, Unauthorized

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# claims are caller supplied; only the signature is checked here and expiry
# below against the injected clock
DECODE_OPTIONS = {
    "verify_exp": False,
    "verify_aud": False,
    "verify_iat": False,
    "verify_nbf": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """Signs and verifies the session token carried in the ``token`` cookie.

    Expiry is checked against the injected clock rather than the wall clock,
    so the issuer holds no state besides its secret and settings.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60,
        clock: Clock = utc_now,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes
        self.clock = clock

    @property
    def max_age(self) -> int:
        return self.expires_minutes * 60

    def issue(self, claims: dict[str, Any]) -> str:
        """Return a signed token carrying ``claims`` and a fixed expiry."""
        expire = self.clock() + timedelta(minutes=self.expires_minutes)
        payload = dict(claims)
        payload["exp"] = int(expire.timestamp())
        try:
            return jwt.encode(payload, self.secret, algorithm=self.algorithm)
        except (JWTError, TypeError) as e:
            logger.error("Failed to sign session token: %s", e)
            raise InternalError() from e

    def authenticate(self, token: str | None) -> dict[str, Any]:
        """Verify ``token`` and return the claims it was issued with."""
        if not token:
            logger.info("No token")
            raise Unauthorized()
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options=DECODE_OPTIONS,
            )
        except JWTError as e:
            logger.info("Rejected session token: %s", e)
            raise Unauthorized() from e

        exp = claims.pop("exp", None)
        if not isinstance(exp, (int, float)) or exp <= self.clock().timestamp():
            logger.info("Session token expired")
            raise Unauthorized()
        return claims


def set_session_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        settings.COOKIE_NAME,
        token,
        max_age=max_age,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "strict",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        settings.COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "strict",
    )


_issuer = TokenIssuer(
    settings.JWT_SECRET,
    algorithm=settings.JWT_ALGORITHM,
    expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
)


def get_token_issuer() -> TokenIssuer:
    return _issuer


def get_current_user(
    token: str | None = Cookie(default=None, alias=settings.COOKIE_NAME),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict[str, Any]:
    """Auth guard: resolve the caller's claims from the session cookie."""
    return issuer.authenticate(token)


def ensure_owner(user: dict[str, Any], owner_id: Any) -> None:
    if owner_id is None or user.get("uid") != owner_id:
        raise Forbidden()
