"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from conduit.config import AuthSettings


class Claim(BaseModel):
    """Verified JWT payload.

    ``sub`` carries the username the token was issued for.
    """

    sub: str
    iat: datetime
    exp: datetime

    @property
    def username(self) -> str:
        return self.sub


class InvalidTokenError(Exception):
    """Token is malformed, badly signed or expired."""

    pass


def create_token(username: str, settings: AuthSettings) -> str:
    """Create a signed JWT for the user.

    Args:
        username: Subject of the token
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": username,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> Claim:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Claim if valid

    Raises:
        InvalidTokenError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
        return Claim(**payload)
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("Invalid token")
