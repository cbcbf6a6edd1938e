"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from showcase.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    ``user_id`` is the stable identifier assigned by the identity provider.
    """

    user_id: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, expires_in: timedelta = timedelta(days=30)
) -> str:
    """Create a JWT token for the user.

    Issuance belongs to the identity provider integration; this helper exists
    for local development and tests.

    Args:
        user_id: User ID
        settings: Authentication settings
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "user_id": user_id,
        "exp": datetime.now(timezone.utc) + expires_in,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
