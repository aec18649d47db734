"""
Authentication Dependency for FastAPI.

- Extracts and validates the JWT from the Authorization header (Bearer scheme)
- The `sub` claim is the caller's user id
- Raises HTTPException 401 if unauthorized
"""

import jwt
from dataclasses import dataclass
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from conversation_core.domain.value_objects.user_id import UserId
from conversation_core.config.settings import Config


@dataclass
class AuthUser:
    user_id: UserId

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("AuthUser must have a user id defined.")


security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SERVICE_AUTH_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    try:
        user_id = UserId(claims.get("sub") or "")
    except ValueError:
        user_id = None
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required claims in token",
        )

    return AuthUser(user_id=user_id)
