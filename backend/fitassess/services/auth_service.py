"""
JWT authentication service.

Verifies bearer tokens issued by the identity service and resolves the
current user. Token issuance lives outside this backend.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from fitassess.config import settings
from fitassess.database import get_db
from fitassess.models.user import User

logger = logging.getLogger(__name__)

# Security scheme for Bearer token authentication
security = HTTPBearer(auto_error=False)


class AuthenticationError(Exception):
    """Exception raised when authentication fails."""
    pass


def verify_token(token: str) -> int:
    """
    Verify a JWT token and extract the user ID.

    Validates the token signature, expiration, and required claims.

    Args:
        token: The JWT token string to verify

    Returns:
        int: The user ID extracted from the token

    Raises:
        AuthenticationError: If the token is invalid, expired, or missing required claims

    Example:
        >>> user_id = verify_token("eyJhbGci...")
        >>> print(user_id)
        1
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )

        user_id_str: str = payload.get("sub")
        if user_id_str is None:
            logger.warning("Token missing 'sub' claim")
            raise AuthenticationError("Invalid token: missing subject")

        # Verify token type
        token_type = payload.get("type")
        if token_type != "access":
            logger.warning(f"Invalid token type: {token_type}")
            raise AuthenticationError("Invalid token type")

        user_id = int(user_id_str)
        logger.debug(f"Token verified for user {user_id}")
        return user_id

    except JWTError as e:
        logger.warning(f"JWT verification failed: {str(e)}")
        raise AuthenticationError(f"Invalid token: {str(e)}")
    except ValueError as e:
        logger.warning(f"Invalid user ID in token: {str(e)}")
        raise AuthenticationError("Invalid token: malformed subject")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Extracts the bearer token from the Authorization header, verifies it,
    and returns the corresponding active user from the database.

    Raises:
        HTTPException: 401 if not authenticated, the token is invalid,
            or the user is unknown or deactivated
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        logger.debug("No credentials provided")
        raise credentials_exception

    try:
        user_id = verify_token(credentials.credentials)
    except AuthenticationError as e:
        logger.warning(f"Authentication failed: {str(e)}")
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()

    if user is None or not user.is_active:
        logger.warning(f"User {user_id} not found or inactive")
        raise credentials_exception

    return user
