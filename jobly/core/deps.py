"""
FastAPI dependencies for authentication and authorization.

Mutating job endpoints depend on get_admin_user, which in turn requires a
valid bearer token.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.errors import UnauthorizedError, ForbiddenError
from jobly.core.security import JWTError, decode_token
from jobly.models.user import User

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported through UnauthorizedError
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from the bearer token.

    Raises:
        UnauthorizedError: If the token is missing, invalid, expired, or
            names a user that no longer exists
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    username: str = payload.get("sub")
    if username is None:
        raise UnauthorizedError("Could not validate credentials")

    user = db.get(User, username)
    if user is None:
        raise UnauthorizedError("Could not validate credentials")

    return user


async def get_admin_user(user: User = Depends(get_current_user)) -> User:
    """
    Require the current user to be an admin.

    The flag is read from the database, not from the token, so revoking
    admin rights takes effect immediately.

    Raises:
        ForbiddenError: If the user is not an admin
    """
    if not user.is_admin:
        logger.warning(f"Non-admin user {user.username} attempted an admin action")
        raise ForbiddenError("Admin privileges required")

    return user
