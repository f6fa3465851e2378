"""
Authentication endpoints.

- POST /auth/register: Create a (non-admin) user account and return a token
- POST /auth/token: Exchange username/password for a token
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.errors import BadRequestError, UnauthorizedError
from jobly.core.security import verify_password, get_password_hash, create_access_token
from jobly.models.user import User
from jobly.schemas.user import UserRegisterRequest, UserLoginRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def create_token_for(user: User) -> str:
    return create_access_token(data={"sub": user.username, "is_admin": user.is_admin})


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    Users created here are never admins; admin rights are granted directly
    in the database.
    """
    if db.get(User, request.username) is not None:
        raise BadRequestError(f"Duplicate username: {request.username}")

    new_user = User(
        username=request.username,
        hashed_password=get_password_hash(request.password),
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        is_admin=False,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"New user registered: {new_user.username}")
    return TokenResponse(token=create_token_for(new_user))


@router.post("/token", response_model=TokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """Authenticate user and return a JWT."""
    user = db.get(User, request.username)
    if not user or not verify_password(request.password, user.hashed_password):
        raise UnauthorizedError("Invalid username/password")

    logger.info(f"User logged in: {user.username} (admin: {user.is_admin})")
    return TokenResponse(token=create_token_for(user))
