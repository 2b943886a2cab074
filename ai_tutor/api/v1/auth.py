"""
Authentication endpoints for user registration and login.
"""
import logging
from datetime import timedelta
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from ai_tutor.core.config import settings
from ai_tutor.core.dependencies import AuthenticatedPrincipal, get_current_principal, get_db
from ai_tutor.core.exceptions import InvalidInput, NotFound, Unauthorized
from ai_tutor.core.security import create_access_token, get_password_hash, verify_password
from ai_tutor.models.user import User
from ai_tutor.schemas.user import Token, User as UserSchema, UserCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, db: Session = Depends(get_db)) -> Any:
    """
    Register a new user.

    Args:
        user_in: User registration data
        db: Database session

    Returns:
        Created user

    Raises:
        InvalidInput: If the username already exists
    """
    user = db.query(User).filter(User.username == user_in.username).first()
    if user:
        raise InvalidInput("Username already exists")

    user = User(
        username=user_in.username,
        hashed_password=get_password_hash(user_in.password),
        learning_goals=user_in.learning_goals,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


@router.post("/login", response_model=Token)
def login(
    db: Session = Depends(get_db), form_data: OAuth2PasswordRequestForm = Depends()
) -> Any:
    """
    Login user and return JWT token.

    Raises:
        Unauthorized: If credentials are invalid
    """
    user = db.query(User).filter(User.username == form_data.username).first()

    if not user or not verify_password(form_data.password, user.hashed_password):  # type: ignore
        raise Unauthorized("Incorrect username or password")

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(subject=str(user.id), expires_delta=access_token_expires)

    return Token(
        access_token=access_token,
        token_type="bearer",
        expires_in=int(access_token_expires.total_seconds()),
    )


@router.get("/me", response_model=UserSchema)
def read_current_user(
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> Any:
    """Get current authenticated user."""
    user = db.get(User, principal.id)
    if user is None:
        raise NotFound("User not found")
    return user
