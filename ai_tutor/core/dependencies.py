"""
Dependency injection for FastAPI endpoints.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends
from fastapi.dependencies.models import Dependant
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from ai_tutor.core.agents.tutor.generator import TutorGenerator
from ai_tutor.core.config import settings
from ai_tutor.core.exceptions import Unauthorized
from ai_tutor.core.security import decode_token
from ai_tutor.db.base import SessionLocal
from ai_tutor.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """The verified caller of a request."""

    id: int
    username: str
    learning_goals: Optional[str] = None


def get_db() -> Generator:
    """
    Dependency for database session.

    Yields:
        Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_access_token(token: Optional[str]) -> int:
    """
    Check a bearer token and return the user id it was issued for.

    Raises:
        Unauthorized: If the token is missing, invalid or not an access token
    """
    if not token:
        raise Unauthorized("Not authorized")

    payload = decode_token(token)
    if payload is None or payload.get("type") != "access":
        raise Unauthorized("Could not validate credentials")

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise Unauthorized("Could not validate credentials")
    return int(user_id)


def get_current_principal(
    db: Session = Depends(get_db), token: Optional[str] = Depends(oauth2_scheme)
) -> AuthenticatedPrincipal:
    """
    Resolve the caller from the bearer token.

    Args:
        db: Database session
        token: JWT token

    Returns:
        The authenticated principal

    Raises:
        Unauthorized: If the token is missing or invalid, or the user is gone
    """
    user_id = verify_access_token(token)

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise Unauthorized("Could not validate credentials")

    return AuthenticatedPrincipal(
        id=int(user.id),  # type: ignore[arg-type]
        username=str(user.username),
        learning_goals=user.learning_goals,  # type: ignore[arg-type]
    )


def requires_principal(dependant: Dependant) -> bool:
    """Whether an endpoint's dependency tree includes ``get_current_principal``."""
    return any(
        dep.call is get_current_principal or requires_principal(dep)
        for dep in dependant.dependencies
    )


@lru_cache
def get_tutor_generator() -> TutorGenerator:
    """Shared generation adapter; the underlying client is stateless."""
    return TutorGenerator()
