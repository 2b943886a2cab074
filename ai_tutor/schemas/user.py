"""
Pydantic schemas for User model.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from ai_tutor.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Schema for user registration."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=6, max_length=72)
    learning_goals: Optional[str] = None


class User(CamelModel):
    """Schema for user response."""

    id: int
    username: str
    learning_goals: Optional[str] = None
    created_at: Optional[datetime] = None


class Token(CamelModel):
    """Schema for JWT token."""

    access_token: str
    token_type: str
    expires_in: int
