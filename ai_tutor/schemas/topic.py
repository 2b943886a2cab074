"""
Schemas for learning topics.
"""
from datetime import datetime
from typing import Optional

from pydantic import field_validator

from ai_tutor.core.agents.tutor.schemas import Curriculum
from ai_tutor.schemas.common import CamelModel


class TopicCreate(CamelModel):
    """Schema for topic creation."""

    name: str
    description: str

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class TopicResponse(CamelModel):
    """Schema for a stored topic."""

    id: int
    user_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    curriculum: Optional[Curriculum] = None
    created_at: Optional[datetime] = None
