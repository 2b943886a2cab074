"""
Schemas for tutor chat.
"""
from datetime import datetime
from typing import Optional

from pydantic import StrictInt, field_validator

from ai_tutor.schemas.common import CamelModel


class ChatCreate(CamelModel):
    """Schema for posting a chat message."""

    topic_id: StrictInt
    message: str

    @field_validator("message")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class ChatMessageResponse(CamelModel):
    """Schema for a stored chat message."""

    id: int
    user_id: Optional[int] = None
    topic_id: Optional[int] = None
    message: str
    is_ai: bool
    created_at: Optional[datetime] = None
