"""
Topic model - a subject of study with its generated curriculum.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ai_tutor.db.base import Base


class Topic(Base):
    """Topic model."""

    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    curriculum = Column(JSON, nullable=True)  # {sections, estimatedDuration, prerequisites}
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="topics")
    quizzes = relationship("Quiz", back_populates="topic")
    chat_messages = relationship("ChatMessage", back_populates="topic")
