"""
Chat history model for tutor conversations.
"""
from sqlalchemy import Boolean, Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ai_tutor.db.base import Base


class ChatMessage(Base):
    """
    A single message in a (user, topic) conversation.
    Messages are append-only and replayed in creation order.
    """

    __tablename__ = "chat_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), nullable=True, index=True)
    message = Column(Text, nullable=False)
    is_ai = Column(Boolean, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    topic = relationship("Topic", back_populates="chat_messages")
