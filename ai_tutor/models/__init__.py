"""Models module - Import all models here for Alembic."""
from ai_tutor.db.base import Base
from ai_tutor.models.user import User
from ai_tutor.models.topic import Topic
from ai_tutor.models.quiz import Quiz, QuizResult
from ai_tutor.models.chat import ChatMessage

__all__ = ["Base", "User", "Topic", "Quiz", "QuizResult", "ChatMessage"]
