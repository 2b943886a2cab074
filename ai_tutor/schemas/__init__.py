"""Schemas module - Import all schemas."""
from ai_tutor.schemas.user import User, UserCreate, Token
from ai_tutor.schemas.topic import TopicCreate, TopicResponse
from ai_tutor.schemas.quiz import QuizCreate, QuizResponse, QuizResultCreate, QuizResultResponse
from ai_tutor.schemas.chat import ChatCreate, ChatMessageResponse
from ai_tutor.schemas.common import CamelModel, Message

__all__ = [
    "User",
    "UserCreate",
    "Token",
    "TopicCreate",
    "TopicResponse",
    "QuizCreate",
    "QuizResponse",
    "QuizResultCreate",
    "QuizResultResponse",
    "ChatCreate",
    "ChatMessageResponse",
    "CamelModel",
    "Message",
]
