"""
Models for generated quizzes and submitted quiz results.
"""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ai_tutor.db.base import Base


class Quiz(Base):
    """Quiz model - an immutable set of generated questions for a topic."""

    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    topic_id = Column(Integer, ForeignKey("topics.id"), nullable=False, index=True)
    questions = Column(JSON, nullable=False)  # [{question, options, correctAnswer, explanation}]
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    topic = relationship("Topic", back_populates="quizzes")
    results = relationship("QuizResult", back_populates="quiz")


class QuizResult(Base):
    """Quiz result model - append-only record of a submitted attempt."""

    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    quiz_id = Column(Integer, ForeignKey("quizzes.id"), nullable=True, index=True)
    score = Column(Integer, nullable=False)
    answers = Column(JSON, nullable=False)  # Selected option index per question
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    quiz = relationship("Quiz", back_populates="results")
