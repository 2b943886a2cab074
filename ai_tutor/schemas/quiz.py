"""
Schemas for quizzes and quiz results.
"""
from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import Field, StrictInt

from ai_tutor.core.agents.tutor.schemas import QuizQuestion
from ai_tutor.schemas.common import CamelModel


class QuizCreate(CamelModel):
    """Schema for requesting a generated quiz."""

    topic_id: StrictInt
    difficulty: Literal["easy", "medium", "hard"] = "medium"


class QuizResponse(CamelModel):
    """Schema for a stored quiz."""

    id: int
    user_id: int
    topic_id: int
    questions: List[QuizQuestion]
    created_at: Optional[datetime] = None


class QuizResultCreate(CamelModel):
    """
    Schema for submitting a finished quiz.

    ``answers`` holds the selected option index for each question, in
    question order. The score is computed by the client and stored as-is.
    """

    quiz_id: StrictInt
    score: StrictInt = Field(..., ge=0)
    answers: List[Annotated[StrictInt, Field(ge=0, le=3)]]


class QuizResultResponse(CamelModel):
    """Schema for a stored quiz result."""

    id: int
    user_id: Optional[int] = None
    quiz_id: Optional[int] = None
    score: int
    answers: List[int]
    created_at: Optional[datetime] = None
