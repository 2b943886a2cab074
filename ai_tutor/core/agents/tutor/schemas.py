"""
Pydantic schemas for content returned by the generation service.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

QUIZ_QUESTION_COUNT = 5
OPTIONS_PER_QUESTION = 4


class GeneratedModel(BaseModel):
    """Base for generated documents, stored and served with camelCase keys."""

    class Config:
        """Pydantic config."""

        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CurriculumSection(GeneratedModel):
    """One ordered section of a curriculum."""
    title: str
    description: str = ""
    objectives: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)


class Curriculum(GeneratedModel):
    """Structured learning path for a topic."""
    sections: List[CurriculumSection] = Field(..., min_length=1)
    estimated_duration: str
    prerequisites: List[str]

    @field_validator("estimated_duration", mode="before")
    @classmethod
    def duration_to_text(cls, v: Union[str, int, float]):
        """Models sometimes answer with a bare number of hours."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class QuizQuestion(GeneratedModel):
    """Multiple-choice question with exactly four options."""
    question: str
    options: List[str] = Field(..., min_length=OPTIONS_PER_QUESTION, max_length=OPTIONS_PER_QUESTION)
    correct_answer: int = Field(..., ge=0, le=OPTIONS_PER_QUESTION - 1)
    explanation: Optional[str] = None


class GeneratedQuiz(GeneratedModel):
    """Envelope the generation service answers with for a quiz request."""
    questions: List[QuizQuestion] = Field(
        ..., min_length=QUIZ_QUESTION_COUNT, max_length=QUIZ_QUESTION_COUNT
    )


class WeaknessAnalysis(GeneratedModel):
    """Weak areas (area -> explanation) and ordered recommendations."""
    weak_areas: Dict[str, str]
    recommendations: List[str]
