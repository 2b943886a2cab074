"""
Quiz endpoints: generate a quiz for a topic and fetch it back.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ai_tutor.core.agents.tutor.generator import TutorGenerator
from ai_tutor.core.dependencies import (
    AuthenticatedPrincipal,
    get_current_principal,
    get_db,
    get_tutor_generator,
)
from ai_tutor.core.exceptions import InternalError, NotFound, TutorError
from ai_tutor.models.quiz import Quiz
from ai_tutor.schemas.quiz import QuizCreate, QuizResponse
from ai_tutor.services.topic_service import TopicService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=QuizResponse)
def create_quiz(
    quiz_in: QuizCreate,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    generator: TutorGenerator = Depends(get_tutor_generator),
) -> Any:
    """
    Generate and store a five-question quiz for one of the caller's topics.

    Raises:
        NotFound: If the topic is absent or owned by another user
    """
    try:
        topic = TopicService(db).get_owned_topic(quiz_in.topic_id, principal.id)
        questions = generator.generate_quiz(str(topic.name), quiz_in.difficulty)

        quiz = Quiz(
            user_id=principal.id,
            topic_id=topic.id,
            questions=[q.model_dump(by_alias=True) for q in questions],
        )
        db.add(quiz)
        db.commit()
        db.refresh(quiz)

        logger.info(f"Created quiz {quiz.id} for topic {topic.id}")
        return quiz

    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error creating quiz: {e}")
        db.rollback()
        raise InternalError(str(e)) from e


@router.get("/{quiz_id}", response_model=QuizResponse)
def get_quiz(
    quiz_id: int,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> Any:
    """Get one of the caller's quizzes."""
    try:
        quiz = db.query(Quiz).filter(Quiz.id == quiz_id, Quiz.user_id == principal.id).first()
        if quiz is None:
            raise NotFound("Quiz not found")
        return quiz
    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error fetching quiz {quiz_id}: {e}")
        raise InternalError(str(e)) from e
