"""
Weakness analysis over the caller's quiz history.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ai_tutor.core.agents.tutor.generator import TutorGenerator
from ai_tutor.core.agents.tutor.schemas import WeaknessAnalysis
from ai_tutor.core.dependencies import (
    AuthenticatedPrincipal,
    get_current_principal,
    get_db,
    get_tutor_generator,
)
from ai_tutor.core.exceptions import InternalError, TutorError
from ai_tutor.models.quiz import Quiz, QuizResult
from ai_tutor.models.topic import Topic

logger = logging.getLogger(__name__)

router = APIRouter()

NO_DATA_RECOMMENDATION = "Take a quiz to receive a personalized analysis of your weak areas."


def _serialize_results(db: Session, user_id: int) -> List[Dict[str, Any]]:
    """Collect a user's results with the questions they answered."""
    rows = db.query(QuizResult, Quiz, Topic).outerjoin(
        Quiz, Quiz.id == QuizResult.quiz_id
    ).outerjoin(
        Topic, Topic.id == Quiz.topic_id
    ).filter(
        QuizResult.user_id == user_id
    ).order_by(QuizResult.created_at, QuizResult.id).all()

    results = []
    for result, quiz, topic in rows:
        results.append({
            "quizId": result.quiz_id,
            "topic": topic.name if topic else None,
            "score": result.score,
            "totalQuestions": len(quiz.questions) if quiz else None,
            "answers": result.answers,
            "questions": [
                {"question": q.get("question"), "correctAnswer": q.get("correctAnswer")}
                for q in (quiz.questions if quiz else [])
            ],
            "createdAt": result.created_at,
        })
    return results


@router.get("", response_model=WeaknessAnalysis)
def get_analysis(
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    generator: TutorGenerator = Depends(get_tutor_generator),
) -> Any:
    """
    Analyze the caller's quiz results.

    Without any results the generation service is not called and an empty
    analysis with a single hint is returned.
    """
    try:
        results = _serialize_results(db, principal.id)
        if not results:
            return WeaknessAnalysis(weak_areas={}, recommendations=[NO_DATA_RECOMMENDATION])

        return generator.analyze_weakness(results)

    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error analyzing quiz results: {e}")
        raise InternalError(str(e)) from e
