"""
Quiz result submission.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ai_tutor.core.dependencies import AuthenticatedPrincipal, get_current_principal, get_db
from ai_tutor.core.exceptions import InternalError, InvalidInput, NotFound, TutorError
from ai_tutor.models.quiz import Quiz, QuizResult
from ai_tutor.schemas.quiz import QuizResultCreate, QuizResultResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=QuizResultResponse)
def submit_quiz_result(
    result_in: QuizResultCreate,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> Any:
    """
    Store a finished quiz attempt.

    The answers must line up with the quiz's questions. The client-computed
    score is stored as submitted; it is only range-checked.

    Raises:
        NotFound: If the quiz is absent or owned by another user
        InvalidInput: If the answers or score do not fit the quiz
    """
    try:
        quiz = db.query(Quiz).filter(
            Quiz.id == result_in.quiz_id,
            Quiz.user_id == principal.id,
        ).first()
        if quiz is None:
            raise NotFound("Quiz not found")

        question_count = len(quiz.questions or [])
        problems = []
        if len(result_in.answers) != question_count:
            problems.append(f"answers: expected {question_count} answers, got {len(result_in.answers)}")
        if result_in.score > question_count:
            problems.append(f"score: must be at most {question_count}")
        if problems:
            raise InvalidInput("Invalid input: " + "; ".join(problems))

        quiz_result = QuizResult(
            user_id=principal.id,
            quiz_id=quiz.id,
            score=result_in.score,
            answers=list(result_in.answers),
        )
        db.add(quiz_result)
        db.commit()
        db.refresh(quiz_result)

        logger.info(f"Stored result {quiz_result.id} for quiz {quiz.id}: {result_in.score}/{question_count}")
        return quiz_result

    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error storing quiz result: {e}")
        db.rollback()
        raise InternalError(str(e)) from e
