"""
Topic endpoints: create with a generated curriculum, list, fetch, delete.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ai_tutor.core.agents.tutor.generator import TutorGenerator
from ai_tutor.core.dependencies import (
    AuthenticatedPrincipal,
    get_current_principal,
    get_db,
    get_tutor_generator,
)
from ai_tutor.core.exceptions import InternalError, TutorError
from ai_tutor.models.topic import Topic
from ai_tutor.schemas.common import Message
from ai_tutor.schemas.topic import TopicCreate, TopicResponse
from ai_tutor.services.topic_service import TopicService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=TopicResponse)
def create_topic(
    topic_in: TopicCreate,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    generator: TutorGenerator = Depends(get_tutor_generator),
) -> Any:
    """
    Create a topic and generate its curriculum.

    The curriculum targets the user's learning goal when one is set,
    otherwise the topic description.
    """
    try:
        goal = principal.learning_goals or topic_in.description
        curriculum = generator.generate_curriculum(topic_in.name, goal)

        topic = Topic(
            user_id=principal.id,
            name=topic_in.name,
            description=topic_in.description,
            curriculum=curriculum.model_dump(by_alias=True),
        )
        db.add(topic)
        db.commit()
        db.refresh(topic)

        logger.info(f"Created topic {topic.id} for user {principal.id}")
        return topic

    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error creating topic: {e}")
        db.rollback()
        raise InternalError(str(e)) from e


@router.get("", response_model=List[TopicResponse])
def list_topics(
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> Any:
    """List the caller's topics, oldest first."""
    try:
        return TopicService(db).list_topics(principal.id)
    except Exception as e:
        logger.error(f"Error listing topics: {e}")
        raise InternalError(str(e)) from e


@router.get("/{topic_id}", response_model=TopicResponse)
def get_topic(
    topic_id: int,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> Any:
    """Get one of the caller's topics."""
    try:
        return TopicService(db).get_owned_topic(topic_id, principal.id)
    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error fetching topic {topic_id}: {e}")
        raise InternalError(str(e)) from e


@router.delete("/{topic_id}", response_model=Message)
def delete_topic(
    topic_id: int,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> Any:
    """
    Delete a topic with its chat history, quizzes and quiz results.

    Raises:
        NotFound: If the topic is absent or owned by another user
    """
    try:
        service = TopicService(db)
        topic = service.get_owned_topic(topic_id, principal.id)
        service.delete_topic(topic)
        return Message(message="Topic deleted successfully")
    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error deleting topic {topic_id}: {e}")
        raise InternalError(str(e)) from e
