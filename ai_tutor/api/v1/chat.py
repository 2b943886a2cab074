"""
Tutor chat endpoints.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ai_tutor.core.agents.tutor.chat_agent import TutorChatAgent, load_conversation
from ai_tutor.core.agents.tutor.generator import TutorGenerator
from ai_tutor.core.dependencies import (
    AuthenticatedPrincipal,
    get_current_principal,
    get_db,
    get_tutor_generator,
)
from ai_tutor.core.exceptions import InternalError, TutorError
from ai_tutor.schemas.chat import ChatCreate, ChatMessageResponse
from ai_tutor.services.topic_service import TopicService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ChatMessageResponse)
def post_chat_message(
    chat_in: ChatCreate,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    generator: TutorGenerator = Depends(get_tutor_generator),
) -> Any:
    """
    Send a message to the tutor and return the stored reply.

    Raises:
        NotFound: If the topic is absent or owned by another user; nothing
            is stored in that case
    """
    try:
        topic = TopicService(db).get_owned_topic(chat_in.topic_id, principal.id)

        agent = TutorChatAgent(db=db, generator=generator)
        return agent.process_message(
            user_id=principal.id,
            topic_id=int(topic.id),  # type: ignore[arg-type]
            topic_name=str(topic.name),
            message=chat_in.message,
        )

    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error processing chat message: {e}")
        raise InternalError(str(e)) from e


@router.get("/{topic_id}", response_model=List[ChatMessageResponse])
def get_chat_history(
    topic_id: int,
    db: Session = Depends(get_db),
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
) -> Any:
    """Get the caller's conversation for a topic in creation order."""
    try:
        topic = TopicService(db).get_owned_topic(topic_id, principal.id)
        return load_conversation(db, principal.id, int(topic.id))  # type: ignore[arg-type]
    except TutorError:
        raise
    except Exception as e:
        logger.error(f"Error loading chat history for topic {topic_id}: {e}")
        raise InternalError(str(e)) from e
