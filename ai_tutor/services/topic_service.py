"""
Topic lookups and the cascading topic delete.
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ai_tutor.core.exceptions import NotFound
from ai_tutor.models.chat import ChatMessage
from ai_tutor.models.quiz import Quiz, QuizResult
from ai_tutor.models.topic import Topic

logger = logging.getLogger(__name__)


class TopicService:
    """Data access for topics owned by a user."""

    def __init__(self, db: Session):
        self.db = db

    def list_topics(self, user_id: int) -> List[Topic]:
        """Return a user's topics, oldest first."""
        return self.db.query(Topic).filter(
            Topic.user_id == user_id
        ).order_by(Topic.created_at, Topic.id).all()

    def get_owned_topic(self, topic_id: int, user_id: int) -> Topic:
        """
        Fetch a topic owned by ``user_id``.

        Raises:
            NotFound: If the topic does not exist or belongs to someone else
        """
        topic = self.db.query(Topic).filter(
            Topic.id == topic_id,
            Topic.user_id == user_id,
        ).first()
        if topic is None:
            raise NotFound("Topic not found")
        return topic

    def delete_topic(self, topic: Topic) -> None:
        """
        Delete a topic with its chat history, quiz results and quizzes.

        Children go first to satisfy foreign keys. All four deletes commit
        together or not at all.
        """
        topic_id = topic.id
        quiz_ids = select(Quiz.id).where(Quiz.topic_id == topic_id)

        try:
            deleted_messages = self.db.query(ChatMessage).filter(
                ChatMessage.topic_id == topic_id
            ).delete(synchronize_session=False)
            deleted_results = self.db.query(QuizResult).filter(
                QuizResult.quiz_id.in_(quiz_ids)
            ).delete(synchronize_session=False)
            deleted_quizzes = self.db.query(Quiz).filter(
                Quiz.topic_id == topic_id
            ).delete(synchronize_session=False)
            self.db.query(Topic).filter(Topic.id == topic_id).delete(synchronize_session=False)
            self.db.commit()
        except Exception as e:
            logger.error(f"Error deleting topic {topic_id}, rolling back: {e}")
            self.db.rollback()
            raise

        logger.info(
            f"Deleted topic {topic_id}: {deleted_messages} messages, "
            f"{deleted_results} quiz results, {deleted_quizzes} quizzes"
        )
