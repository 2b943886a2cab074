"""
Database initialization and seeding.
"""
import logging

from sqlalchemy.orm import Session

from ai_tutor.core.security import get_password_hash
from ai_tutor.models.user import User

logger = logging.getLogger(__name__)

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo1234"


def init_db(db: Session) -> None:
    """
    Initialize database with default data.

    Args:
        db: Database session
    """
    # Check if demo user exists
    demo = db.query(User).filter(User.username == DEMO_USERNAME).first()
    if not demo:
        demo = User(
            username=DEMO_USERNAME,
            hashed_password=get_password_hash(DEMO_PASSWORD),
            learning_goals="Explore the tutor with a sample account",
        )
        db.add(demo)
        db.commit()
        db.refresh(demo)
        logger.info("Demo user created successfully")
