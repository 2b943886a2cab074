"""
Create the tutor tables and seed the demo account.
"""
from ai_tutor.db.base import SessionLocal, engine
from ai_tutor.db.init_db import DEMO_USERNAME, init_db
from ai_tutor.models import Base


def init() -> None:
    """Create tables for users, topics, quizzes, quiz results and chat history, then seed."""
    tables = ", ".join(sorted(Base.metadata.tables))
    print(f"Creating tables: {tables}")
    Base.metadata.create_all(bind=engine)

    print(f"Seeding demo user '{DEMO_USERNAME}'...")
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()

    print(f"Ready. Log in as '{DEMO_USERNAME}' via POST /api/auth/login")


if __name__ == "__main__":
    init()
