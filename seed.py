"""Populate the database with a demo user, project, board and tasks.

Run with ``python seed.py``. Re-running is a no-op once the demo user exists.
"""
import logging

from core.auth import Principal
from core.database import Base, SessionLocal, engine
from core.logging_setup import configure_logging
from core.security import hash_password
from crud.user_crud import create_user, get_user_by_email
from models import user, session, project, board, task_list, task  # noqa: F401
from services import boards, projects, tasks

logger = logging.getLogger("seed")

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password123"

DEMO_TASKS = {
    "Todo": [
        ("Set up development environment", "Install dependencies and configure tools"),
        ("Design database schema", None),
    ],
    "In Progress": [
        ("Implement authentication", "Session tokens with bcrypt passwords"),
    ],
    "Complete": [
        ("Project kickoff meeting", None),
    ],
}


def seed() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if get_user_by_email(db, DEMO_EMAIL):
            logger.info("Demo user %s already exists, nothing to do", DEMO_EMAIL)
            return

        demo = create_user(db, DEMO_EMAIL, hash_password(DEMO_PASSWORD), name="Demo User")
        principal = Principal(user_id=demo.id, email=demo.email)
        logger.info("Created user %s", demo.email)

        proj = projects.create_project(db, principal, "Demo Project", "A sample project for testing")
        logger.info("Created project %s", proj.name)

        brd = boards.create_board(db, principal, "Project Board", project_id=proj.id)
        logger.info("Created board %s with %d lists", brd.name, len(brd.lists))

        for lst in brd.lists:
            for position, (title, description) in enumerate(DEMO_TASKS.get(lst.title, [])):
                tasks.create_task(db, principal, lst.id, title, position, description=description)
        logger.info("Seed complete. Sign in with %s / %s", DEMO_EMAIL, DEMO_PASSWORD)
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    seed()
