import logging

from sqlalchemy.orm import Session

from core.auth import Principal, require_principal
from core.database import transaction
from core.errors import BoardNotFound, guarded
from crud import board_crud, list_crud
from services import ownership
from services.ownership import ResourceType

logger = logging.getLogger(__name__)

DEFAULT_LISTS = (
    ("Todo", 0),
    ("In Progress", 1),
    ("Complete", 2),
)


@guarded("Failed to fetch boards")
def list_boards(db: Session, principal: Principal | None, project_id: int | None = None):
    principal = require_principal(principal)
    return board_crud.list_boards(db, principal.user_id, project_id=project_id)


@guarded("Failed to fetch board")
def get_board(db: Session, principal: Principal | None, board_id: int):
    """Return the board with its lists and their tasks, both ordered by position."""
    principal = require_principal(principal)
    board = board_crud.get_board_for_owner(db, board_id, principal.user_id, with_content=True)
    if board is None:
        raise BoardNotFound()
    return board


@guarded("Failed to create board")
def create_board(db: Session, principal: Principal | None, name: str, project_id: int | None = None):
    """Create a board and its default lists atomically.

    The board row and the three default lists are written in one transaction.
    The returned board's ``lists`` are read back from the store after commit.
    """
    principal = require_principal(principal)
    if project_id is not None:
        ownership.require(db, principal, ResourceType.PROJECT, project_id)

    with transaction(db):
        board = board_crud.add_board(db, principal.user_id, name, project_id=project_id)
        list_crud.add_lists(db, board.id, DEFAULT_LISTS)

    board = board_crud.get_board_for_owner(db, board.id, principal.user_id, with_content=True)
    logger.info("User %s created board %s", principal.user_id, board.id)
    return board


@guarded("Failed to update board")
def update_board(db: Session, principal: Principal | None, board_id: int, changes: dict):
    """Apply a partial update.

    A ``project_id`` key set to None detaches the board from its project;
    leaving the key out keeps the current project.
    """
    principal = require_principal(principal)
    board = ownership.require(db, principal, ResourceType.BOARD, board_id).resource

    updates = {}
    if changes.get("name"):
        updates["name"] = changes["name"]
    if "project_id" in changes:
        project_id = changes["project_id"]
        if project_id is not None:
            ownership.require(db, principal, ResourceType.PROJECT, project_id)
        updates["project_id"] = project_id
    return board_crud.update_board(db, board, updates)


@guarded("Failed to delete board")
def delete_board(db: Session, principal: Principal | None, board_id: int) -> None:
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.BOARD, board_id)
    if board_crud.delete_board(db, board_id) == 0:
        raise BoardNotFound()
    logger.info("User %s deleted board %s", principal.user_id, board_id)
