"""Ownership resolution across the project/board/list/task containment chain.

Projects and boards carry their owner directly and are fetched with the owner
in the same query. Lists and tasks carry no owner; they are fetched by id
joined up to their board and the board's owner is compared. In every case a
missing row, a missing ancestor and a foreign owner produce the same
unauthorized decision, so callers cannot probe for other users' ids.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from sqlalchemy.orm import Session

from core.auth import Principal
from core.errors import BoardNotFound, ListNotFound, NotFound, ProjectNotFound, TaskNotFound
from crud import board_crud, list_crud, project_crud, task_crud

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    PROJECT = "project"
    BOARD = "board"
    LIST = "list"
    TASK = "task"


@dataclass(frozen=True)
class Authorization:
    authorized: bool
    resource: Any = None
    # Resolved ancestors, nearest first (a task's list, then its board)
    ancestors: tuple = field(default_factory=tuple)


DENIED = Authorization(authorized=False)


def _resolve_project(db: Session, principal: Principal, project_id: int) -> Authorization:
    project = project_crud.get_project_for_owner(db, project_id, principal.user_id)
    if project is None:
        return DENIED
    return Authorization(True, project)


def _resolve_board(db: Session, principal: Principal, board_id: int) -> Authorization:
    board = board_crud.get_board_for_owner(db, board_id, principal.user_id)
    if board is None:
        return DENIED
    return Authorization(True, board)


def _resolve_list(db: Session, principal: Principal, list_id: int) -> Authorization:
    row = list_crud.get_list_with_board(db, list_id)
    if row is None:
        return DENIED
    lst, board = row
    if board.owner_id != principal.user_id:
        return DENIED
    return Authorization(True, lst, (board,))


def _resolve_task(db: Session, principal: Principal, task_id: int) -> Authorization:
    row = task_crud.get_task_with_chain(db, task_id)
    if row is None:
        return DENIED
    task, lst, board = row
    if board.owner_id != principal.user_id:
        return DENIED
    return Authorization(True, task, (lst, board))


_RESOLVERS: dict[ResourceType, Callable[[Session, Principal, int], Authorization]] = {
    ResourceType.PROJECT: _resolve_project,
    ResourceType.BOARD: _resolve_board,
    ResourceType.LIST: _resolve_list,
    ResourceType.TASK: _resolve_task,
}

NOT_FOUND: dict[ResourceType, type[NotFound]] = {
    ResourceType.PROJECT: ProjectNotFound,
    ResourceType.BOARD: BoardNotFound,
    ResourceType.LIST: ListNotFound,
    ResourceType.TASK: TaskNotFound,
}


def authorize(db: Session, principal: Principal, resource_type: ResourceType, resource_id: int) -> Authorization:
    decision = _RESOLVERS[resource_type](db, principal, resource_id)
    if not decision.authorized:
        logger.debug(
            "Denied %s %s for user %s", resource_type.value, resource_id, principal.user_id
        )
    return decision


def require(
    db: Session,
    principal: Principal,
    resource_type: ResourceType,
    resource_id: int,
    error: type[NotFound] | None = None,
) -> Authorization:
    """Like authorize(), but raise the type's NotFound error when denied."""
    decision = authorize(db, principal, resource_type, resource_id)
    if not decision.authorized:
        raise (error or NOT_FOUND[resource_type])()
    return decision
