import logging

from sqlalchemy.orm import Session

from core.auth import Principal, require_principal
from core.errors import TargetListNotFound, TaskNotFound, guarded
from crud import task_crud
from services import ownership
from services.ownership import ResourceType

logger = logging.getLogger(__name__)


@guarded("Failed to fetch tasks")
def list_tasks(db: Session, principal: Principal | None, list_id: int):
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.LIST, list_id)
    return task_crud.list_tasks(db, list_id)


@guarded("Failed to create task")
def create_task(
    db: Session,
    principal: Principal | None,
    list_id: int,
    title: str,
    position: int,
    description: str | None = None,
):
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.LIST, list_id)
    task = task_crud.create_task(db, list_id, title, position, description=description or None)
    logger.info("User %s created task %s in list %s", principal.user_id, task.id, list_id)
    return task


@guarded("Failed to update task")
def update_task(db: Session, principal: Principal | None, task_id: int, changes: dict):
    """Apply a partial update, moving the task when ``list_id`` changes.

    A move only rewrites the task's own ``list_id`` (and ``position`` if
    given); siblings in the source and target lists keep their positions.
    """
    principal = require_principal(principal)
    task = ownership.require(db, principal, ResourceType.TASK, task_id).resource

    updates = {}
    if changes.get("title"):
        updates["title"] = changes["title"]
    if "description" in changes:
        updates["description"] = changes["description"]
    target_list_id = changes.get("list_id")
    if target_list_id is not None and target_list_id != task.list_id:
        ownership.require(db, principal, ResourceType.LIST, target_list_id, error=TargetListNotFound)
        updates["list_id"] = target_list_id
    if changes.get("position") is not None:
        updates["position"] = changes["position"]

    task = task_crud.update_task(db, task, updates)
    if "list_id" in updates:
        logger.info("User %s moved task %s to list %s", principal.user_id, task_id, target_list_id)
    return task


@guarded("Failed to delete task")
def delete_task(db: Session, principal: Principal | None, task_id: int) -> None:
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.TASK, task_id)
    # A concurrent request may have removed the row since the check above
    if task_crud.delete_task(db, task_id) == 0:
        raise TaskNotFound()
    logger.info("User %s deleted task %s", principal.user_id, task_id)
