import logging

from sqlalchemy.orm import Session

from core.auth import Principal, require_principal
from core.errors import ProjectNotFound, guarded
from crud import project_crud
from services import ownership
from services.ownership import ResourceType

logger = logging.getLogger(__name__)


@guarded("Failed to fetch projects")
def list_projects(db: Session, principal: Principal | None):
    principal = require_principal(principal)
    return project_crud.list_projects(db, principal.user_id)


@guarded("Failed to fetch project")
def get_project(db: Session, principal: Principal | None, project_id: int):
    principal = require_principal(principal)
    project = project_crud.get_project_for_owner(db, project_id, principal.user_id, with_boards=True)
    if project is None:
        raise ProjectNotFound()
    return project


@guarded("Failed to create project")
def create_project(db: Session, principal: Principal | None, name: str, description: str | None = None):
    principal = require_principal(principal)
    project = project_crud.create_project(db, principal.user_id, name, description or None)
    logger.info("User %s created project %s", principal.user_id, project.id)
    return project


@guarded("Failed to update project")
def update_project(db: Session, principal: Principal | None, project_id: int, changes: dict):
    """Apply a partial update.

    ``name`` is applied only when given a value; ``description`` is applied
    whenever the key is present, so an explicit None clears it.
    """
    principal = require_principal(principal)
    project = ownership.require(db, principal, ResourceType.PROJECT, project_id).resource

    updates = {}
    if changes.get("name"):
        updates["name"] = changes["name"]
    if "description" in changes:
        updates["description"] = changes["description"]
    return project_crud.update_project(db, project, updates)


@guarded("Failed to delete project")
def delete_project(db: Session, principal: Principal | None, project_id: int) -> None:
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.PROJECT, project_id)
    if project_crud.delete_project(db, project_id) == 0:
        raise ProjectNotFound()
    logger.info("User %s deleted project %s", principal.user_id, project_id)
