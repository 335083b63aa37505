import logging

from sqlalchemy.orm import Session

from core.auth import Principal, require_principal
from core.errors import ListNotFound, guarded
from crud import list_crud
from services import ownership
from services.ownership import ResourceType

logger = logging.getLogger(__name__)


@guarded("Failed to fetch lists")
def list_lists(db: Session, principal: Principal | None, board_id: int):
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.BOARD, board_id)
    return list_crud.list_lists(db, board_id)


@guarded("Failed to create list")
def create_list(db: Session, principal: Principal | None, board_id: int, title: str, position: int):
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.BOARD, board_id)
    lst = list_crud.create_list(db, board_id, title, position)
    logger.info("User %s created list %s on board %s", principal.user_id, lst.id, board_id)
    return lst


@guarded("Failed to update list")
def update_list(db: Session, principal: Principal | None, list_id: int, changes: dict):
    principal = require_principal(principal)
    lst = ownership.require(db, principal, ResourceType.LIST, list_id).resource

    updates = {}
    if changes.get("title"):
        updates["title"] = changes["title"]
    # Position 0 is a real value
    if changes.get("position") is not None:
        updates["position"] = changes["position"]
    return list_crud.update_list(db, lst, updates)


@guarded("Failed to delete list")
def delete_list(db: Session, principal: Principal | None, list_id: int) -> None:
    principal = require_principal(principal)
    ownership.require(db, principal, ResourceType.LIST, list_id)
    if list_crud.delete_list(db, list_id) == 0:
        raise ListNotFound()
    logger.info("User %s deleted list %s", principal.user_id, list_id)
