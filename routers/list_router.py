from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_principal
from schemas.list_schema import ListCreate, ListResponse, ListUpdate
from services import lists


# Lists are read and created under their board, changed by their own id
router = APIRouter(tags=["Lists"])


@router.get("/boards/{board_id}/lists", response_model=list[ListResponse])
def list_all(board_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return lists.list_lists(db, principal, board_id)


@router.post("/boards/{board_id}/lists", response_model=ListResponse, status_code=201)
def create(
    board_id: int,
    payload: ListCreate,
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return lists.create_list(db, principal, board_id, payload.title, payload.position)


@router.patch("/lists/{list_id}", response_model=ListResponse)
def update(
    list_id: int,
    payload: ListUpdate,
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return lists.update_list(db, principal, list_id, payload.model_dump(exclude_unset=True))


@router.delete("/lists/{list_id}", status_code=204)
def delete(list_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    lists.delete_list(db, principal, list_id)
    return None
