from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_principal
from schemas.board_schema import BoardCreate, BoardDetail, BoardResponse, BoardUpdate, BoardWithLists
from services import boards


router = APIRouter(prefix="/boards", tags=["Boards"])


@router.get("/", response_model=list[BoardResponse])
def list_all(
    project_id: int | None = Query(None, alias="projectId"),
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return boards.list_boards(db, principal, project_id=project_id)


@router.get("/{board_id}", response_model=BoardDetail)
def read_one(board_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return boards.get_board(db, principal, board_id)


@router.post("/", response_model=BoardWithLists, status_code=201)
def create(payload: BoardCreate, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return boards.create_board(db, principal, payload.name, project_id=payload.project_id)


@router.patch("/{board_id}", response_model=BoardResponse)
def update(
    board_id: int,
    payload: BoardUpdate,
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return boards.update_board(db, principal, board_id, payload.model_dump(exclude_unset=True))


@router.delete("/{board_id}", status_code=204)
def delete(board_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    boards.delete_board(db, principal, board_id)
    return None
