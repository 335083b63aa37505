from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc
from models.board import Board
from models.task_list import TaskList


def get_board_for_owner(db: Session, board_id: int, owner_id: int, with_content: bool = False):
    q = db.query(Board).filter(Board.id == board_id, Board.owner_id == owner_id)
    if with_content:
        q = q.options(selectinload(Board.lists).selectinload(TaskList.tasks))
    return q.first()


def list_boards(db: Session, owner_id: int, project_id: int | None = None):
    q = db.query(Board).filter(Board.owner_id == owner_id)
    if project_id is not None:
        q = q.filter(Board.project_id == project_id)
    return q.order_by(desc(Board.updated_at), desc(Board.id)).all()


def add_board(db: Session, owner_id: int, name: str, project_id: int | None = None):
    """Stage a board and flush it for its id; the caller owns the commit."""
    board = Board(owner_id=owner_id, name=name, project_id=project_id)
    db.add(board)
    db.flush()
    return board


def update_board(db: Session, board: Board, changes: dict):
    for k, v in changes.items():
        setattr(board, k, v)
    db.commit()
    db.refresh(board)
    return board


def delete_board(db: Session, board_id: int) -> int:
    deleted = db.query(Board).filter(Board.id == board_id).delete(synchronize_session=False)
    db.commit()
    return deleted
