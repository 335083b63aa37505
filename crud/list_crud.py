from sqlalchemy.orm import Session
from models.board import Board
from models.task_list import TaskList


def get_list_with_board(db: Session, list_id: int):
    """Return ``(TaskList, Board)`` for the id, or None when either row is missing."""
    return (
        db.query(TaskList, Board)
        .join(Board, TaskList.board_id == Board.id)
        .filter(TaskList.id == list_id)
        .first()
    )


def list_lists(db: Session, board_id: int):
    return (
        db.query(TaskList)
        .filter(TaskList.board_id == board_id)
        .order_by(TaskList.position, TaskList.id)
        .all()
    )


def add_lists(db: Session, board_id: int, specs: list[tuple[str, int]]):
    """Stage several ``(title, position)`` lists in one flush; the caller owns the commit."""
    lists = [TaskList(board_id=board_id, title=title, position=position) for title, position in specs]
    db.add_all(lists)
    db.flush()
    return lists


def create_list(db: Session, board_id: int, title: str, position: int):
    lst = TaskList(board_id=board_id, title=title, position=position)
    db.add(lst)
    db.commit()
    db.refresh(lst)
    return lst


def update_list(db: Session, lst: TaskList, changes: dict):
    for k, v in changes.items():
        setattr(lst, k, v)
    db.commit()
    db.refresh(lst)
    return lst


def delete_list(db: Session, list_id: int) -> int:
    deleted = db.query(TaskList).filter(TaskList.id == list_id).delete(synchronize_session=False)
    db.commit()
    return deleted
