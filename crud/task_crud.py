from sqlalchemy.orm import Session
from models.board import Board
from models.task import Task
from models.task_list import TaskList


def get_task_with_chain(db: Session, task_id: int):
    """Return ``(Task, TaskList, Board)`` for the id, or None when any link is missing."""
    return (
        db.query(Task, TaskList, Board)
        .join(TaskList, Task.list_id == TaskList.id)
        .join(Board, TaskList.board_id == Board.id)
        .filter(Task.id == task_id)
        .first()
    )


def list_tasks(db: Session, list_id: int):
    return (
        db.query(Task)
        .filter(Task.list_id == list_id)
        .order_by(Task.position, Task.id)
        .all()
    )


def create_task(db: Session, list_id: int, title: str, position: int, description: str | None = None):
    task = Task(list_id=list_id, title=title, description=description, position=position)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def update_task(db: Session, task: Task, changes: dict):
    for k, v in changes.items():
        setattr(task, k, v)
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int) -> int:
    deleted = db.query(Task).filter(Task.id == task_id).delete(synchronize_session=False)
    db.commit()
    return deleted
