from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_principal
from schemas.task_schema import TaskCreate, TaskResponse, TaskUpdate
from services import tasks


router = APIRouter(tags=["Tasks"])


@router.get("/lists/{list_id}/tasks", response_model=list[TaskResponse])
def list_all(list_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return tasks.list_tasks(db, principal, list_id)


@router.post("/lists/{list_id}/tasks", response_model=TaskResponse, status_code=201)
def create(
    list_id: int,
    payload: TaskCreate,
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return tasks.create_task(
        db, principal, list_id, payload.title, payload.position, description=payload.description
    )


@router.patch("/tasks/{task_id}", response_model=TaskResponse)
def update(
    task_id: int,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return tasks.update_task(db, principal, task_id, payload.model_dump(exclude_unset=True))


@router.delete("/tasks/{task_id}", status_code=204)
def delete(task_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    tasks.delete_task(db, principal, task_id)
    return None
