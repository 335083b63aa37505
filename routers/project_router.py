from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.database import get_db
from core.auth import get_current_principal
from schemas.project_schema import ProjectCreate, ProjectDetail, ProjectListItem, ProjectResponse, ProjectUpdate
from services import projects


router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("/", response_model=list[ProjectListItem])
def list_all(db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return projects.list_projects(db, principal)


@router.get("/{project_id}", response_model=ProjectDetail)
def read_one(project_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return projects.get_project(db, principal, project_id)


@router.post("/", response_model=ProjectResponse, status_code=201)
def create(payload: ProjectCreate, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    return projects.create_project(db, principal, payload.name, payload.description)


@router.patch("/{project_id}", response_model=ProjectResponse)
def update(
    project_id: int,
    payload: ProjectUpdate,
    db: Session = Depends(get_db),
    principal = Depends(get_current_principal),
):
    return projects.update_project(db, principal, project_id, payload.model_dump(exclude_unset=True))


@router.delete("/{project_id}", status_code=204)
def delete(project_id: int, db: Session = Depends(get_db), principal = Depends(get_current_principal)):
    projects.delete_project(db, principal, project_id)
    return None
