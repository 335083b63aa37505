from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc
from models.project import Project


def get_project_for_owner(db: Session, project_id: int, owner_id: int, with_boards: bool = False):
    q = db.query(Project).filter(Project.id == project_id, Project.owner_id == owner_id)
    if with_boards:
        q = q.options(selectinload(Project.boards))
    return q.first()


def list_projects(db: Session, owner_id: int):
    return (
        db.query(Project)
        .filter(Project.owner_id == owner_id)
        .options(selectinload(Project.boards))
        .order_by(desc(Project.updated_at), desc(Project.id))
        .all()
    )


def create_project(db: Session, owner_id: int, name: str, description: str | None = None):
    proj = Project(owner_id=owner_id, name=name, description=description)
    db.add(proj)
    db.commit()
    db.refresh(proj)
    return proj


def update_project(db: Session, proj: Project, changes: dict):
    for k, v in changes.items():
        setattr(proj, k, v)
    db.commit()
    db.refresh(proj)
    return proj


def delete_project(db: Session, project_id: int) -> int:
    # Boards, lists and tasks go with it through ON DELETE CASCADE
    deleted = db.query(Project).filter(Project.id == project_id).delete(synchronize_session=False)
    db.commit()
    return deleted
