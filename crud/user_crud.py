from sqlalchemy.orm import Session
from models.user import User


def get_user(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, email: str, password_hash: str, name: str | None = None):
    user = User(email=email, password=password_hash, name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
