from sqlalchemy.orm import Session
from models.session import Session as SessionModel
from schemas.session_schema import SessionCreate


def get_session_by_token(db: Session, token: str):
    return db.query(SessionModel).filter(SessionModel.token == token).first()


def create_session(db: Session, payload: SessionCreate):
    s = SessionModel(
        user_id=payload.user_id,
        token=payload.token,
        expires_at=payload.expires_at,
        ip_address=payload.ip_address,
        user_agent=payload.user_agent,
    )
    db.add(s)
    db.commit()
    db.refresh(s)
    return s


def delete_session_by_token(db: Session, token: str) -> bool:
    deleted = db.query(SessionModel).filter(SessionModel.token == token).delete(synchronize_session=False)
    db.commit()
    return deleted > 0
