from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin

class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    boards = relationship(
        "Board",
        back_populates="project",
        order_by="Board.id",
        passive_deletes=True,
    )

Index("idx_projects_owner_updated_at", Project.owner_id, Project.updated_at.desc())
