from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin
from models.task_list import TaskList

class Board(Base, TimestampMixin):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    owner_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True)

    project = relationship("Project", back_populates="boards")
    lists = relationship(
        "TaskList",
        back_populates="board",
        order_by=lambda: [TaskList.position, TaskList.id],
        passive_deletes=True,
    )

Index("idx_boards_owner_updated_at", Board.owner_id, Board.updated_at.desc())
Index("idx_boards_project_id", Board.project_id)
