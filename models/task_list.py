from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base import Base, CreatedAtMixin
from models.task import Task

class TaskList(Base, CreatedAtMixin):
    __tablename__ = "lists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    # Not unique: duplicates and gaps are left for clients to manage
    position = Column(Integer, nullable=False)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False)

    board = relationship("Board", back_populates="lists")
    tasks = relationship(
        "Task",
        back_populates="task_list",
        order_by=lambda: [Task.position, Task.id],
        passive_deletes=True,
    )

Index("idx_lists_board_position", TaskList.board_id, TaskList.position)
