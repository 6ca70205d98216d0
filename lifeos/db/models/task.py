"""SQLAlchemy ORM model for tasks table"""

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.sql import func

from lifeos.db.base import Base


class Task(Base):
    """
    SQLAlchemy ORM model for the tasks table.
    A task without goal_id is an inbox task.
    """
    __tablename__ = "tasks"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    goal_id = Column(
        String,
        ForeignKey("goals.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="PENDING")  # PENDING | DONE | SNOOZED
    effort = Column(Integer, nullable=True)  # minutes
    impact = Column(Integer, nullable=True)  # 1-100

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True
    )
    completed_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title='{self.title}', status='{self.status}')>"
