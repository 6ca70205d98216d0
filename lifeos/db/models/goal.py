"""SQLAlchemy ORM model for goals table"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func

from lifeos.db.base import Base


class Goal(Base):
    """
    SQLAlchemy ORM model for the goals table.
    At most 3 ACTIVE goals per user; enforced by the goal store, not here.
    """
    __tablename__ = "goals"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="ACTIVE")  # ACTIVE | INACTIVE
    importance = Column(Integer, nullable=False, default=50)  # 1-100

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Goal(id={self.id}, title='{self.title}', status='{self.status}')>"
