"""SQLAlchemy ORM model for daily_contexts table"""

from sqlalchemy import Column, Integer, String, Float, UniqueConstraint

from lifeos.db.base import Base


class DailyContext(Base):
    """One capacity snapshot per user per date"""
    __tablename__ = "daily_contexts"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_contexts_user_date"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD

    energy_level = Column(String, nullable=False)  # LOW | MEDIUM | HIGH
    available_minutes = Column(Integer, nullable=False)
    stress_level = Column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<DailyContext(user_id={self.user_id}, date='{self.date}')>"
