"""SQLAlchemy ORM models"""

from lifeos.db.models.daily_context import DailyContext
from lifeos.db.models.goal import Goal
from lifeos.db.models.task import Task

__all__ = ["DailyContext", "Goal", "Task"]
