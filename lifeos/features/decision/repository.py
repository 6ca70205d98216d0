"""SQLAlchemy repository for the Decision feature (read-only)"""

import logging
from typing import List, Optional
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifeos import config
from lifeos.db.models.daily_context import DailyContext as DailyContextORM
from lifeos.db.models.goal import Goal as GoalORM
from lifeos.db.models.task import Task as TaskORM
from lifeos.features.decision.domain import DailyContext, Goal, GoalStatus, Task, TaskStatus

logger = logging.getLogger(__name__)


class DecisionRepository:
    """Loads the snapshots the engine decides on, scoped to one user"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_context_for_date(self, user_id: str, date: str) -> Optional[DailyContext]:
        """
        Get the user's recorded context for a date.

        Returns:
            DailyContext with context_set=True, or None when nothing was recorded
        """
        stmt = select(DailyContextORM).where(
            and_(
                DailyContextORM.user_id == user_id,
                DailyContextORM.date == date,
            )
        )
        result = await self.db.execute(stmt)
        row = result.scalars().first()
        if row is None:
            return None

        stress_level = row.stress_level
        if stress_level is None:
            stress_level = config.DEFAULT_STRESS_LEVEL

        return DailyContext(
            date=row.date,
            energy_level=row.energy_level,
            available_minutes=row.available_minutes,
            stress_level=stress_level,
            context_set=True,
        )

    async def get_active_goals(self, user_id: str) -> List[Goal]:
        """ACTIVE goals in creation order (oldest first)."""
        stmt = (
            select(GoalORM)
            .where(
                and_(
                    GoalORM.user_id == user_id,
                    GoalORM.status == GoalStatus.ACTIVE.value,
                )
            )
            .order_by(GoalORM.created_at.asc(), GoalORM.id.asc())
        )
        result = await self.db.execute(stmt)
        return [Goal.model_validate(row) for row in result.scalars().all()]

    async def get_pending_tasks(self, user_id: str) -> List[Task]:
        """PENDING tasks, goal-linked and inbox, in creation order (oldest first)."""
        stmt = (
            select(TaskORM)
            .where(
                and_(
                    TaskORM.user_id == user_id,
                    TaskORM.status == TaskStatus.PENDING.value,
                )
            )
            .order_by(TaskORM.created_at.asc(), TaskORM.id.asc())
        )
        result = await self.db.execute(stmt)
        return [Task.model_validate(row) for row in result.scalars().all()]
