"""Business logic for the Decision feature"""

import logging
from typing import Optional

from lifeos import config
from lifeos.features.decision.domain import DailyContext, EnergyLevel
from lifeos.features.decision.engine import Decision, recommend
from lifeos.features.decision.repository import DecisionRepository
from lifeos.utils.datetime_helper import get_today_str

logger = logging.getLogger(__name__)


class DecisionService:
    """Loads a user's snapshots and runs the decision engine over them"""

    def __init__(self, repository: DecisionRepository):
        self.repository = repository

    async def load_context(self, user_id: str, date: str) -> DailyContext:
        """
        Get the user's context for a date, substituting defaults if none was recorded.

        The returned context has context_set=False when defaults were used.
        """
        context = await self.repository.get_context_for_date(user_id, date)
        if context is not None:
            return context

        logger.debug(f"No context recorded for user {user_id} on {date}, using defaults")
        return DailyContext.with_defaults(
            date,
            available_minutes=config.DEFAULT_AVAILABLE_MINUTES,
            energy_level=EnergyLevel(config.DEFAULT_ENERGY_LEVEL),
            stress_level=config.DEFAULT_STRESS_LEVEL,
        )

    async def get_next_recommendation(self, user_id: str, today: Optional[str] = None) -> Decision:
        """
        Recommend the next task for a user.

        Args:
            user_id: The authenticated user ID
            today: Date as YYYY-MM-DD (defaults to the current UTC date)

        Returns:
            Decision(recommendation, message, inputs)
        """
        date = today or get_today_str()

        context = await self.load_context(user_id, date)
        goals = await self.repository.get_active_goals(user_id)
        tasks = await self.repository.get_pending_tasks(user_id)

        decision = recommend(context, goals, tasks)

        logger.debug(
            "[Decision] "
            f"user={user_id} inputs={decision.inputs.model_dump(mode='json', by_alias=True)} "
            f"task={decision.recommendation.task_id if decision.recommendation else None} "
            f"message={decision.message!r}"
        )
        return decision
