"""Decision feature module"""

from lifeos.features.decision.api import router
from lifeos.features.decision.repository import DecisionRepository
from lifeos.features.decision.service import DecisionService
from lifeos.features.decision.engine import Decision, recommend
from lifeos.features.decision.domain import (
    DailyContext,
    DecisionInputs,
    EnergyLevel,
    Goal,
    GoalStatus,
    Recommendation,
    Task,
    TaskStatus,
)

__all__ = [
    "router",
    "DecisionRepository",
    "DecisionService",
    "Decision",
    "recommend",
    "DailyContext",
    "DecisionInputs",
    "EnergyLevel",
    "Goal",
    "GoalStatus",
    "Recommendation",
    "Task",
    "TaskStatus",
]
