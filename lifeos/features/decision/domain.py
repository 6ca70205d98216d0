"""Domain models for the Decision feature"""

from enum import Enum
from typing import Dict, Optional, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EFFORT_MINUTES = 30
DEFAULT_IMPACT = 0


class EnergyLevel(str, Enum):
    """Self-reported energy for the day"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class GoalStatus(str, Enum):
    """Goal status enum"""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class TaskStatus(str, Enum):
    """Task status enum"""
    PENDING = "PENDING"
    DONE = "DONE"
    SNOOZED = "SNOOZED"


class DailyContext(BaseModel):
    """Capacity snapshot for one user on one date"""
    model_config = ConfigDict(populate_by_name=True)

    date: str  # YYYY-MM-DD
    energy_level: EnergyLevel = Field(EnergyLevel.MEDIUM, alias="energyLevel")
    available_minutes: int = Field(480, alias="availableMinutes", ge=0)
    stress_level: Union[int, float] = Field(5, alias="stressLevel", ge=0, le=10)
    context_set: bool = Field(True, alias="contextSet")

    @classmethod
    def with_defaults(
        cls,
        date: str,
        available_minutes: int = 480,
        energy_level: EnergyLevel = EnergyLevel.MEDIUM,
        stress_level: Union[int, float] = 5,
    ) -> "DailyContext":
        """Context substituted when the user recorded nothing for the date"""
        return cls(
            date=date,
            energy_level=energy_level,
            available_minutes=available_minutes,
            stress_level=stress_level,
            context_set=False,
        )


class Goal(BaseModel):
    """Goal snapshot as supplied by the goal store"""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    status: GoalStatus = GoalStatus.ACTIVE
    importance: int = Field(50, ge=1, le=100)
    created_at: Optional[datetime] = Field(None, alias="createdAt")


class Task(BaseModel):
    """Task snapshot as supplied by the task store"""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    effort: Optional[int] = Field(None, ge=1)  # minutes
    impact: Optional[int] = Field(None, ge=0, le=100)
    goal_id: Optional[str] = Field(None, alias="goalId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    completed_at: Optional[datetime] = Field(None, alias="completedAt")

    @property
    def effective_effort(self) -> int:
        return self.effort if self.effort is not None else DEFAULT_EFFORT_MINUTES

    @property
    def effective_impact(self) -> int:
        return self.impact if self.impact is not None else DEFAULT_IMPACT

    def is_pending(self) -> bool:
        return self.status == TaskStatus.PENDING

    def is_inbox(self) -> bool:
        return self.goal_id is None


class Recommendation(BaseModel):
    """The single task the engine recommends, with its explanation"""
    model_config = ConfigDict(populate_by_name=True)

    task_id: str = Field(..., alias="taskId")
    task_title: str = Field(..., alias="taskTitle")
    task_description: Optional[str] = Field(None, alias="taskDescription")
    goal_title: Optional[str] = Field(None, alias="goalTitle")
    goal_importance: Optional[int] = Field(None, alias="goalImportance")
    effort: int
    impact: int
    reasoning: str


class DecisionInputs(BaseModel):
    """Audit trail of what the engine looked at"""
    model_config = ConfigDict(populate_by_name=True)

    context: DailyContext
    active_goal_count: int = Field(..., alias="activeGoalCount")
    total_pending_tasks: int = Field(..., alias="totalPendingTasks")
    goal_task_counts: Dict[str, int] = Field(default_factory=dict, alias="goalTaskCounts")
