"""
Decision Engine

Picks the single next task for a user from already-loaded snapshots of their
daily context, goals and tasks, and explains the choice.

Algorithm:
1. Rank ACTIVE goals by importance (stable, so earlier goals win ties)
2. Within each goal, rank PENDING tasks by impact desc, then effort asc,
   and take the first one that fits the available minutes
3. Fall back to inbox tasks (no goal); if none fits, take the shortest anyway
4. Build the reasoning from independent clauses

Pure: no I/O, no clock reads, no mutation of the inputs.
"""
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence

from lifeos.features.decision.domain import (
    DailyContext,
    DecisionInputs,
    EnergyLevel,
    Goal,
    GoalStatus,
    Recommendation,
    Task,
)

NO_ACTIVE_GOALS_MESSAGE = "No active goals. Create a goal to get recommendations."
ALL_TASKS_COMPLETE_MESSAGE = "All tasks complete! Add new tasks to continue."
NO_TASK_FITS_MESSAGE = (
    "No tasks fit your {minutes} min window. "
    "Consider extending time or breaking down large tasks."
)

HIGH_STRESS_THRESHOLD = 7
LONG_TASK_MINUTES = 60


class Decision(NamedTuple):
    """Engine output: (recommendation, message, inputs)"""
    recommendation: Optional[Recommendation]
    message: Optional[str]
    inputs: DecisionInputs


@dataclass
class Selection:
    task: Task
    goal: Optional[Goal] = None
    skipped_tasks: int = 0
    exceeds_window: bool = False

    @property
    def from_inbox(self) -> bool:
        return self.goal is None


def rank_goals(goals: Sequence[Goal]) -> List[Goal]:
    """ACTIVE goals, most important first; input order breaks ties."""
    active = [goal for goal in goals if goal.status == GoalStatus.ACTIVE]
    return sorted(active, key=lambda goal: -goal.importance)


def rank_tasks(tasks: Sequence[Task]) -> List[Task]:
    """Highest impact first, then lowest effort; input order breaks ties."""
    return sorted(tasks, key=lambda task: (-task.effective_impact, task.effective_effort))


def _group_pending(
    active_goals: Sequence[Goal], tasks: Sequence[Task]
) -> tuple[Dict[str, List[Task]], List[Task]]:
    by_goal: Dict[str, List[Task]] = {goal.id: [] for goal in active_goals}
    inbox: List[Task] = []
    for task in tasks:
        if not task.is_pending():
            continue
        if task.is_inbox():
            inbox.append(task)
        elif task.goal_id in by_goal:
            by_goal[task.goal_id].append(task)
        # tasks of inactive or unknown goals are not candidates
    return by_goal, inbox


def select_task(
    active_goals: Sequence[Goal],
    tasks_by_goal: Dict[str, List[Task]],
    inbox: Sequence[Task],
    available_minutes: int,
) -> Optional[Selection]:
    """Scan goal tasks, then inbox tasks. Returns None only when nothing is pending."""
    skipped = 0
    for goal in active_goals:
        for task in rank_tasks(tasks_by_goal.get(goal.id, [])):
            if task.effective_effort <= available_minutes:
                return Selection(task=task, goal=goal, skipped_tasks=skipped)
            skipped += 1

    ranked_inbox = rank_tasks(inbox)
    for task in ranked_inbox:
        if task.effective_effort <= available_minutes:
            return Selection(task=task, skipped_tasks=skipped)

    if ranked_inbox:
        # Last resort: nothing fits, offer the shortest inbox task anyway
        shortest = min(ranked_inbox, key=lambda task: task.effective_effort)
        return Selection(task=shortest, skipped_tasks=skipped, exceeds_window=True)

    return None


def _format_number(value: float) -> str:
    return f"{value:g}"


def context_clause(context: DailyContext) -> str:
    minutes = context.available_minutes
    energy = context.energy_level.value
    if not context.context_set:
        return (
            f"No context set for today, so default values are used "
            f"({minutes} min available, {energy} energy)."
        )
    clause = f"You have {minutes} min available with {energy} energy."
    if context.stress_level > HIGH_STRESS_THRESHOLD:
        clause += f" Stress is high ({_format_number(context.stress_level)}/10)."
    return clause


def selection_clause(selection: Selection, available_minutes: int) -> str:
    if not selection.from_inbox:
        goal = selection.goal
        return (
            f'This task supports your goal "{goal.title}" '
            f"(importance: {goal.importance}/100) and fits your {available_minutes} min window."
        )

    parts = []
    skipped = selection.skipped_tasks
    if skipped:
        noun = "task was" if skipped == 1 else "tasks were"
        parts.append(
            f"{skipped} goal {noun} skipped for exceeding your {available_minutes} min window, "
            f"so this inbox task was pulled instead."
        )
    effort = selection.task.effective_effort
    if selection.exceeds_window:
        subject = "It" if skipped else "This inbox task"
        parts.append(
            f"{subject} needs {effort} min, more than your {available_minutes} min window, "
            f"but was chosen anyway as the shortest available option."
        )
    elif not skipped:
        parts.append(f"This inbox task fits your {available_minutes} min window.")
    return " ".join(parts)


def energy_advice_clause(context: DailyContext, task: Task) -> Optional[str]:
    if context.energy_level == EnergyLevel.LOW and task.effective_effort > LONG_TASK_MINUTES:
        return (
            f"Energy is low: consider breaking this {task.effective_effort} min task "
            f"into smaller steps."
        )
    return None


def stress_advice_clause(context: DailyContext) -> Optional[str]:
    if context.stress_level > HIGH_STRESS_THRESHOLD:
        return "Stress is high: focus on just this one task and set the rest aside."
    return None


def build_reasoning(context: DailyContext, selection: Selection) -> str:
    """Join the applicable clauses in fixed order: context, selection, energy, stress."""
    clauses = [
        context_clause(context),
        selection_clause(selection, context.available_minutes),
        energy_advice_clause(context, selection.task),
        stress_advice_clause(context),
    ]
    return " ".join(clause for clause in clauses if clause)


def recommend(
    context: DailyContext,
    goals: Sequence[Goal],
    tasks: Sequence[Task],
) -> Decision:
    """
    Recommend the next task to work on.

    Args:
        context: Today's context; defaults must already be substituted
            (with context_set=False) when the user recorded none
        goals: The user's goals, any status, in creation order
        tasks: The user's tasks, any status, in creation order

    Returns:
        Decision with either a recommendation or a guidance message,
        plus the inputs the decision was based on
    """
    active_goals = rank_goals(goals)
    tasks_by_goal, inbox = _group_pending(active_goals, tasks)

    inputs = DecisionInputs(
        context=context,
        active_goal_count=len(active_goals),
        total_pending_tasks=len(inbox) + sum(len(group) for group in tasks_by_goal.values()),
        goal_task_counts={goal_id: len(group) for goal_id, group in tasks_by_goal.items()},
    )

    if not active_goals:
        return Decision(None, NO_ACTIVE_GOALS_MESSAGE, inputs)

    if inputs.total_pending_tasks == 0:
        return Decision(None, ALL_TASKS_COMPLETE_MESSAGE, inputs)

    selection = select_task(active_goals, tasks_by_goal, inbox, context.available_minutes)
    if selection is None:
        return Decision(
            None,
            NO_TASK_FITS_MESSAGE.format(minutes=context.available_minutes),
            inputs,
        )

    task = selection.task
    recommendation = Recommendation(
        task_id=task.id,
        task_title=task.title,
        task_description=task.description,
        goal_title=selection.goal.title if selection.goal else None,
        goal_importance=selection.goal.importance if selection.goal else None,
        effort=task.effective_effort,
        impact=task.effective_impact,
        reasoning=build_reasoning(context, selection),
    )
    return Decision(recommendation, None, inputs)
