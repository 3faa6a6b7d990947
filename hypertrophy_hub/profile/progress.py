"""User profile progress through a generated plan.

Pure state transitions over the profile a caller persists. Nothing here
touches storage: every function returns a new UserProfile and the caller
writes it back.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from hypertrophy_hub.planning.models import GeneratedPlan, TrainingLevel
from hypertrophy_hub.planning.progression import append_level

DEFAULT_BLOCK_DURATION_WEEKS = 6
DAYS_PER_WEEK = 7


class UserProfile(BaseModel):
    """Progress state stored in the user's profile.

    Attributes:
        active_generated_plan: Plan the user is following, if any
        current_level_index: 0-based index into the plan's levels
        block_start_date: Date the current training block started
        block_duration_weeks: Planned length of a training block
        completed_workout_count: Workouts finished in the current block
        target_workout_count: Workouts planned for the current block
    """

    model_config = ConfigDict(frozen=True)

    active_generated_plan: GeneratedPlan | None = None
    current_level_index: int = Field(default=0, ge=0)
    block_start_date: date | None = None
    block_duration_weeks: int = Field(default=DEFAULT_BLOCK_DURATION_WEEKS, ge=1)
    completed_workout_count: int = Field(default=0, ge=0)
    target_workout_count: int = Field(default=0, ge=0)


def _target_workouts(level: TrainingLevel, weeks: int) -> int:
    return len(level.workouts) * weeks


def _new_block(profile: UserProfile, plan: GeneratedPlan, level_index: int, today: date) -> UserProfile:
    return profile.model_copy(
        update={
            "active_generated_plan": plan,
            "current_level_index": level_index,
            "block_start_date": today,
            "block_duration_weeks": DEFAULT_BLOCK_DURATION_WEEKS,
            "completed_workout_count": 0,
            "target_workout_count": _target_workouts(plan.levels[level_index], DEFAULT_BLOCK_DURATION_WEEKS),
        }
    )


def start_generated_plan(profile: UserProfile, plan: GeneratedPlan, *, today: date) -> UserProfile:
    """Make `plan` the active plan and start a block at its first level."""
    return _new_block(profile, plan, 0, today)


def get_current_level(profile: UserProfile) -> TrainingLevel | None:
    """Level the user is currently training, or None without an active plan."""
    plan = profile.active_generated_plan
    if plan is None or profile.current_level_index >= len(plan.levels):
        return None
    return plan.levels[profile.current_level_index]


def add_level_to_plan(profile: UserProfile, level: TrainingLevel, *, today: date) -> UserProfile | None:
    """Append a newly generated level and start a block on it.

    Returns:
        Updated profile, or None when there is no active plan

    Raises:
        LevelSequenceError: If the level number does not follow the plan's last level
    """
    plan = profile.active_generated_plan
    if plan is None:
        return None
    updated_plan = append_level(plan, level)
    return _new_block(profile, updated_plan, len(updated_plan.levels) - 1, today)


def start_next_level(profile: UserProfile, *, today: date) -> UserProfile | None:
    """Move to the next existing level. None without an active plan or when already on the last level."""
    plan = profile.active_generated_plan
    if plan is None or profile.current_level_index + 1 >= len(plan.levels):
        return None
    return _new_block(profile, plan, profile.current_level_index + 1, today)


def restart_current_level(profile: UserProfile, *, today: date) -> UserProfile | None:
    """Start a fresh block on the current level. None without an active plan."""
    plan = profile.active_generated_plan
    if plan is None:
        return None
    return _new_block(profile, plan, min(profile.current_level_index, len(plan.levels) - 1), today)


def end_training_block(profile: UserProfile) -> UserProfile:
    """Drop the active plan and reset progress."""
    return profile.model_copy(
        update={
            "active_generated_plan": None,
            "current_level_index": 0,
            "block_start_date": None,
            "block_duration_weeks": DEFAULT_BLOCK_DURATION_WEEKS,
            "completed_workout_count": 0,
            "target_workout_count": 0,
        }
    )


def update_block_duration(profile: UserProfile, weeks: int) -> UserProfile | None:
    """Change the block length. None when weeks < 1."""
    if weeks < 1:
        return None
    update: dict[str, int] = {"block_duration_weeks": weeks}
    level = get_current_level(profile)
    if level is not None:
        update["target_workout_count"] = _target_workouts(level, weeks)
    return profile.model_copy(update=update)


def record_completed_workout(profile: UserProfile) -> UserProfile:
    return profile.model_copy(update={"completed_workout_count": profile.completed_workout_count + 1})


def get_weeks_remaining(profile: UserProfile, *, today: date) -> int | None:
    """Whole weeks left in the block, never negative. None when no block is running."""
    if profile.block_start_date is None or profile.active_generated_plan is None:
        return None
    weeks_elapsed = (today - profile.block_start_date).days // DAYS_PER_WEEK
    return max(0, profile.block_duration_weeks - weeks_elapsed)


def is_block_complete(profile: UserProfile, *, today: date) -> bool:
    """A block is complete once its weeks have run out or every planned workout is done."""
    weeks_remaining = get_weeks_remaining(profile, today=today)
    if weeks_remaining is None:
        return False
    if profile.target_workout_count and profile.completed_workout_count >= profile.target_workout_count:
        return True
    return weeks_remaining <= 0
