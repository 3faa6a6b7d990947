"""Catalog models - immutable library units.

Exercises describe WHAT a movement is and what it needs. Templates describe
the shape of a training week as slots to be filled, never concrete exercises.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hypertrophy_hub.catalog.enums import ExerciseKind, LoggingType


class ExerciseDefinition(BaseModel):
    """Catalog entry for a single exercise.

    Attributes:
        id: Unique exercise identifier ([equipment]_[movement]_[name])
        name: Human-readable exercise name
        primary_muscle: Main muscle group trained
        secondary_muscles: Supporting muscle groups, in order of involvement
        equipment: Tags required to perform the exercise, all of them
        movement_pattern: Classification used for slot matching
        kind: Compound or isolation
        alternatives: Ids of substitute exercises (informational)
        description: Coaching note
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    primary_muscle: str
    secondary_muscles: list[str] = Field(default_factory=list)
    equipment: frozenset[str]
    movement_pattern: str
    kind: ExerciseKind
    alternatives: list[str] = Field(default_factory=list)
    description: str = ""

    def is_feasible_with(self, available_equipment: set[str] | frozenset[str]) -> bool:
        """Whether every required equipment tag is available."""
        return self.equipment <= available_equipment


class WorkoutSlot(BaseModel):
    """Placeholder in a skeleton, filled with a concrete exercise at generation time."""

    model_config = ConfigDict(frozen=True)

    slot_id: str = Field(..., min_length=1)
    movement_pattern: str
    slot_kind: ExerciseKind
    target_sets: int = Field(..., ge=1)
    target_reps: str
    logging_type: LoggingType


class WorkoutSkeleton(BaseModel):
    """One workout day of a template: mandatory core slots plus an accessory pool."""

    model_config = ConfigDict(frozen=True)

    day: str
    name: str
    core_slots: list[WorkoutSlot]
    accessory_pool: list[WorkoutSlot] = Field(default_factory=list)


class WorkoutTemplate(BaseModel):
    """Blueprint for a complete training program."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    days_per_week: int = Field(..., ge=1, le=7)
    workouts: list[WorkoutSkeleton] = Field(..., min_length=1)

    @field_validator("workouts")
    @classmethod
    def validate_unique_days(cls, value: list[WorkoutSkeleton]) -> list[WorkoutSkeleton]:
        """Day labels key the generated level, so they must be unique."""
        days = [skeleton.day for skeleton in value]
        duplicates = sorted({day for day in days if days.count(day) > 1})
        if duplicates:
            raise ValueError(f"Duplicate workout day labels: {duplicates}")
        return value
