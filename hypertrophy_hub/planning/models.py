"""Generated plan output models.

These are the concrete values handed back to callers for display and
persistence. Sets are the only number generation ever adjusts; reps are the
slot's prescription string carried through verbatim.
"""

from pydantic import BaseModel, ConfigDict, Field

from hypertrophy_hub.catalog.enums import LoggingType, VolumeLevel


class GeneratedExercise(BaseModel):
    """A slot filled with a concrete exercise.

    Attributes:
        id: Exercise catalog id
        sets: Prescribed set count (slot target plus any progression increment)
        reps: Rep/duration prescription copied from the slot (e.g. "6-10", "45-60s")
        logging_type: What the session UI asks the user to log
    """

    model_config = ConfigDict(frozen=True)

    id: str
    sets: int = Field(..., ge=1)
    reps: str
    logging_type: LoggingType


class GeneratedWorkoutDay(BaseModel):
    """One generated workout: core exercises first, then accessories."""

    model_config = ConfigDict(frozen=True)

    name: str
    exercises: list[GeneratedExercise] = Field(default_factory=list)

    @property
    def exercise_ids(self) -> list[str]:
        return [exercise.id for exercise in self.exercises]


class TrainingLevel(BaseModel):
    """One progression stage of a generated plan.

    Attributes:
        level: 1-based level number
        name: Display name (e.g. "Custom Level 2")
        description: Display description
        workouts: Day label -> generated workout, in template order
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    name: str
    description: str
    workouts: dict[str, GeneratedWorkoutDay]

    def exercise_ids(self) -> list[str]:
        """Every exercise id in the level, in day order, without duplicates."""
        return list(dict.fromkeys(eid for day in self.workouts.values() for eid in day.exercise_ids))


class GeneratedPlan(BaseModel):
    """A user's generated training plan.

    Levels are append-only: level 1 is created at generation time and each
    progression adds exactly one level at the end.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    image: str
    template_id: str
    volume: VolumeLevel
    selected_equipment: list[str]
    levels: list[TrainingLevel] = Field(..., min_length=1)

    @property
    def latest_level(self) -> TrainingLevel:
        return self.levels[-1]
