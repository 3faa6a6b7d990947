"""Root conftest for all tests.

Shared fixtures: a small in-memory exercise/template catalog, a seeded
random source and a loguru capture sink.
"""

import random

import pytest
from loguru import logger

from hypertrophy_hub.catalog.enums import ExerciseKind, LoggingType
from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.models import ExerciseDefinition, WorkoutSkeleton, WorkoutSlot, WorkoutTemplate
from hypertrophy_hub.catalog.templates import TemplateCatalog


def make_exercise(
    exercise_id: str,
    pattern: str,
    kind: ExerciseKind,
    equipment: list[str],
    muscle: str = "Chest",
    alternatives: list[str] | None = None,
) -> ExerciseDefinition:
    """Helper to create test exercise definitions."""
    return ExerciseDefinition(
        id=exercise_id,
        name=exercise_id.replace("_", " ").title(),
        primary_muscle=muscle,
        secondary_muscles=[],
        equipment=frozenset(equipment),
        movement_pattern=pattern,
        kind=kind,
        alternatives=alternatives or [],
        description="",
    )


def make_slot(
    slot_id: str,
    pattern: str,
    kind: ExerciseKind,
    sets: int = 3,
    reps: str = "8-12",
    logging_type: LoggingType = LoggingType.WEIGHT_REPS,
) -> WorkoutSlot:
    """Helper to create test workout slots."""
    return WorkoutSlot(
        slot_id=slot_id,
        movement_pattern=pattern,
        slot_kind=kind,
        target_sets=sets,
        target_reps=reps,
        logging_type=logging_type,
    )


C = ExerciseKind.COMPOUND
I = ExerciseKind.ISOLATION  # noqa: E741

TEST_EXERCISES = [
    make_exercise("bw_pushup", "horizontal_press", C, ["bodyweight"], alternatives=["db_press_bench", "missing_id"]),
    make_exercise("db_press_bench", "horizontal_press", C, ["dumbbell", "bench"]),
    make_exercise("db_press_floor", "horizontal_press", C, ["dumbbell"]),
    make_exercise("db_flyes", "horizontal_press", I, ["dumbbell", "bench"]),
    make_exercise("bw_squat", "squat", C, ["bodyweight"], muscle="Quadriceps"),
    make_exercise("db_squat_goblet", "squat", C, ["dumbbell"], muscle="Quadriceps"),
    make_exercise("bb_squat", "squat", C, ["barbell", "squat_rack"], muscle="Quadriceps"),
    make_exercise("bw_sissy_squat", "squat", I, ["bodyweight"], muscle="Quadriceps"),
    make_exercise("bw_plank", "core", I, ["bodyweight"], muscle="Core"),
    make_exercise("bw_crunch", "core", I, ["bodyweight"], muscle="Core"),
    make_exercise("bw_tricep_extension", "tricep_extension", I, ["bodyweight"], muscle="Triceps"),
    make_exercise("db_kickback", "tricep_extension", I, ["dumbbell"], muscle="Triceps"),
    make_exercise("db_raise_lateral", "lateral_raise", I, ["dumbbell"], muscle="Shoulders"),
    make_exercise("bw_row_doorframe", "horizontal_pull", C, ["bodyweight"], muscle="Back"),
    make_exercise("db_row_bent", "horizontal_pull", C, ["dumbbell"], muscle="Back"),
    make_exercise("db_curl_bicep", "bicep_curl", I, ["dumbbell"], muscle="Biceps"),
    make_exercise("band_curl", "bicep_curl", I, ["resistance_band"], muscle="Biceps"),
]

FULL_BODY_SKELETON = WorkoutSkeleton(
    day="Day 1",
    name="Full Body",
    core_slots=[
        make_slot("fb1", "horizontal_press", C, sets=4, reps="6-10"),
        make_slot("fb2", "squat", C, sets=3, reps="8-12"),
    ],
    accessory_pool=[
        make_slot("fb3", "core", I, reps="45-60s", logging_type=LoggingType.TIMED),
        make_slot("fb4", "tricep_extension", I, reps="10-15"),
        make_slot("fb5", "lateral_raise", I, reps="12-15"),
    ],
)

PULL_SKELETON = WorkoutSkeleton(
    day="Day 2",
    name="Pull",
    core_slots=[
        make_slot("p1", "horizontal_pull", C, sets=4, reps="6-10"),
        make_slot("p2", "vertical_pull", C, reps="6-12", logging_type=LoggingType.REPS_ONLY),
    ],
    accessory_pool=[
        make_slot("p3", "bicep_curl", I, reps="10-15"),
        make_slot("p4", "core", I, reps="10-15", logging_type=LoggingType.REPS_ONLY),
    ],
)

TEST_TEMPLATES = [
    WorkoutTemplate(
        id="test_full_body",
        name="Test Full Body",
        description="A single-day full body test program.",
        days_per_week=1,
        workouts=[FULL_BODY_SKELETON],
    ),
    WorkoutTemplate(
        id="test_split",
        name="Test Split",
        description="A two-day test split.",
        days_per_week=2,
        workouts=[FULL_BODY_SKELETON, PULL_SKELETON],
    ),
]

ALL_TEST_EQUIPMENT = frozenset({"bodyweight", "dumbbell", "bench", "barbell", "squat_rack", "resistance_band"})


@pytest.fixture
def exercise_catalog() -> ExerciseCatalog:
    return ExerciseCatalog(TEST_EXERCISES)


@pytest.fixture
def template_catalog() -> TemplateCatalog:
    return TemplateCatalog(TEST_TEMPLATES)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def slot_factory():
    """Factory for ad-hoc workout slots."""
    return make_slot


@pytest.fixture
def all_test_equipment() -> frozenset[str]:
    return ALL_TEST_EQUIPMENT
