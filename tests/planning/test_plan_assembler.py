"""Plan Assembler Tests.

Tests cover:
- Bodyweight-only standard plan (core first, bounded accessories)
- Empty equipment still yields a plan with empty days
- Volume mapping bounds and defaults
- Unknown template is a hard failure (None)
- Determinism under a fixed seed
"""

import random

import pytest

from hypertrophy_hub.catalog.enums import ExerciseKind, VolumeLevel
from hypertrophy_hub.config.settings import settings
from hypertrophy_hub.planning.assembler import FIRST_LEVEL_DESCRIPTION, generate_plan

BODYWEIGHT_IDS = {"bw_pushup", "bw_squat", "bw_sissy_squat", "bw_plank", "bw_crunch", "bw_tricep_extension", "bw_row_doorframe"}


def _generate(exercise_catalog, template_catalog, template_id="test_full_body", equipment=("bodyweight",), **kwargs):
    kwargs.setdefault("rng", random.Random(42))
    return generate_plan(
        template_id,
        equipment,
        catalog=exercise_catalog,
        templates=template_catalog,
        **kwargs,
    )


def test_bodyweight_standard_plan(exercise_catalog, template_catalog):
    """Bodyweight user on a standard session gets both core lifts and two accessories."""
    plan = _generate(exercise_catalog, template_catalog, volume="standard")

    assert plan is not None
    assert len(plan.levels) == 1
    day = plan.levels[0].workouts["Day 1"]
    ids = day.exercise_ids

    assert ids[:2] == ["bw_pushup", "bw_squat"]
    assert len(ids) == 4
    assert set(ids[2:]) <= {"bw_plank", "bw_crunch", "bw_tricep_extension"}
    assert set(ids) <= BODYWEIGHT_IDS


@pytest.mark.parametrize("seed", range(20))
def test_every_exercise_is_feasible_and_matches_its_slot(exercise_catalog, template_catalog, seed):
    equipment = {"bodyweight", "dumbbell"}
    plan = _generate(exercise_catalog, template_catalog, "test_split", equipment, volume="long", rng=random.Random(seed))

    for workout in plan.levels[0].workouts.values():
        for exercise in workout.exercises:
            definition = exercise_catalog.lookup(exercise.id)
            assert definition.equipment <= equipment

    full_body = plan.levels[0].workouts["Day 1"]
    core_kinds = [exercise_catalog.lookup(i).kind for i in full_body.exercise_ids[:2]]
    assert core_kinds == [ExerciseKind.COMPOUND, ExerciseKind.COMPOUND]
    assert [exercise_catalog.lookup(i).movement_pattern for i in full_body.exercise_ids[:2]] == [
        "horizontal_press",
        "squat",
    ]


def test_empty_equipment_yields_plan_with_empty_days(exercise_catalog, template_catalog, log_records):
    plan = _generate(exercise_catalog, template_catalog, "test_split", equipment=())

    assert plan is not None
    assert list(plan.levels[0].workouts) == ["Day 1", "Day 2"]
    assert all(w.exercises == [] for w in plan.levels[0].workouts.values())
    assert plan.selected_equipment == []
    assert any(r["level"].name == "WARNING" for r in log_records)


@pytest.mark.parametrize(
    ("volume", "expected_accessories"),
    [("short", 1), ("standard", 2), ("long", 3), (VolumeLevel.LONG, 3), ("LONG", 3)],
)
def test_volume_controls_accessory_count(exercise_catalog, template_catalog, all_test_equipment, volume, expected_accessories):
    """The full body pool has 3 resolvable slots, so long is capped at 3."""
    plan = _generate(exercise_catalog, template_catalog, equipment=all_test_equipment, volume=volume)

    assert len(plan.levels[0].workouts["Day 1"].exercises) == 2 + expected_accessories


def test_unknown_volume_treated_as_standard(exercise_catalog, template_catalog, all_test_equipment):
    plan = _generate(exercise_catalog, template_catalog, equipment=all_test_equipment, volume="extreme")

    assert plan.volume == VolumeLevel.STANDARD
    assert len(plan.levels[0].workouts["Day 1"].exercises) == 4


def test_missing_volume_uses_configured_default(exercise_catalog, template_catalog, all_test_equipment, monkeypatch):
    monkeypatch.setattr(settings, "default_volume", VolumeLevel.SHORT)

    plan = _generate(exercise_catalog, template_catalog, equipment=all_test_equipment)

    assert plan.volume == VolumeLevel.SHORT
    assert len(plan.levels[0].workouts["Day 1"].exercises) == 3


def test_unknown_template_returns_none(exercise_catalog, template_catalog, log_records):
    plan = _generate(exercise_catalog, template_catalog, template_id="does_not_exist")

    assert plan is None
    errors = [r for r in log_records if r["level"].name == "ERROR"]
    assert errors and errors[0]["extra"]["template_id"] == "does_not_exist"


def test_plan_metadata(exercise_catalog, template_catalog):
    plan = _generate(exercise_catalog, template_catalog, equipment=["dumbbell", "bodyweight"], volume="short")

    assert plan.id.startswith("generated_")
    assert len(plan.id) == len("generated_") + 32
    assert plan.name == "My Test Full Body"
    assert plan.template_id == "test_full_body"
    assert plan.image == settings.plan_image_url
    assert plan.selected_equipment == ["bodyweight", "dumbbell"]
    assert "a single-day full body test program" in plan.description
    assert "~30-40 minutes" in plan.description

    level = plan.levels[0]
    assert level.level == 1
    assert level.name == "Custom Level 1"
    assert level.description == FIRST_LEVEL_DESCRIPTION
    assert level.workouts["Day 1"].name == "Full Body"


def test_custom_plan_name(exercise_catalog, template_catalog):
    plan = _generate(exercise_catalog, template_catalog, plan_name="Garage Gains")

    assert plan.name == "Garage Gains"


def test_core_prescription_copied_from_slot(exercise_catalog, template_catalog):
    plan = _generate(exercise_catalog, template_catalog)
    press, squat = plan.levels[0].workouts["Day 1"].exercises[:2]

    assert (press.sets, press.reps) == (4, "6-10")
    assert (squat.sets, squat.reps) == (3, "8-12")


def test_excluded_ids_avoided_at_generation(exercise_catalog, template_catalog, all_test_equipment):
    excluded = ["bw_pushup", "db_press_bench", "bw_squat", "db_squat_goblet"]

    for seed in range(10):
        plan = _generate(
            exercise_catalog, template_catalog, equipment=all_test_equipment, excluded_ids=excluded, rng=random.Random(seed)
        )
        assert plan.levels[0].workouts["Day 1"].exercise_ids[:2] == ["db_press_floor", "bb_squat"]


def test_unresolved_core_slot_logged_and_skipped(exercise_catalog, template_catalog, all_test_equipment, log_records):
    plan = _generate(exercise_catalog, template_catalog, "test_split", all_test_equipment)

    pull_day = plan.levels[0].workouts["Day 2"]
    assert exercise_catalog.lookup(pull_day.exercise_ids[0]).movement_pattern == "horizontal_pull"
    assert len(pull_day.exercises) == 1 + 2

    warnings = [r for r in log_records if r["level"].name == "WARNING"]
    assert len(warnings) == 1
    extra = warnings[0]["extra"]
    assert extra["slot_id"] == "p2"
    assert extra["role"] == "core"
    assert extra["template_id"] == "test_split"
    assert extra["day"] == "Day 2"


def test_same_seed_produces_identical_plans(exercise_catalog, template_catalog, all_test_equipment):
    first = _generate(exercise_catalog, template_catalog, "test_split", all_test_equipment, rng=random.Random(7))
    second = _generate(exercise_catalog, template_catalog, "test_split", all_test_equipment, rng=random.Random(7))

    assert first.model_dump_json() == second.model_dump_json()


def test_different_draws_produce_different_ids(exercise_catalog, template_catalog, rng):
    first = _generate(exercise_catalog, template_catalog, rng=rng)
    second = _generate(exercise_catalog, template_catalog, rng=rng)

    assert first.id != second.id
