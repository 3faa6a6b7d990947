"""Level Progressor.

Produces the next level of an existing plan. Every slot is re-resolved with
the previous level's exercises excluded, sets go up by one and each workout
gets one more accessory than a standard session.

The progressor never mutates the plan it is given. Callers append the new
level with `append_level` and persist the result themselves.
"""

import random
from collections.abc import Iterable

from loguru import logger

from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.loader import get_exercise_catalog, get_template_catalog
from hypertrophy_hub.catalog.templates import TemplateCatalog
from hypertrophy_hub.planning.assembler import assemble_workout_day
from hypertrophy_hub.planning.errors import LevelSequenceError
from hypertrophy_hub.planning.models import GeneratedPlan, GeneratedWorkoutDay, TrainingLevel
from hypertrophy_hub.planning.randomness import make_rng

PROGRESSION_SET_INCREMENT = 1
PROGRESSION_ACCESSORY_COUNT = 3
PROGRESSION_DESCRIPTION = "Advanced progression with increased volume and exercise variety."


def collect_level_exercise_ids(level: TrainingLevel) -> list[str]:
    """Exercise ids used in a level, ordered and de-duplicated.

    This is the exclusion list to pass to `generate_next_level` once the
    level is finished.
    """
    return level.exercise_ids()


def generate_next_level(
    current_plan: GeneratedPlan,
    available_equipment: Iterable[str],
    previous_level_exercise_ids: Iterable[str],
    *,
    catalog: ExerciseCatalog | None = None,
    templates: TemplateCatalog | None = None,
    rng: random.Random | None = None,
) -> TrainingLevel | None:
    """Generate level N+1 for a plan with N levels.

    Args:
        current_plan: Plan to progress (not modified)
        available_equipment: Equipment tags the user has
        previous_level_exercise_ids: Exercise ids to avoid (usually the finished level's)
        catalog: Exercise catalog (defaults to the process-wide catalog)
        templates: Template catalog (defaults to the process-wide catalog)
        rng: Random source (defaults to make_rng())

    Returns:
        The new TrainingLevel, or None when the plan's template does not exist
    """
    catalog = catalog or get_exercise_catalog()
    templates = templates or get_template_catalog()
    rng = rng or make_rng()

    template = templates.lookup(current_plan.template_id)
    if template is None:
        logger.error(
            "Template not found, cannot generate next level",
            plan_id=current_plan.id,
            template_id=current_plan.template_id,
        )
        return None

    level_number = len(current_plan.levels) + 1
    equipment = frozenset(available_equipment)
    excluded = frozenset(previous_level_exercise_ids)

    workouts: dict[str, GeneratedWorkoutDay] = {}
    for skeleton in template.workouts:
        workouts[skeleton.day] = assemble_workout_day(
            skeleton,
            equipment,
            excluded,
            accessory_count=PROGRESSION_ACCESSORY_COUNT,
            catalog=catalog,
            rng=rng,
            day_name=f"{skeleton.name}: Level {level_number}",
            set_increment=PROGRESSION_SET_INCREMENT,
            context={"template_id": template.id, "level": level_number},
        )

    level = TrainingLevel(
        level=level_number,
        name=f"Custom Level {level_number}",
        description=PROGRESSION_DESCRIPTION,
        workouts=workouts,
    )

    repeated = sorted(set(level.exercise_ids()) & excluded)
    logger.info(
        "Next level generated",
        plan_id=current_plan.id,
        level=level_number,
        excluded_count=len(excluded),
        repeated_exercise_ids=repeated,
    )
    return level


def append_level(plan: GeneratedPlan, level: TrainingLevel) -> GeneratedPlan:
    """Return a copy of `plan` with `level` appended.

    Raises:
        LevelSequenceError: If level.level is not len(plan.levels) + 1
    """
    expected = len(plan.levels) + 1
    if level.level != expected:
        raise LevelSequenceError(expected=expected, actual=level.level)
    return plan.model_copy(update={"levels": [*plan.levels, level]})
