"""Plan Assembler.

Turns a template into a concrete level-1 plan:
1. Look up template (unknown id is a hard failure)
2. Per skeleton: resolve core slots, then select accessories by volume
3. Package days into a GeneratedPlan

Individual slots that cannot be filled are dropped with a warning. They never
abort generation, so a user with little equipment still gets a workout.
"""

import random
from collections.abc import Iterable

from loguru import logger

from hypertrophy_hub.catalog.enums import VolumeLevel
from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.loader import get_exercise_catalog, get_template_catalog
from hypertrophy_hub.catalog.models import WorkoutSkeleton
from hypertrophy_hub.catalog.templates import TemplateCatalog
from hypertrophy_hub.config.settings import settings
from hypertrophy_hub.planning.accessories import select_accessories
from hypertrophy_hub.planning.logging import log_unresolved_slot
from hypertrophy_hub.planning.models import GeneratedExercise, GeneratedPlan, GeneratedWorkoutDay, TrainingLevel
from hypertrophy_hub.planning.randomness import make_rng, new_plan_id
from hypertrophy_hub.planning.resolver import resolve_slot
from hypertrophy_hub.planning.volume import accessory_count_for_volume, get_volume_display_info, normalize_volume

FIRST_LEVEL_DESCRIPTION = "Your personalized training program based on available equipment."


def assemble_workout_day(
    skeleton: WorkoutSkeleton,
    available_equipment: frozenset[str],
    excluded_ids: frozenset[str],
    *,
    accessory_count: int,
    catalog: ExerciseCatalog,
    rng: random.Random,
    day_name: str | None = None,
    set_increment: int = 0,
    context: dict[str, str | int | None] | None = None,
) -> GeneratedWorkoutDay:
    """Build one workout day from a skeleton.

    Core exercises come first in slot order, followed by accessories in
    selection order.

    Args:
        skeleton: Workout skeleton to fill
        available_equipment: Equipment tags the user has
        excluded_ids: Exercise ids to avoid when possible
        accessory_count: Number of accessories requested
        catalog: Exercise catalog
        rng: Random source
        day_name: Display name override (defaults to skeleton name)
        set_increment: Sets added on top of every slot's target
        context: Logging context for unresolved slots

    Returns:
        GeneratedWorkoutDay, possibly with fewer exercises than the skeleton has slots
    """
    context = {**(context or {}), "day": skeleton.day}
    exercises: list[GeneratedExercise] = []

    for slot in skeleton.core_slots:
        resolution = resolve_slot(slot, available_equipment, excluded_ids, catalog=catalog, rng=rng)
        if not resolution.found:
            log_unresolved_slot(resolution, {**context, "role": "core"})
            continue
        exercises.append(
            GeneratedExercise(
                id=resolution.exercise_id,
                sets=slot.target_sets + set_increment,
                reps=slot.target_reps,
                logging_type=slot.logging_type,
            )
        )

    exercises.extend(
        select_accessories(
            skeleton.accessory_pool,
            available_equipment,
            excluded_ids,
            accessory_count,
            catalog=catalog,
            rng=rng,
            set_increment=set_increment,
            context=context,
        )
    )

    return GeneratedWorkoutDay(name=day_name or skeleton.name, exercises=exercises)


def generate_plan(
    template_id: str,
    available_equipment: Iterable[str],
    volume: VolumeLevel | str | None = None,
    excluded_ids: Iterable[str] = (),
    plan_name: str | None = None,
    *,
    catalog: ExerciseCatalog | None = None,
    templates: TemplateCatalog | None = None,
    rng: random.Random | None = None,
) -> GeneratedPlan | None:
    """Generate a complete level-1 plan from a template.

    Args:
        template_id: Template to build from
        available_equipment: Equipment tags the user has
        volume: Session volume (short/standard/long; None uses DEFAULT_VOLUME)
        excluded_ids: Exercise ids to avoid when possible
        plan_name: Plan display name (defaults to "My <template name>")
        catalog: Exercise catalog (defaults to the process-wide catalog)
        templates: Template catalog (defaults to the process-wide catalog)
        rng: Random source (defaults to make_rng())

    Returns:
        GeneratedPlan, or None when the template does not exist
    """
    catalog = catalog or get_exercise_catalog()
    templates = templates or get_template_catalog()
    rng = rng or make_rng()

    template = templates.lookup(template_id)
    if template is None:
        logger.error("Template not found, cannot generate plan", template_id=template_id)
        return None

    volume_level = normalize_volume(volume if volume is not None else settings.default_volume)
    equipment = frozenset(available_equipment)
    excluded = frozenset(excluded_ids)
    accessory_count = accessory_count_for_volume(volume_level)

    workouts: dict[str, GeneratedWorkoutDay] = {}
    for skeleton in template.workouts:
        workouts[skeleton.day] = assemble_workout_day(
            skeleton,
            equipment,
            excluded,
            accessory_count=accessory_count,
            catalog=catalog,
            rng=rng,
            context={"template_id": template.id, "level": 1},
        )

    volume_info = get_volume_display_info(volume_level)
    plan = GeneratedPlan(
        id=new_plan_id(rng),
        name=plan_name or f"My {template.name}",
        description=(
            f"Personalized {template.description.rstrip('.').lower()}, generated for "
            f"{volume_info.name.lower()} sessions ({volume_info.duration}) with your available equipment."
        ),
        image=settings.plan_image_url,
        template_id=template.id,
        volume=volume_level,
        selected_equipment=sorted(equipment),
        levels=[
            TrainingLevel(
                level=1,
                name="Custom Level 1",
                description=FIRST_LEVEL_DESCRIPTION,
                workouts=workouts,
            )
        ],
    )

    logger.info(
        "Plan generated",
        plan_id=plan.id,
        template_id=template.id,
        volume=volume_level.value,
        equipment_count=len(equipment),
        exercise_counts={day: len(w.exercises) for day, w in workouts.items()},
    )
    return plan
