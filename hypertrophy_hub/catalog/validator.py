"""Catalog validation.

Checks that the static catalogs can actually produce plans:
- Every exercise needs at least one equipment tag, all offered by the picker
- Every alternative id resolves
- Slot ids are unique within a skeleton
- Every template slot has a candidate when all picker equipment is available

Fail fast before runtime.
"""

from loguru import logger

from hypertrophy_hub.catalog.equipment import PICKER_EQUIPMENT
from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.templates import TemplateCatalog
from hypertrophy_hub.planning.errors import CatalogValidationError
from hypertrophy_hub.planning.resolver import find_feasible_exercises


def _exercise_problems(catalog: ExerciseCatalog, picker_equipment: frozenset[str]) -> list[str]:
    problems: list[str] = []
    for exercise in catalog.all():
        if not exercise.equipment:
            problems.append(f"Exercise {exercise.id} has no equipment tags")
        unobtainable = sorted(exercise.equipment - picker_equipment)
        if unobtainable:
            problems.append(f"Exercise {exercise.id} needs equipment not offered by the picker: {unobtainable}")
        missing_alternatives = [alt for alt in exercise.alternatives if alt not in catalog]
        if missing_alternatives:
            problems.append(f"Exercise {exercise.id} lists unknown alternatives: {missing_alternatives}")
    return problems


def _template_problems(
    catalog: ExerciseCatalog,
    templates: TemplateCatalog,
    picker_equipment: frozenset[str],
) -> list[str]:
    problems: list[str] = []
    for template in templates.all():
        for skeleton in template.workouts:
            slots = [*skeleton.core_slots, *skeleton.accessory_pool]
            slot_ids = [slot.slot_id for slot in slots]
            duplicates = sorted({sid for sid in slot_ids if slot_ids.count(sid) > 1})
            if duplicates:
                problems.append(f"Template {template.id} day {skeleton.day} has duplicate slot ids: {duplicates}")

            for slot in slots:
                if not find_feasible_exercises(slot, picker_equipment, catalog=catalog):
                    problems.append(
                        f"Template {template.id} slot {slot.slot_id} "
                        f"({slot.movement_pattern}/{slot.slot_kind.value}) has no candidate exercise"
                    )
    return problems


def validate_catalogs(
    catalog: ExerciseCatalog,
    templates: TemplateCatalog,
    *,
    picker_equipment: frozenset[str] = PICKER_EQUIPMENT,
) -> None:
    """Validate exercise and template catalogs together.

    Args:
        catalog: Exercise catalog
        templates: Template catalog
        picker_equipment: Every equipment tag a user can select

    Raises:
        CatalogValidationError: Listing every problem found
    """
    problems = _exercise_problems(catalog, picker_equipment)
    problems.extend(_template_problems(catalog, templates, picker_equipment))

    if problems:
        logger.error("Catalog validation failed", problem_count=len(problems))
        raise CatalogValidationError(problems)

    logger.info(
        "Catalog validation passed",
        exercise_count=len(catalog),
        template_count=len(templates),
    )
