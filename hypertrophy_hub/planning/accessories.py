"""Accessory Selector.

Resolves every slot in an accessory pool, shuffles the resolved exercises and
keeps as many as the volume allows. A pool that resolves fewer accessories
than requested simply yields all of them.
"""

import random
from collections.abc import Iterable

from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.models import WorkoutSlot
from hypertrophy_hub.planning.logging import log_unresolved_slot
from hypertrophy_hub.planning.models import GeneratedExercise
from hypertrophy_hub.planning.randomness import make_rng
from hypertrophy_hub.planning.resolver import resolve_slot


def select_accessories(
    pool: list[WorkoutSlot],
    available_equipment: Iterable[str],
    excluded_ids: Iterable[str],
    count: int,
    *,
    catalog: ExerciseCatalog | None = None,
    rng: random.Random | None = None,
    set_increment: int = 0,
    context: dict[str, str | int | None] | None = None,
) -> list[GeneratedExercise]:
    """Select up to `count` accessories from a pool.

    Args:
        pool: Accessory slots to draw from
        available_equipment: Equipment tags the user has
        excluded_ids: Exercise ids to avoid when possible
        count: Requested number of accessories (negative behaves as 0)
        catalog: Exercise catalog (defaults to the process-wide catalog)
        rng: Random source (defaults to make_rng())
        set_increment: Sets added on top of each slot's target (progression)
        context: Logging context for unresolved slots

    Returns:
        min(count, resolvable slots) accessories in shuffled order
    """
    rng = rng or make_rng()
    equipment = frozenset(available_equipment)
    excluded = frozenset(excluded_ids)

    resolved: list[GeneratedExercise] = []
    for slot in pool:
        resolution = resolve_slot(slot, equipment, excluded, catalog=catalog, rng=rng)
        if not resolution.found:
            log_unresolved_slot(resolution, {**(context or {}), "role": "accessory"})
            continue
        resolved.append(
            GeneratedExercise(
                id=resolution.exercise_id,
                sets=slot.target_sets + set_increment,
                reps=slot.target_reps,
                logging_type=slot.logging_type,
            )
        )

    rng.shuffle(resolved)
    return resolved[: max(count, 0)]
