"""Slot Resolver.

Fills a single template slot with one concrete exercise.

Filters are applied in order:
1. movement_pattern matches slot (exact)
2. exercise kind matches slot kind
3. required equipment is a subset of available equipment
4. excluded ids removed

If step 4 leaves nothing, the step 3 result is used instead, so repeat
avoidance is best effort: a slot is never left empty just because every
feasible exercise was used last level.
"""

import random
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from hypertrophy_hub.catalog.enums import ExerciseKind
from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.loader import get_exercise_catalog
from hypertrophy_hub.catalog.models import ExerciseDefinition, WorkoutSlot
from hypertrophy_hub.planning.randomness import make_rng


@dataclass(frozen=True)
class SlotResolution:
    """Outcome of resolving one slot.

    Attributes:
        slot_id: Slot that was resolved
        movement_pattern: Pattern the slot asked for
        slot_kind: Kind the slot asked for
        exercise_id: Chosen exercise, or None when nothing is feasible
        used_fallback: True when exclusions covered every feasible exercise
        candidate_count: Size of the set the exercise was drawn from
    """

    slot_id: str
    movement_pattern: str
    slot_kind: ExerciseKind
    exercise_id: str | None
    used_fallback: bool = False
    candidate_count: int = 0

    @property
    def found(self) -> bool:
        return self.exercise_id is not None


def find_feasible_exercises(
    slot: WorkoutSlot,
    available_equipment: Iterable[str],
    *,
    catalog: ExerciseCatalog | None = None,
) -> list[ExerciseDefinition]:
    """Exercises matching the slot's pattern and kind that the user can perform.

    Args:
        slot: Slot to match
        available_equipment: Equipment tags the user has
        catalog: Exercise catalog (defaults to the process-wide catalog)

    Returns:
        Feasible exercises in catalog order
    """
    catalog = catalog or get_exercise_catalog()
    equipment = frozenset(available_equipment)

    candidates = catalog.by_movement_pattern(slot.movement_pattern)
    candidates = [e for e in candidates if e.kind == slot.slot_kind]
    return [e for e in candidates if e.is_feasible_with(equipment)]


def resolve_slot(
    slot: WorkoutSlot,
    available_equipment: Iterable[str],
    excluded_ids: Iterable[str] = (),
    *,
    catalog: ExerciseCatalog | None = None,
    rng: random.Random | None = None,
) -> SlotResolution:
    """Select one exercise for a slot.

    Args:
        slot: Slot to fill
        available_equipment: Equipment tags the user has
        excluded_ids: Exercise ids to avoid when possible
        catalog: Exercise catalog (defaults to the process-wide catalog)
        rng: Random source (defaults to make_rng())

    Returns:
        SlotResolution; `found` is False when no feasible exercise exists
    """
    rng = rng or make_rng()
    feasible = find_feasible_exercises(slot, available_equipment, catalog=catalog)

    excluded = set(excluded_ids)
    available = [e for e in feasible if e.id not in excluded]

    used_fallback = False
    final_candidates = available
    if not available and feasible:
        used_fallback = True
        final_candidates = feasible
        logger.debug(
            "Exclusions cover every feasible exercise, falling back",
            slot_id=slot.slot_id,
            movement_pattern=slot.movement_pattern,
            feasible_count=len(feasible),
        )

    if not final_candidates:
        return SlotResolution(
            slot_id=slot.slot_id,
            movement_pattern=slot.movement_pattern,
            slot_kind=slot.slot_kind,
            exercise_id=None,
        )

    chosen = rng.choice(final_candidates)
    return SlotResolution(
        slot_id=slot.slot_id,
        movement_pattern=slot.movement_pattern,
        slot_kind=slot.slot_kind,
        exercise_id=chosen.id,
        used_fallback=used_fallback,
        candidate_count=len(final_candidates),
    )
