"""Slot resolution observability.

Unresolvable slots are an expected outcome with sparse equipment. They are
never raised, only reported here.
"""

from loguru import logger

from hypertrophy_hub.planning.resolver import SlotResolution


def log_unresolved_slot(resolution: SlotResolution, context: dict[str, str | int | None]) -> None:
    """Log a slot that could not be filled.

    Args:
        resolution: The unresolved SlotResolution
        context: Additional context (template_id, day, role, level)
    """
    logger.warning(
        "No suitable exercise found for slot, omitting it",
        slot_id=resolution.slot_id,
        movement_pattern=resolution.movement_pattern,
        slot_kind=resolution.slot_kind.value,
        **context,
    )
