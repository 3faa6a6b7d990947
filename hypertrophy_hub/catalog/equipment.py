"""Equipment picker options and display names."""

from hypertrophy_hub.catalog.exercises import ExerciseCatalog

# Every tag the equipment picker can offer. An exercise needing a tag outside
# this set can never be generated.
EQUIPMENT_DISPLAY_NAMES: dict[str, str] = {
    "bodyweight": "Bodyweight",
    "dumbbell": "Dumbbells",
    "barbell": "Barbell",
    "bench": "Bench",
    "incline_bench": "Incline Bench",
    "decline_bench": "Decline Bench",
    "pull_up_bar": "Pull-up Bar",
    "chair": "Chair",
    "dip_station": "Dip Station",
    "cable_machine": "Cable Machine",
    "leg_curl_machine": "Leg Curl Machine",
    "calf_raise_machine": "Calf Raise Machine",
    "squat_rack": "Squat Rack",
    "weight": "Additional Weight",
    "preacher_bench": "Preacher Bench",
    "resistance_band": "Resistance Band",
    "kettlebell": "Kettlebell",
}

PICKER_EQUIPMENT: frozenset[str] = frozenset(EQUIPMENT_DISPLAY_NAMES)


def get_equipment_display_name(tag: str) -> str:
    """User-facing name for an equipment tag.

    Unknown tags are title-cased with underscores replaced by spaces.
    """
    if tag in EQUIPMENT_DISPLAY_NAMES:
        return EQUIPMENT_DISPLAY_NAMES[tag]
    return tag.replace("_", " ").title()


def get_all_available_equipment(catalog: ExerciseCatalog) -> list[str]:
    """Sorted list of every equipment tag used by the catalog."""
    return sorted(catalog.all_equipment_tags())
