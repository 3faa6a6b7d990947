"""Volume -> accessory count mapping and display info."""

from dataclasses import dataclass

from loguru import logger

from hypertrophy_hub.catalog.enums import VolumeLevel

ACCESSORY_COUNT_BY_VOLUME: dict[VolumeLevel, int] = {
    VolumeLevel.SHORT: 1,
    VolumeLevel.STANDARD: 2,
    VolumeLevel.LONG: 4,
}


@dataclass(frozen=True)
class VolumeDisplayInfo:
    name: str
    description: str
    duration: str


_VOLUME_DISPLAY_INFO: dict[VolumeLevel, VolumeDisplayInfo] = {
    VolumeLevel.SHORT: VolumeDisplayInfo(
        name="Short",
        description="Quick and efficient workouts for busy schedules",
        duration="~30-40 minutes",
    ),
    VolumeLevel.STANDARD: VolumeDisplayInfo(
        name="Standard",
        description="Balanced workouts with optimal muscle development",
        duration="~45-55 minutes",
    ),
    VolumeLevel.LONG: VolumeDisplayInfo(
        name="Long",
        description="Comprehensive sessions for maximum muscle growth",
        duration="~60+ minutes",
    ),
}


def normalize_volume(volume: VolumeLevel | str | None) -> VolumeLevel:
    """Coerce a caller-supplied volume, defaulting to standard.

    Args:
        volume: Volume enum, its string value, or None

    Returns:
        Matching VolumeLevel; STANDARD for None or unrecognized values
    """
    if volume is None:
        return VolumeLevel.STANDARD
    try:
        return VolumeLevel(str(volume).lower())
    except ValueError:
        logger.warning(f"Unrecognized volume '{volume}', using standard")
        return VolumeLevel.STANDARD


def accessory_count_for_volume(volume: VolumeLevel | str | None) -> int:
    """Number of accessories per workout for a session volume."""
    return ACCESSORY_COUNT_BY_VOLUME[normalize_volume(volume)]


def get_volume_display_info(volume: VolumeLevel | str | None) -> VolumeDisplayInfo:
    """Display name, description and duration for a volume level."""
    return _VOLUME_DISPLAY_INFO[normalize_volume(volume)]
