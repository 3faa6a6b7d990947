"""Canonical enums for catalog and generation dimensions.

All enums are string-based so they serialize to the same labels used in the
YAML catalog files and in persisted plans.
"""

from enum import StrEnum


class ExerciseKind(StrEnum):
    """Whether an exercise trains several joints or isolates one."""

    COMPOUND = "compound"
    ISOLATION = "isolation"


class LoggingType(StrEnum):
    """What the session UI asks the user to log for an exercise."""

    WEIGHT_REPS = "weight_reps"
    REPS_ONLY = "reps_only"
    REPS_ONLY_WITH_OPTIONAL_WEIGHT = "reps_only_with_optional_weight"
    TIMED = "timed"


class VolumeLevel(StrEnum):
    """User-chosen session length tier."""

    SHORT = "short"
    STANDARD = "standard"
    LONG = "long"
