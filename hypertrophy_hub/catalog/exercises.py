"""Exercise Catalog - read-only lookup over exercise definitions.

Iteration order is the order exercises were declared in, which keeps
seeded selection reproducible.
"""

from collections.abc import Iterable
from types import MappingProxyType

from hypertrophy_hub.catalog.models import ExerciseDefinition


class ExerciseCatalog:
    """Immutable mapping of exercise id to ExerciseDefinition."""

    def __init__(self, exercises: Iterable[ExerciseDefinition]):
        by_id: dict[str, ExerciseDefinition] = {}
        by_pattern: dict[str, list[ExerciseDefinition]] = {}
        for exercise in exercises:
            if exercise.id in by_id:
                raise ValueError(f"Duplicate exercise id: {exercise.id}")
            by_id[exercise.id] = exercise
            by_pattern.setdefault(exercise.movement_pattern, []).append(exercise)

        self._by_id = MappingProxyType(by_id)
        self._by_pattern = MappingProxyType({pattern: tuple(items) for pattern, items in by_pattern.items()})

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    def lookup(self, exercise_id: str) -> ExerciseDefinition | None:
        return self._by_id.get(exercise_id)

    def all(self) -> list[ExerciseDefinition]:
        return list(self._by_id.values())

    def by_movement_pattern(self, pattern: str) -> list[ExerciseDefinition]:
        """Exercises whose movement pattern equals `pattern` exactly (case-sensitive)."""
        return list(self._by_pattern.get(pattern, ()))

    def by_muscle(self, muscle: str) -> list[ExerciseDefinition]:
        """Exercises whose primary muscle matches, ignoring case."""
        target = muscle.lower()
        return [e for e in self._by_id.values() if e.primary_muscle.lower() == target]

    def by_equipment(self, tag: str) -> list[ExerciseDefinition]:
        """Exercises that require the given equipment tag."""
        target = tag.lower()
        return [e for e in self._by_id.values() if target in e.equipment]

    def alternatives_for(self, exercise_id: str) -> list[ExerciseDefinition]:
        """Substitutes for an exercise. Alternative ids missing from the catalog are skipped."""
        exercise = self.lookup(exercise_id)
        if exercise is None:
            return []
        return [alt for alt in (self.lookup(alt_id) for alt_id in exercise.alternatives) if alt is not None]

    def all_equipment_tags(self) -> set[str]:
        tags: set[str] = set()
        for exercise in self._by_id.values():
            tags.update(exercise.equipment)
        return tags
