"""Template Catalog - read-only lookup over workout templates."""

from collections.abc import Iterable
from types import MappingProxyType

from hypertrophy_hub.catalog.models import WorkoutTemplate
from hypertrophy_hub.planning.errors import TemplateNotFoundError


class TemplateCatalog:
    """Immutable mapping of template id to WorkoutTemplate."""

    def __init__(self, templates: Iterable[WorkoutTemplate]):
        by_id: dict[str, WorkoutTemplate] = {}
        for template in templates:
            if template.id in by_id:
                raise ValueError(f"Duplicate template id: {template.id}")
            by_id[template.id] = template
        self._by_id = MappingProxyType(by_id)

    def __len__(self) -> int:
        return len(self._by_id)

    def lookup(self, template_id: str) -> WorkoutTemplate | None:
        return self._by_id.get(template_id)

    def require(self, template_id: str) -> WorkoutTemplate:
        """Look up a template, raising when it does not exist.

        Raises:
            TemplateNotFoundError: If no template has this id
        """
        template = self.lookup(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def all(self) -> list[WorkoutTemplate]:
        return list(self._by_id.values())
