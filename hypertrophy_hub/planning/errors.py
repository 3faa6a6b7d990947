"""Canonical Plan Generation Error Types.

Standard error codes:
- TEMPLATE_NOT_FOUND: Template id does not resolve in the template catalog
- INVALID_CATALOG: Catalog data violates a catalog invariant
- CATALOG_LOAD_FAILED: Catalog data file missing or unparseable
- INVALID_LEVEL_SEQUENCE: Level appended out of order

An unresolvable slot is NOT an error. It is reported as a SlotResolution
without an exercise and the slot is omitted from the generated day.
"""


class ConfigurationError(RuntimeError):
    """Raised when static configuration (catalogs, templates) is unusable.

    Attributes:
        code: Error code (e.g., "TEMPLATE_NOT_FOUND", "INVALID_CATALOG")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class TemplateNotFoundError(ConfigurationError):
    """Raised when a template id is unknown."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__("TEMPLATE_NOT_FOUND", [f"Template not found: {template_id}"])


class CatalogValidationError(ConfigurationError):
    """Raised when catalog validation finds one or more problems."""

    def __init__(self, details: list[str]):
        super().__init__("INVALID_CATALOG", details)


class CatalogLoadError(ConfigurationError):
    """Raised when a catalog data file cannot be read or parsed."""

    def __init__(self, details: list[str]):
        super().__init__("CATALOG_LOAD_FAILED", details)


class LevelSequenceError(ValueError):
    """Raised when a level is appended with a number other than len(levels) + 1.

    Attributes:
        expected: Level number the plan expects next
        actual: Level number that was supplied
    """

    def __init__(self, expected: int, actual: int):
        self.code = "INVALID_LEVEL_SEQUENCE"
        self.expected = expected
        self.actual = actual
        super().__init__(f"{self.code}: expected level {expected}, got {actual}")
