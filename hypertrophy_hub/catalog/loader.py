"""Catalog loader.

Loads the exercise and template catalogs from YAML data files and keeps one
read-only instance of each per process. Data is read from CATALOG_DIR when
configured, otherwise from the files bundled with the package.
"""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from hypertrophy_hub.catalog.exercises import ExerciseCatalog
from hypertrophy_hub.catalog.models import ExerciseDefinition, WorkoutTemplate
from hypertrophy_hub.catalog.templates import TemplateCatalog
from hypertrophy_hub.config.settings import settings
from hypertrophy_hub.planning.errors import CatalogLoadError

BUNDLED_DATA_DIR = Path(__file__).parent / "data"
EXERCISES_FILE = "exercises.yaml"
TEMPLATES_FILE = "templates.yaml"

_exercise_catalog: ExerciseCatalog | None = None
_template_catalog: TemplateCatalog | None = None


def get_catalog_dir() -> Path:
    """Get path to the directory holding catalog YAML files.

    Returns:
        CATALOG_DIR if configured, otherwise the bundled data directory
    """
    return settings.catalog_dir or BUNDLED_DATA_DIR


def _read_entries(path: Path, key: str) -> list[dict]:
    """Read the list stored under `key` in a YAML catalog file.

    Raises:
        CatalogLoadError: If the file is missing, unparseable or malformed
    """
    if not path.exists():
        raise CatalogLoadError([f"Catalog file not found: {path}"])

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError([f"Invalid YAML in {path}: {e}"]) from e

    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise CatalogLoadError([f"{path} must contain a top-level '{key}' list"])
    return data[key]


def load_exercise_catalog(path: Path | None = None) -> ExerciseCatalog:
    """Load and validate the exercise catalog from YAML.

    Args:
        path: Optional explicit file path (defaults to <catalog dir>/exercises.yaml)

    Returns:
        ExerciseCatalog with every entry validated

    Raises:
        CatalogLoadError: If the file cannot be read or an entry is invalid
    """
    path = path or get_catalog_dir() / EXERCISES_FILE
    entries = _read_entries(path, "exercises")

    try:
        exercises = [ExerciseDefinition.model_validate(entry) for entry in entries]
        catalog = ExerciseCatalog(exercises)
    except (ValidationError, ValueError) as e:
        raise CatalogLoadError([f"Invalid exercise entry in {path}: {e}"]) from e

    logger.info("Exercise catalog loaded", path=str(path), exercise_count=len(catalog))
    return catalog


def load_template_catalog(path: Path | None = None) -> TemplateCatalog:
    """Load and validate the template catalog from YAML.

    Args:
        path: Optional explicit file path (defaults to <catalog dir>/templates.yaml)

    Returns:
        TemplateCatalog with every template validated

    Raises:
        CatalogLoadError: If the file cannot be read or a template is invalid
    """
    path = path or get_catalog_dir() / TEMPLATES_FILE
    entries = _read_entries(path, "templates")

    try:
        templates = [WorkoutTemplate.model_validate(entry) for entry in entries]
        catalog = TemplateCatalog(templates)
    except (ValidationError, ValueError) as e:
        raise CatalogLoadError([f"Invalid template entry in {path}: {e}"]) from e

    logger.info("Template catalog loaded", path=str(path), template_count=len(catalog))
    return catalog


def get_exercise_catalog() -> ExerciseCatalog:
    """Process-wide exercise catalog, loaded on first use."""
    global _exercise_catalog
    if _exercise_catalog is None:
        _exercise_catalog = load_exercise_catalog()
    return _exercise_catalog


def get_template_catalog() -> TemplateCatalog:
    """Process-wide template catalog, loaded on first use."""
    global _template_catalog
    if _template_catalog is None:
        _template_catalog = load_template_catalog()
    return _template_catalog


def clear_catalog_cache() -> None:
    """Drop the cached catalogs so the next access reloads them."""
    global _exercise_catalog, _template_catalog
    _exercise_catalog = None
    _template_catalog = None
    logger.debug("Catalog cache cleared")
