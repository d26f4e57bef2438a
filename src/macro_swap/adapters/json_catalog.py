"""Load the food catalog from a local JSON file."""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from macro_swap.adapters.catalog_models import CatalogRecord
from macro_swap.domain.errors import CatalogLoadError
from macro_swap.domain.foods import Food

_RECORDS = TypeAdapter(list[CatalogRecord])

_logger = logging.getLogger(__name__)


def parse_catalog(raw: str | bytes) -> list[Food]:
    """Validate a JSON array of catalog records and convert them to foods."""
    try:
        records = _RECORDS.validate_json(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog: {exc}") from exc
    return [record.to_food() for record in records]


def load_catalog(path: Path) -> list[Food]:
    """Read and validate the catalog file at ``path``."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(f"Cannot read catalog {path}: {exc}") from exc
    foods = parse_catalog(raw)
    _logger.info("Catalog loaded: path=%s foods=%s", path, len(foods))
    return foods
