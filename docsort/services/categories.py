"""Document category table.

The table is static configuration: an ordered tuple of categories built once
per process and never mutated. Order encodes priority, so a filename carrying
keywords of two categories is filed under the one listed first.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from docsort.config import get_settings
from docsort.models.classification import (
    FALLBACK_CATEGORY_ID,
    CategoryTable,
    DocumentCategory,
)
from docsort.utils.structured_log import log_event

logger = logging.getLogger(__name__)

# Display name used when a category id is not in the table.
UNKNOWN_CATEGORY_NAME = "Documento"

DEFAULT_CATEGORIES: Tuple[DocumentCategory, ...] = CategoryTable(categories=(
    DocumentCategory(
        id="nomina",
        display_name="Nómina",
        keywords=("nomina", "nómina", "payroll", "salary", "salario", "sueldo"),
    ),
    DocumentCategory(
        id="contrato",
        display_name="Contrato",
        keywords=("contrato", "contract", "agreement", "acuerdo", "convenio"),
    ),
    DocumentCategory(
        id="dni",
        display_name="DNI",
        keywords=("dni", "documento identidad", "cedula", "id"),
    ),
    DocumentCategory(
        id="justificante",
        display_name="Justificante",
        keywords=(
            "justificante", "certificado", "comprobante", "vacaciones",
            "vacation", "holiday", "permiso", "baja", "medico",
        ),
    ),
    DocumentCategory(
        id=FALLBACK_CATEGORY_ID,
        display_name="Otros",
        keywords=(
            "irpf", "hacienda", "impuesto", "declaracion", "renta",
            "tributacion", "fiscal", "formulario", "modelo", "aeat",
        ),
    ),
)).categories


class CategoryConfigError(ValueError):
    """Raised when a category table file cannot be read or is invalid."""


def _coerce_entry(entry: Any) -> Any:
    # Accept the upload API's {"id", "name", "keywords"} shape as well.
    if isinstance(entry, dict) and "display_name" not in entry and "name" in entry:
        entry = {**entry, "display_name": entry["name"]}
        entry.pop("name")
    return entry


def load_categories(path: Union[str, Path]) -> Tuple[DocumentCategory, ...]:
    """Load and validate a category table from a JSON file.

    The file holds either a list of categories or ``{"categories": [...]}``.

    Raises:
        CategoryConfigError: If the file is unreadable, not JSON, or the
            table violates its invariants (unique ids, fallback present,
            at least one keyword per category).
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CategoryConfigError(f"Cannot read category file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CategoryConfigError(f"Category file {path} is not valid JSON: {e}") from e

    entries = raw.get("categories") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise CategoryConfigError(
            f"Category file {path} must contain a list of categories"
        )

    try:
        table = CategoryTable(categories=[_coerce_entry(e) for e in entries])
    except ValidationError as e:
        raise CategoryConfigError(f"Invalid category table in {path}: {e}") from e

    log_event(
        logger, logging.INFO, "Loaded category table",
        source=str(path), category_ids=[c.id for c in table.categories],
    )
    return table.categories


@lru_cache
def get_categories() -> Tuple[DocumentCategory, ...]:
    """Return the process-wide category table.

    Loaded once: from CATEGORIES_FILE when configured, else the built-in table.
    """
    settings = get_settings()
    if settings.categories_file is not None:
        return load_categories(settings.categories_file)
    return DEFAULT_CATEGORIES


def category_display_name(
    category_id: str,
    categories: Optional[Sequence[DocumentCategory]] = None,
) -> str:
    """Display name for ``category_id``, 'Documento' when unknown."""
    for category in categories if categories is not None else get_categories():
        if category.id == category_id:
            return category.display_name
    return UNKNOWN_CATEGORY_NAME
