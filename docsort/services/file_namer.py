"""Suggest clean, human readable filenames for classified documents.

Format: "<Category>[ <Month>] [<Year>][ (<KEYWORD>)] - <Employee Name>.<ext>",
e.g. "Nómina Junio 2025 - Juan José Ramírez Martín.pdf" or
"Otros Marzo 2025 (IRPF) - Juan José Ramírez Martín.pdf".
"""

import re
from datetime import date
from typing import List, Optional, Sequence

from docsort.config import get_settings
from docsort.models.classification import FALLBACK_CATEGORY_ID, DocumentCategory
from docsort.models.employee import Employee
from docsort.services.categories import category_display_name
from docsort.utils.normalizers import normalize_text

_YEAR_PATTERN = re.compile(r"20\d{2}")
_EXTENSION_PATTERN = re.compile(r"\.([A-Za-z0-9]+)$")

SPANISH_MONTHS = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
    "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)

# No "mar": it is also a name ("Mar", short for "María del Mar").
ENGLISH_MONTH_ABBREVIATIONS = {
    "jan": 1, "feb": 2, "apr": 4, "may": 5, "jun": 6, "jul": 7,
    "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Tax paperwork filed under the fallback category gets its keyword in the name.
SPECIAL_KEYWORDS = ("irpf", "hacienda", "impuesto", "declaracion", "renta", "modelo")


def detect_month(tokens: List[str]) -> Optional[int]:
    """Month number (1-12) mentioned in the filename tokens, if any.

    Spanish month names win over English abbreviations, which win over bare
    numbers; within each kind the first occurrence wins.
    """
    for token in tokens:
        if token in SPANISH_MONTHS:
            return SPANISH_MONTHS.index(token) + 1
    for token in tokens:
        if token in ENGLISH_MONTH_ABBREVIATIONS:
            return ENGLISH_MONTH_ABBREVIATIONS[token]
    for token in tokens:
        if token.isdigit() and len(token) <= 2 and 1 <= int(token) <= 12:
            return int(token)
    return None


def detect_year(filename: str) -> Optional[str]:
    match = _YEAR_PATTERN.search(filename or "")
    return match.group() if match else None


def format_employee_name(full_name: str) -> str:
    """Capitalize every word: 'juan JOSÉ garcía' -> 'Juan José García'."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in full_name.split(" "))


def _extension(filename: str) -> str:
    match = _EXTENSION_PATTERN.search(filename or "")
    return match.group(1).lower() if match else get_settings().default_extension


def generate_clean_filename(
    filename: str,
    employee: Employee,
    category_id: str,
    categories: Optional[Sequence[DocumentCategory]] = None,
    today: Optional[date] = None,
) -> str:
    """Build the suggested filename for a document filed to ``employee``.

    Args:
        filename: Original upload filename.
        employee: Employee the document was matched to.
        category_id: Classified category id.
        categories: Category table for display names (defaults to process table).
        today: Reference date for the default year (defaults to today).
    """
    normalized = normalize_text(filename)
    tokens = normalized.split(" ") if normalized else []

    year = detect_year(filename)
    month = detect_month(tokens)

    date_info = ""
    if month is not None:
        year = year or str((today or date.today()).year)
        date_info = f" {SPANISH_MONTHS[month - 1].capitalize()} {year}"
    elif year:
        date_info = f" {year}"

    special = ""
    if category_id == FALLBACK_CATEGORY_ID:
        found = next((k for k in SPECIAL_KEYWORDS if k in normalized), None)
        if found:
            special = f" ({found.upper()})"

    name = category_display_name(category_id, categories)
    employee_name = format_employee_name(employee.full_name)
    return f"{name}{date_info}{special} - {employee_name}.{_extension(filename)}"
