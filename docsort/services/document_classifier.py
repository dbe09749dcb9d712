"""Filename-based document classifier and employee matcher.

Determines which employee an uploaded file belongs to and what kind of
document it is, using only the filename:

1. Normalization (case, accents, punctuation folded away)
2. Category keywords (first category in table order with a keyword hit)
3. Employee names (at least two qualifying name tokens must appear)
4. Confidence tier from the combination of 2 and 3

The classifier is pure and total: it never raises and keeps no state
between calls, so it is safe to call from concurrent request handlers.
"""

import logging
from typing import Iterable, Optional, Sequence

from docsort.models.classification import (
    FALLBACK_CATEGORY_ID,
    ClassificationResult,
    Confidence,
    DocumentCategory,
    EmployeeMatch,
)
from docsort.models.employee import Employee
from docsort.services.categories import category_display_name, get_categories
from docsort.utils.normalizers import name_tokens, normalize_text
from docsort.utils.structured_log import log_event

logger = logging.getLogger(__name__)

# A single shared first or last name must never file a document.
MIN_MATCHED_TOKENS = 2


# ---------------------------------------------------------------------------
# Category keywords
# ---------------------------------------------------------------------------

def classify_category(
    normalized_text: str,
    categories: Sequence[DocumentCategory],
) -> str:
    """Return the id of the first category with any keyword in the text.

    Matching is by substring, so a keyword inside a longer word counts.
    Falls back to ``otros`` when nothing matches.
    """
    for category in categories:
        if any(keyword in normalized_text for keyword in category.keywords):
            return category.id
    return FALLBACK_CATEGORY_ID


# ---------------------------------------------------------------------------
# Employee names
# ---------------------------------------------------------------------------

def match_employee(
    normalized_text: str,
    employees: Sequence[Employee],
) -> Optional[EmployeeMatch]:
    """Find the employee whose name best matches the text.

    Strength is matched / qualifying name tokens; ties keep the employee
    that comes first in ``employees``.
    """
    best: Optional[EmployeeMatch] = None

    for employee in employees:
        tokens = name_tokens(employee.full_name)
        matched = tuple(t for t in tokens if t in normalized_text)

        if len(matched) < MIN_MATCHED_TOKENS:
            continue

        score = len(matched) / len(tokens)
        if best is None or score > best.score:
            best = EmployeeMatch(employee=employee, matched_tokens=matched, score=score)

    return best


# ---------------------------------------------------------------------------
# Result assembly
# ---------------------------------------------------------------------------

def assess_confidence(employee_found: bool, category_id: str) -> Confidence:
    """high: employee and real category; medium: employee only; low: no employee."""
    if not employee_found:
        return "low"
    if category_id == FALLBACK_CATEGORY_ID:
        return "medium"
    return "high"


def classify_document(
    filename: str,
    employees: Iterable[Employee] = (),
    categories: Optional[Sequence[DocumentCategory]] = None,
) -> ClassificationResult:
    """Classify an uploaded file by its name.

    Args:
        filename: Original filename, extension included.
        employees: Roster to match the filename against.
        categories: Ordered category table (defaults to the process-wide table).

    Returns:
        ClassificationResult with employee, category and confidence tier.
    """
    if categories is None:
        categories = get_categories()
    employees = list(employees)

    normalized = normalize_text(filename)
    category_id = classify_category(normalized, categories)
    match = match_employee(normalized, employees)

    result = ClassificationResult(
        employee=match.employee if match else None,
        document_category=category_id,
        document_category_name=category_display_name(category_id, categories),
        confidence=assess_confidence(match is not None, category_id),
        match_score=match.score if match else 0.0,
        matched_tokens=match.matched_tokens if match else (),
    )

    log_event(
        logger, logging.DEBUG, "Classified document",
        category=result.document_category,
        confidence=result.confidence,
        employee_id=result.employee.id if result.employee else None,
        candidates=len(employees),
    )
    return result


classify = classify_document
