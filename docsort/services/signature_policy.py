"""Decide which documents need the employee's signature."""

from typing import Optional, Sequence

from docsort.models.classification import DocumentCategory
from docsort.models.employee import Employee
from docsort.services.document_classifier import classify_document

# Payslips must always be acknowledged by the employee.
SIGNATURE_CATEGORIES = frozenset({"nomina"})


def requires_signature(category_id: str, explicitly_required: bool = False) -> bool:
    return explicitly_required or category_id in SIGNATURE_CATEGORIES


def is_pending_signature(
    filename: str,
    employees: Sequence[Employee] = (),
    explicitly_required: bool = False,
    is_accepted: bool = False,
    categories: Optional[Sequence[DocumentCategory]] = None,
) -> bool:
    """True when the document needs a signature that has not been given yet."""
    if is_accepted:
        return False
    result = classify_document(filename, employees, categories)
    return requires_signature(result.document_category, explicitly_required)
