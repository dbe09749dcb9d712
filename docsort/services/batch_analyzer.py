"""Analyze a batch of filenames before upload.

Each file is classified on its own; the batch as a whole is then routed:
if any file could not be tied to an employee, the batch is treated as a
circular (sent to every employee) so nothing is misfiled.
"""

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from docsort.models.batch import BatchAnalysis, BatchItem
from docsort.models.classification import DocumentCategory
from docsort.models.employee import Employee
from docsort.services.categories import get_categories
from docsort.services.document_classifier import classify_document
from docsort.services.file_namer import generate_clean_filename
from docsort.utils.structured_log import log_event

logger = logging.getLogger(__name__)


def analyze_batch(
    filenames: Iterable[str],
    employees: Sequence[Employee] = (),
    categories: Optional[Sequence[DocumentCategory]] = None,
    today: Optional[date] = None,
) -> BatchAnalysis:
    """Classify every filename and decide how the batch should be uploaded.

    Args:
        filenames: Upload filenames, in the order they were selected.
        employees: Roster to match against.
        categories: Category table (defaults to the process-wide table).
        today: Reference date for suggested filenames.

    Returns:
        BatchAnalysis with per-file results, upload mode and preselected recipients.
    """
    if categories is None:
        categories = get_categories()

    items = []
    for filename in filenames:
        result = classify_document(filename, employees, categories)
        suggested = None
        if result.employee is not None:
            suggested = generate_clean_filename(
                filename, result.employee, result.document_category,
                categories=categories, today=today,
            )
        items.append(BatchItem(filename=filename, result=result, suggested_name=suggested))

    if any(item.result.employee is None for item in items):
        analysis = BatchAnalysis(
            items=items,
            upload_mode="circular",
            recipient_ids=[e.id for e in employees],
        )
    else:
        analysis = BatchAnalysis(items=items, upload_mode="individual")

    log_event(
        logger, logging.INFO, "Analyzed upload batch",
        files=len(items),
        matched=analysis.matched_count,
        upload_mode=analysis.upload_mode,
    )
    return analysis
