"""Pydantic models for multi-file upload analysis.

This module defines the data structures returned when a batch of filenames is
analyzed before upload, including the per-file classification, the suggested
clean filename and the upload routing decision.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from docsort.models.classification import ClassificationResult

UploadMode = Literal["individual", "circular"]


class BatchItem(BaseModel):
    """Analysis of one file in an upload batch."""
    filename: str = Field(description="Original filename as uploaded")
    result: ClassificationResult = Field(description="Classification of the filename")
    suggested_name: Optional[str] = Field(
        default=None,
        description="Clean filename, only when an employee was matched"
    )


class BatchAnalysis(BaseModel):
    """Analysis of a whole upload batch."""
    items: List[BatchItem] = Field(default_factory=list, description="Per-file analysis, in input order")
    upload_mode: UploadMode = Field(
        description="individual: each file goes to its matched employee; circular: sent to everyone"
    )
    recipient_ids: List[int] = Field(
        default_factory=list,
        description="Employee ids preselected as recipients (all of them in circular mode)"
    )

    @property
    def matched_count(self) -> int:
        return sum(1 for item in self.items if item.result.employee is not None)
