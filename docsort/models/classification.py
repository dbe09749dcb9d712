"""Pydantic models for document categories and classification results.

Used by the document classifier to report which employee an uploaded file
belongs to, what kind of document it is and how much the result can be
trusted before it is filed without human review.
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from docsort.models.employee import Employee
from docsort.utils.normalizers import normalize_text

Confidence = Literal["low", "medium", "high"]

FALLBACK_CATEGORY_ID = "otros"


class DocumentCategory(BaseModel):
    """A document category and the keywords that identify it in a filename."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Stable category identifier")
    display_name: str = Field(description="Human readable name (Spanish)")
    keywords: Tuple[str, ...] = Field(
        min_length=1,
        description="Substrings searched for in the normalized filename, in order"
    )

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Normalize keywords like filenames; reject ones that normalize to nothing.

        A blank keyword would match every filename. Duplicates left after
        normalization ("nómina", "nomina") are dropped, first one kept.
        """
        normalized = [normalize_text(k) for k in v]
        if any(not k for k in normalized):
            raise ValueError("Category keywords must contain letters or digits")
        return tuple(dict.fromkeys(normalized))


class CategoryTable(BaseModel):
    """Ordered, immutable category configuration.

    Order is significant: the first category with a matching keyword wins.
    """

    model_config = ConfigDict(frozen=True)

    categories: Tuple[DocumentCategory, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_ids(self) -> "CategoryTable":
        ids = [c.id for c in self.categories]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate category ids: {', '.join(duplicates)}")
        if FALLBACK_CATEGORY_ID not in ids:
            raise ValueError(f"Category table must define the fallback category '{FALLBACK_CATEGORY_ID}'")
        return self


class EmployeeMatch(BaseModel):
    """Best employee found in a filename and how strongly it matched."""

    model_config = ConfigDict(frozen=True)

    employee: Employee
    matched_tokens: Tuple[str, ...] = Field(description="Qualifying name tokens found in the filename")
    score: float = Field(ge=0.0, le=1.0, description="Matched tokens / qualifying tokens")


class ClassificationResult(BaseModel):
    """Result of auto-classifying an uploaded file by its name."""

    model_config = ConfigDict(frozen=True)

    employee: Optional[Employee] = Field(
        default=None,
        description="Matched employee, None when no one reached the match threshold"
    )
    document_category: str = Field(description="Category id (fallback when no keyword matched)")
    document_category_name: str = Field(description="Display name of the category")
    confidence: Confidence = Field(
        description="high: employee and category; medium: employee only; low: no employee"
    )
    match_score: float = Field(
        default=0.0, ge=0.0, le=1.0,
        description="Name match ratio of the chosen employee (0.0 without a match)"
    )
    matched_tokens: Tuple[str, ...] = Field(default=())
