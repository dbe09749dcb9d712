"""Normalize filenames and employee names into a comparable token space."""

import re
import unicodedata
from typing import List, Optional

# Name tokens this short (initials, "de", "la") are too noisy to match on.
MIN_NAME_TOKEN_LENGTH = 3

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_text(text: Optional[str]) -> str:
    """Case-fold, strip accents, turn punctuation into single spaces.

    'Nómina_JOSÉ-Ramírez.pdf' -> 'nomina jose ramirez pdf'. Idempotent and total.
    """
    if not text:
        return ""
    lowered = text.casefold()
    decomposed = unicodedata.normalize("NFD", lowered)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_ALNUM.sub(" ", stripped).strip()


def name_tokens(full_name: Optional[str]) -> List[str]:
    """Split a full name into its qualifying tokens (longer than 2 chars)."""
    return [t for t in normalize_text(full_name).split(" ") if len(t) >= MIN_NAME_TOKEN_LENGTH]
