"""Load employee rosters exported by the upload API."""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from docsort.models.employee import Employee
from docsort.utils.structured_log import log_event

logger = logging.getLogger(__name__)

_ROSTER_ADAPTER = TypeAdapter(List[Employee])


class RosterError(ValueError):
    """Raised when a roster file cannot be read or is invalid."""


def load_roster(path: Union[str, Path]) -> List[Employee]:
    """Read a JSON list of employees (``id``, ``fullName``, ``email``, ``role``).

    Raises:
        RosterError: If the file is unreadable, not JSON, or an entry is invalid.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RosterError(f"Cannot read roster file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RosterError(f"Roster file {path} is not valid JSON: {e}") from e

    try:
        employees = _ROSTER_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise RosterError(f"Invalid roster in {path}: {e}") from e

    log_event(logger, logging.INFO, "Loaded roster", source=str(path), employees=len(employees))
    return employees
