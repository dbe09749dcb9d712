"""Pydantic model for roster entries passed to the classifier."""

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """A candidate owner for an uploaded document.

    Only ``full_name`` takes part in matching; the other fields travel with
    the result so callers can identify who was matched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(description="Employee identifier")
    full_name: str = Field(alias="fullName", description="Full name as stored in the roster")
    email: str = Field(default="", description="Contact email")
    role: str = Field(default="", description="Role within the company (employee, manager, admin)")
