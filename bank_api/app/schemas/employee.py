"""
Pydantic model for employees.

``DisplayName`` is computed from the last and first name in the
``"Last, First"`` form the account grid uses for its employee column.
It is returned in responses and ignored when posted.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import Field, computed_field, field_validator, model_validator

from .common import MAX_ID, RecordModel, unset_if_zero


class Employee(RecordModel):
    """An employee of the bank."""

    employee_id: Optional[int] = Field(None, alias="EmployeeID", ge=0, le=MAX_ID, examples=[4])
    employee_ticket: Optional[UUID] = Field(None, alias="EmployeeTicket")
    first_name: Optional[str] = Field(None, alias="FirstName", examples=["John"])
    last_name: Optional[str] = Field(None, alias="LastName", examples=["Smith"])
    title: Optional[str] = Field(None, alias="Title", examples=["Teller"])
    tin: Optional[str] = Field(None, alias="TIN")
    date_started: Optional[date] = Field(None, alias="DateStarted", examples=["2020-03-01"])
    date_ended: Optional[date] = Field(None, alias="DateEnded")

    @field_validator("employee_id")
    @classmethod
    def validate_id(cls, v: Optional[int]) -> Optional[int]:
        return unset_if_zero(v)

    @model_validator(mode="after")
    def check_employee(self) -> "Employee":
        if not (self.first_name or "").strip() and not (self.last_name or "").strip():
            raise ValueError("FirstName or LastName is required")
        if self.date_started and self.date_ended and self.date_ended < self.date_started:
            raise ValueError("DateEnded must not precede DateStarted")
        return self

    @computed_field(alias="DisplayName")
    @property
    def display_name(self) -> str:
        return ", ".join(part for part in (self.last_name, self.first_name) if part)
