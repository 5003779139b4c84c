"""
Pydantic model for accounts.

An account optionally references the branch where it is held, the
customer who owns it and the employee who opened it.  The references
are checked by the database's foreign keys, not here.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from .common import MAX_ID, RecordModel, require_text, unset_if_zero


class Account(RecordModel):
    """A customer account."""

    account_id: Optional[int] = Field(None, alias="AccountID", ge=0, le=MAX_ID, examples=[7])
    account_ticket: Optional[UUID] = Field(None, alias="AccountTicket")
    account_status: str = Field("Open", alias="AccountStatus", examples=["Open"])
    balance_available: float = Field(0, alias="BalanceAvailable", examples=[100.0])
    balance_pending: float = Field(0, alias="BalancePending", examples=[0.0])
    branch_id: Optional[int] = Field(None, alias="BranchID", ge=0, le=MAX_ID)
    customer_id: Optional[int] = Field(None, alias="CustomerID", ge=0, le=MAX_ID)
    employee_id: Optional[int] = Field(None, alias="EmployeeID", ge=0, le=MAX_ID)
    date_opened: Optional[date] = Field(None, alias="DateOpened", examples=["2024-01-15"])
    date_closed: Optional[date] = Field(None, alias="DateClosed")
    date_last_activity: Optional[date] = Field(None, alias="DateLastActivity")

    # A reference of 0 means "none selected" in the grid's select boxes.
    @field_validator("account_id", "branch_id", "customer_id", "employee_id")
    @classmethod
    def validate_ids(cls, v: Optional[int]) -> Optional[int]:
        return unset_if_zero(v)

    @field_validator("account_status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        return require_text(v, "AccountStatus")

    @model_validator(mode="after")
    def check_dates(self) -> "Account":
        if self.date_opened and self.date_closed and self.date_closed < self.date_opened:
            raise ValueError("DateClosed must not precede DateOpened")
        return self
