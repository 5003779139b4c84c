"""
Pydantic model for bank branches.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from .common import MAX_ID, RecordModel, require_text, unset_if_zero


class Branch(RecordModel):
    """A branch office of the bank."""

    branch_id: Optional[int] = Field(None, alias="BranchID", ge=0, le=MAX_ID, examples=[3])
    branch_ticket: Optional[UUID] = Field(None, alias="BranchTicket")
    name: str = Field(..., alias="Name", examples=["Downtown"])
    address: Optional[str] = Field(None, alias="Address", examples=["100 Main St"])
    city: Optional[str] = Field(None, alias="City", examples=["Springfield"])
    state: Optional[str] = Field(None, alias="State", examples=["IL"])
    zip_code: Optional[str] = Field(None, alias="ZipCode", examples=["62701"])

    @field_validator("branch_id")
    @classmethod
    def validate_id(cls, v: Optional[int]) -> Optional[int]:
        return unset_if_zero(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Name")
