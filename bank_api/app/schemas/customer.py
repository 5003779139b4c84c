"""
Pydantic model for customers.

Customers own accounts.  ``TIN`` is the taxpayer identification
number and is stored as text since it may carry leading zeros and
dashes.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from .common import MAX_ID, RecordModel, require_text, unset_if_zero


class Customer(RecordModel):
    """A customer of the bank."""

    customer_id: Optional[int] = Field(None, alias="CustomerID", ge=0, le=MAX_ID, examples=[12])
    customer_ticket: Optional[UUID] = Field(None, alias="CustomerTicket")
    name: str = Field(..., alias="Name", examples=["Jane Doe"])
    address: Optional[str] = Field(None, alias="Address", examples=["42 Elm St"])
    city: Optional[str] = Field(None, alias="City", examples=["Springfield"])
    state: Optional[str] = Field(None, alias="State", examples=["IL"])
    zip_code: Optional[str] = Field(None, alias="ZipCode", examples=["62704"])
    tin: Optional[str] = Field(None, alias="TIN", examples=["123-45-6789"])

    @field_validator("customer_id")
    @classmethod
    def validate_id(cls, v: Optional[int]) -> Optional[int]:
        return unset_if_zero(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Name")
