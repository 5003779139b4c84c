"""
Shared pieces of the entity schemas.

``RecordModel`` carries the model configuration every entity kind
uses: attributes are populated either by their snake_case name or by
their PascalCase wire alias, and responses are serialised by alias.
"""

from typing import Optional

from pydantic import BaseModel


# Largest value SQLite can store in an INTEGER column.
MAX_ID = 2**63 - 1


class RecordModel(BaseModel):
    """Base class for the master data models."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


def unset_if_zero(value: Optional[int]) -> Optional[int]:
    """Treat an identifier of ``0`` as "not assigned yet".

    Grid clients post new rows with ``ID: 0``.
    """
    return value or None


def require_text(value: Optional[str], label: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{label} must not be blank")
    return value
