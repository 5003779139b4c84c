"""
Schemas for lookup projections and the index data dump.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class IDTextItem(BaseModel):
    """Identifier and display text of one record, for select widgets."""

    id: int = Field(..., alias="ID", examples=[7])
    text: str = Field(..., alias="Text", examples=["Downtown"])

    model_config = {"populate_by_name": True}


class IndexTable(BaseModel):
    """One named table of the ``/indexdata`` response."""

    name: str = Field(..., alias="Name", examples=["Branches"])
    table: List[Dict[str, Any]] = Field(default_factory=list, alias="Table")

    model_config = {"populate_by_name": True}
