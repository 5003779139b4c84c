"""
Index data endpoint.

``GET /indexdata`` returns every table of the back office in one
response, in the ``[{"Name": ..., "Table": [...]}]`` shape the grid
page consumes on start-up.
"""

from typing import List

from fastapi import APIRouter

from bank_api.app.schemas.lookup import IndexTable
from bank_api.app.services.index_service import IndexService

router = APIRouter()


@router.get("/indexdata", response_model=List[IndexTable])
async def get_index_data() -> List[IndexTable]:
    """Return all accounts, branches, customers and employees."""
    return IndexService.load_tables()
