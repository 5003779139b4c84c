"""
Service assembling the ``/indexdata`` dump.

The grid page loads every table in one round trip at start-up.  Each
table is listed through its own resource controller so that the rows
are freshly loaded and serialised exactly like the resource routes
serialise them.
"""

import logging
from typing import List

from bank_api.app.schemas.lookup import IndexTable
from bank_api.app.services.entity_kinds import ENTITY_KINDS
from bank_api.app.services.record_store import open_record_store
from bank_api.app.services.resource_controller import ResourceController


logger = logging.getLogger(__name__)


class IndexService:
    """Builds the combined table listing used by the grid page."""

    @classmethod
    def load_tables(cls) -> List[IndexTable]:
        tables: List[IndexTable] = []
        for kind in ENTITY_KINDS:
            with open_record_store(kind) as store:
                records = ResourceController(store).list()
            tables.append(
                IndexTable(
                    name=kind.plural,
                    table=[record.model_dump(mode="json", by_alias=True) for record in records],
                )
            )
        logger.debug("Index data: %s", ", ".join(f"{t.name}={len(t.table)}" for t in tables))
        return tables
