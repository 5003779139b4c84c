"""
Generic resource controller.

One ``ResourceController`` serves one request for one entity kind.  It
implements the CRUD and lookup contract shared by all master data
kinds on top of a :class:`RecordStore`:

* ``list`` always reloads the working set before returning it.
* ``lookup_all`` only reloads when the working set is empty.  The two
  refresh policies differ on purpose; existing clients rely on
  ``list`` being fresh, while lookup lists are allowed to reuse what
  the controller loaded when it was created.
* ``create`` goes through the store's upsert, ``update`` through its
  overwrite-only ``update``; both commit before returning.  ``update``
  rejects a payload whose identifier differs from the path identifier,
  or whose record does not exist, with ``InvalidInput`` rather than
  ``NotFound``.  It never inserts, even when the record disappears
  after the controller loaded it.
* ``delete`` commits before returning the removed record.
"""

import logging
from typing import List

from bank_api.app.schemas.common import RecordModel
from bank_api.app.schemas.lookup import IDTextItem
from bank_api.app.services.errors import InvalidInput, NotFound
from bank_api.app.services.record_store import RecordStore


logger = logging.getLogger(__name__)


class ResourceController:
    """CRUD and lookup operations for the entity kind of ``store``."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self.kind = store.kind
        self.store.load()

    def list(self) -> List[RecordModel]:
        """Return every record of this kind, freshly loaded."""
        return self.store.load()

    def get(self, record_id: int) -> RecordModel:
        """Return the record with ``record_id`` or raise ``NotFound``."""
        item = self.store.find(record_id)
        if item is None:
            raise NotFound(f"{self.kind.name} {record_id} not found")
        return item

    def create(self, entity: RecordModel) -> RecordModel:
        """Store ``entity`` and return it with its assigned identifier.

        A payload carrying the identifier of an existing record
        overwrites that record.
        """
        overwrite = self.store.exists(self.kind.get_id(entity))
        stored = self.store.add_or_update(entity)
        self.store.save_changes()
        action = "Overwrote" if overwrite else "Created"
        logger.info("%s %s %s", action, self.kind.name.lower(), self.kind.get_id(stored))
        return stored

    def update(self, record_id: int, entity: RecordModel) -> RecordModel:
        """Overwrite the existing record ``record_id`` with ``entity``."""
        if self.kind.get_id(entity) != record_id:
            raise InvalidInput(
                f"{self.kind.name} identifier in the body does not match {record_id}"
            )
        try:
            stored = self.store.update(entity)
        except NotFound as e:
            raise InvalidInput(f"{self.kind.name} {record_id} does not exist") from e
        self.store.save_changes()
        logger.info("Updated %s %s", self.kind.name.lower(), record_id)
        return stored

    def delete(self, record_id: int) -> RecordModel:
        """Delete the record ``record_id`` and return it."""
        item = self.get(record_id)
        self.store.remove(item)
        self.store.save_changes()
        logger.info("Deleted %s %s", self.kind.name.lower(), record_id)
        return item

    def lookup_one(self, record_id: int) -> IDTextItem:
        """Return the lookup pair of the record ``record_id``."""
        return self._project(self.get(record_id))

    def lookup_all(self) -> List[IDTextItem]:
        """Return the lookup pairs of every record of this kind."""
        if len(self.store) == 0:
            self.store.load()
        return [self._project(item) for item in self.store]

    def _project(self, item: RecordModel) -> IDTextItem:
        return IDTextItem(id=self.kind.get_id(item), text=self.kind.display_text(item))
