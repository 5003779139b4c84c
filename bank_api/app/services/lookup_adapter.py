"""
Lookup-only facade over a resource controller.

Select widgets only need identifiers and display text, so the lookup
routes are served through this narrow wrapper.  It holds no state of
its own; every call re-derives the projection from the controller.
"""

from typing import List

from bank_api.app.schemas.lookup import IDTextItem
from bank_api.app.services.resource_controller import ResourceController


class LookupAdapter:
    """Expose ``lookup_one`` and ``lookup_all`` of a controller."""

    def __init__(self, controller: ResourceController) -> None:
        self._controller = controller

    def lookup_one(self, record_id: int) -> IDTextItem:
        return self._controller.lookup_one(record_id)

    def lookup_all(self) -> List[IDTextItem]:
        return self._controller.lookup_all()
