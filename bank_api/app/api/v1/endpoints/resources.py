"""
Resource and lookup endpoints for API v1.

Every master data kind gets the same two routers, built here from its
``EntityKind`` descriptor:

* ``/{Resource}``: list, get, create, update and delete.  ``GET
  /{Resource}/{id}`` answers with a one-element array because the grid
  data sources only bind to arrays.
* ``/{Resource}Lookups``: identifier/display text pairs for select
  widgets.

A record store (one database connection) is opened per request by the
controller dependency and closed when the response has been produced.
"""

from typing import Callable, Iterator, List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from bank_api.app.schemas.lookup import IDTextItem
from bank_api.app.services.entity_kinds import EntityKind
from bank_api.app.services.errors import InvalidInput, NotFound
from bank_api.app.services.lookup_adapter import LookupAdapter
from bank_api.app.services.record_store import open_record_store
from bank_api.app.services.resource_controller import ResourceController


def controller_dependency(kind: EntityKind) -> Callable[[], Iterator[ResourceController]]:
    """Build a dependency yielding a request-scoped controller for ``kind``."""

    def get_controller() -> Iterator[ResourceController]:
        with open_record_store(kind) as store:
            yield ResourceController(store)

    return get_controller


def build_resource_router(kind: EntityKind) -> APIRouter:
    """Create the CRUD router for one entity kind."""
    router = APIRouter()
    model = kind.model
    slug = kind.name.lower()
    get_controller = controller_dependency(kind)

    @router.get("", response_model=List[model], name=f"list_{slug}")
    async def list_records(controller: ResourceController = Depends(get_controller)):
        """Return all records, freshly loaded from the database."""
        return controller.list()

    @router.get("/{record_id}", response_model=List[model], name=f"get_{slug}")
    async def get_record(record_id: int, controller: ResourceController = Depends(get_controller)):
        """Return the record as a one-element array.

        Returns HTTP 404 if the record is not found.
        """
        try:
            item = controller.get(record_id)
        except NotFound as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        return [item]

    @router.post("", response_model=model, status_code=status.HTTP_201_CREATED, name=f"create_{slug}")
    async def create_record(
        payload: model,
        request: Request,
        response: Response,
        controller: ResourceController = Depends(get_controller),
    ):
        """Store a new record.

        The identifier is assigned by the database; the ``Location``
        header points at the new record.
        """
        try:
            stored = controller.create(payload)
        except InvalidInput as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        response.headers["Location"] = str(request.url_for(f"get_{slug}", record_id=kind.get_id(stored)))
        return stored

    @router.put(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        name=f"update_{slug}",
    )
    async def update_record(
        record_id: int,
        payload: model,
        controller: ResourceController = Depends(get_controller),
    ) -> Response:
        """Overwrite an existing record.

        The identifier in the body must equal the one in the path and
        the record must exist; otherwise HTTP 400 is returned.
        """
        try:
            controller.update(record_id, payload)
        except InvalidInput as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{record_id}", response_model=model, name=f"delete_{slug}")
    async def delete_record(record_id: int, controller: ResourceController = Depends(get_controller)):
        """Delete a record and return it for confirmation."""
        try:
            return controller.delete(record_id)
        except NotFound as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except InvalidInput as e:
            # Still referenced by another record.
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return router


def build_lookup_router(kind: EntityKind) -> APIRouter:
    """Create the lookup router for one entity kind."""
    router = APIRouter()
    slug = kind.name.lower()
    get_controller = controller_dependency(kind)

    def get_lookups(controller: ResourceController = Depends(get_controller)) -> LookupAdapter:
        return LookupAdapter(controller)

    @router.get("", response_model=List[IDTextItem], name=f"list_{slug}_lookups")
    async def list_lookups(lookups: LookupAdapter = Depends(get_lookups)) -> List[IDTextItem]:
        """Return the identifier and display text of every record."""
        return lookups.lookup_all()

    @router.get("/{record_id}", response_model=IDTextItem, name=f"get_{slug}_lookup")
    async def get_lookup(record_id: int, lookups: LookupAdapter = Depends(get_lookups)) -> IDTextItem:
        """Return the identifier and display text of one record."""
        try:
            return lookups.lookup_one(record_id)
        except NotFound as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return router
