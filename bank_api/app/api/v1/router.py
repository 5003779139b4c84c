"""
Top‑level router for version 1 of the API.

Includes a resource router and a lookup router for every entity kind
in ``ENTITY_KINDS``.  Paths keep the singular, PascalCase resource
names used by existing clients, e.g. ``/Account`` and
``/AccountLookups``.
"""

from fastapi import APIRouter

from bank_api.app.services.entity_kinds import ENTITY_KINDS

from .endpoints.resources import build_lookup_router, build_resource_router

router = APIRouter()

for kind in ENTITY_KINDS:
    router.include_router(build_resource_router(kind), prefix=f"/{kind.name}", tags=[kind.plural.lower()])
    router.include_router(build_lookup_router(kind), prefix=f"/{kind.name}Lookups", tags=["lookups"])
