"""
Top‑level router for the API.

Every resource in the registry is mounted at its own path with a
``POST`` (create) and ``GET`` (list all) route.  Register new
collections in ``services/resources.py`` rather than here.
"""

from fastapi import APIRouter

from ..services.resources import RESOURCES
from .endpoints import health, records

router = APIRouter()

for resource in RESOURCES:
    router.include_router(
        records.build_router(resource),
        prefix=resource.path,
        tags=[resource.plural_label],
    )

router.include_router(health.router, tags=["health"])
