"""
Create and list endpoints for record collections.

``build_router`` returns an ``APIRouter`` with two routes for a
resource:

* ``POST ""`` validates the JSON body, stores a new record and answers
  201 with ``{"message": ..., <singular key>: record}``.
* ``GET ""`` answers 200 with ``{"message": ..., <plural key>: [records]}``.

Validation failures become HTTP 400 and storage faults HTTP 500; the
application's exception handler renders both as ``{"error": ...}``.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import create_model

from pig_farm_api.app.core.db import RecordStore, get_store
from pig_farm_api.app.core.errors import RecordValidationError, StorageFault
from pig_farm_api.app.services.record_service import RecordService
from pig_farm_api.app.services.resources import Resource


logger = logging.getLogger(__name__)


def build_router(resource: Resource) -> APIRouter:
    """Build the create/list routes for ``resource``."""
    router = APIRouter()
    model_name = resource.record_model.__name__

    # Response envelopes, used for the OpenAPI schema and serialisation.
    created_model = create_model(
        f"{model_name}Created",
        message=(str, ...),
        **{resource.singular_key: (resource.record_model, ...)},
    )
    listed_model = create_model(
        f"{model_name}List",
        message=(str, ...),
        **{resource.plural_key: (List[resource.record_model], ...)},
    )

    def get_service(store: RecordStore = Depends(get_store)) -> RecordService:
        return RecordService(resource, store)

    @router.post(
        "",
        response_model=created_model,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource.table}",
        description=f"Create a {resource.label}. {resource.invalid_input_message}",
    )
    async def create_record(
        payload: Any = Body(None),
        service: RecordService = Depends(get_service),
    ) -> Any:
        try:
            record = await service.create(payload)
        except RecordValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
        except StorageFault as e:
            logger.exception("Failed to create %s", resource.label)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=resource.create_failed_message,
            ) from e
        return {"message": resource.created_message, resource.singular_key: record}

    @router.get(
        "",
        response_model=listed_model,
        name=f"list_{resource.table}",
        description=f"List all {resource.plural_label}.",
    )
    async def list_records(service: RecordService = Depends(get_service)) -> Any:
        try:
            records = await service.list_all()
        except StorageFault as e:
            logger.exception("Failed to retrieve %s", resource.plural_label)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=resource.list_failed_message,
            ) from e
        return {"message": resource.retrieved_message, resource.plural_key: records}

    return router
