"""Attraction API routes, including stage links and popular attractions."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from travel_records.api.v1.schemas.record_schemas import (
    AttractionRequestSchema,
    AttractionResponseSchema,
    AttractionStageResponseSchema,
)
from travel_records.application.services import AttractionService, AttractionStageService
from travel_records.core.dependencies import (
    get_attraction_service,
    get_attraction_stage_service,
)

router = APIRouter(prefix="/api/Attractions", tags=["attractions"])

# Served at the root, outside /api/Attractions
popular_router = APIRouter(tags=["attractions"])


@popular_router.get("/popularAttractions", response_model=List[AttractionResponseSchema])
def list_popular_attractions(service: AttractionService = Depends(get_attraction_service)):
    """Attractions whose popularity reached HIGH."""
    return service.list_popular()


@router.get("", response_model=List[AttractionResponseSchema])
def list_attractions(service: AttractionService = Depends(get_attraction_service)):
    return service.list()


@router.get("/{stage_id}/allStageAttractions", response_model=List[AttractionResponseSchema])
def list_stage_attractions(
    stage_id: int,
    service: AttractionService = Depends(get_attraction_service),
):
    """
    Attractions linked to a stage.

    An attraction linked twice is listed twice.
    """
    return service.list_for_stage(stage_id)


@router.get("/{attraction_id}", response_model=AttractionResponseSchema)
def get_attraction(attraction_id: int, service: AttractionService = Depends(get_attraction_service)):
    return service.get(attraction_id)


@router.post("", response_model=AttractionResponseSchema, status_code=status.HTTP_201_CREATED)
def create_attraction(
    payload: AttractionRequestSchema,
    service: AttractionService = Depends(get_attraction_service),
):
    """Create an attraction. It always starts with score 0 and LOW popularity."""
    return service.create(payload.to_entity())


@router.put("/{attraction_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_attraction(
    attraction_id: int,
    payload: AttractionRequestSchema,
    service: AttractionService = Depends(get_attraction_service),
):
    """Update an attraction and count one more visit towards its popularity."""
    service.update(attraction_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{attraction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attraction(
    attraction_id: int,
    service: AttractionService = Depends(get_attraction_service),
):
    service.delete(attraction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{attraction_id}/{stage_id}", response_model=AttractionStageResponseSchema)
def link_attraction_to_stage(
    attraction_id: int,
    stage_id: int,
    service: AttractionStageService = Depends(get_attraction_stage_service),
):
    return service.link(attraction_id, stage_id)


@router.delete("/{attraction_id}/{stage_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlink_attraction_from_stage(
    attraction_id: int,
    stage_id: int,
    service: AttractionStageService = Depends(get_attraction_stage_service),
):
    service.unlink(attraction_id, stage_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
