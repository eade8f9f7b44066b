"""Stage API routes."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from travel_records.api.v1.schemas.record_schemas import StageRequestSchema, StageResponseSchema
from travel_records.application.services import StageService
from travel_records.core.dependencies import get_stage_service

router = APIRouter(prefix="/api/Stages", tags=["stages"])


@router.get("", response_model=List[StageResponseSchema])
def list_stages(service: StageService = Depends(get_stage_service)):
    return service.list()


@router.get("/{trip_id}/tripsStages", response_model=List[StageResponseSchema])
def list_trip_stages(trip_id: int, service: StageService = Depends(get_stage_service)):
    return service.list_for_trip(trip_id)


@router.get("/{stage_id}", response_model=StageResponseSchema)
def get_stage(stage_id: int, service: StageService = Depends(get_stage_service)):
    return service.get(stage_id)


@router.post("", response_model=StageResponseSchema, status_code=status.HTTP_201_CREATED)
def create_stage(payload: StageRequestSchema, service: StageService = Depends(get_stage_service)):
    return service.create(payload.to_entity())


@router.put("/{stage_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_stage(
    stage_id: int,
    payload: StageRequestSchema,
    service: StageService = Depends(get_stage_service),
):
    service.update(stage_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{stage_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_stage(stage_id: int, service: StageService = Depends(get_stage_service)):
    service.delete(stage_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
