"""Trip API routes."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from travel_records.api.v1.schemas.record_schemas import TripRequestSchema, TripResponseSchema
from travel_records.application.services import TripService
from travel_records.core.dependencies import get_trip_service

router = APIRouter(prefix="/api/Trips", tags=["trips"])


@router.get("", response_model=List[TripResponseSchema])
def list_trips(service: TripService = Depends(get_trip_service)):
    return service.list()


@router.get("/{user_id}/userTrips", response_model=List[TripResponseSchema])
def list_user_trips(user_id: int, service: TripService = Depends(get_trip_service)):
    return service.list_for_user(user_id)


@router.get("/{trip_id}", response_model=TripResponseSchema)
def get_trip(trip_id: int, service: TripService = Depends(get_trip_service)):
    return service.get(trip_id)


@router.post("", response_model=TripResponseSchema, status_code=status.HTTP_201_CREATED)
def create_trip(payload: TripRequestSchema, service: TripService = Depends(get_trip_service)):
    return service.create(payload.to_entity())


@router.put("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_trip(
    trip_id: int,
    payload: TripRequestSchema,
    service: TripService = Depends(get_trip_service),
):
    service.update(trip_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(trip_id: int, service: TripService = Depends(get_trip_service)):
    service.delete(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
