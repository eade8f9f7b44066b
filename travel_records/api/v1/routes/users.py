"""User API routes - thin layer delegating to UserService."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from travel_records.api.v1.schemas.record_schemas import UserRequestSchema, UserResponseSchema
from travel_records.application.services import UserService
from travel_records.core.dependencies import get_user_service

router = APIRouter(prefix="/api/Users", tags=["users"])


@router.get("", response_model=List[UserResponseSchema])
def list_users(service: UserService = Depends(get_user_service)):
    return service.list()


@router.get("/{user_id}", response_model=UserResponseSchema)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get(user_id)


@router.get("/{username}/{password}", response_model=UserResponseSchema)
def login(username: str, password: str, service: UserService = Depends(get_user_service)):
    """
    Resolve a username/password pair.

    Returns 404 for an unknown username and 403 for a wrong password.
    """
    return service.authenticate(username, password)


@router.post("", response_model=UserResponseSchema, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserRequestSchema, service: UserService = Depends(get_user_service)):
    return service.create(payload.to_entity())


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(
    user_id: int,
    payload: UserRequestSchema,
    service: UserService = Depends(get_user_service),
):
    service.update(user_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user. Trips, stages and posts of the user are kept."""
    service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
