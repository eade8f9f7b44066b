"""Post API routes."""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from travel_records.api.v1.schemas.record_schemas import PostRequestSchema, PostResponseSchema
from travel_records.application.services import PostService
from travel_records.core.dependencies import get_post_service

router = APIRouter(prefix="/api/Posts", tags=["posts"])


@router.get("", response_model=List[PostResponseSchema])
def list_posts(service: PostService = Depends(get_post_service)):
    return service.list()


@router.get("/{stage_id}/stagePosts", response_model=List[PostResponseSchema])
def list_stage_posts(stage_id: int, service: PostService = Depends(get_post_service)):
    return service.list_for_stage(stage_id)


@router.get("/{trip_id}/tripPosts", response_model=List[PostResponseSchema])
def list_trip_posts(trip_id: int, service: PostService = Depends(get_post_service)):
    return service.list_for_trip(trip_id)


@router.get("/{post_id}", response_model=PostResponseSchema)
def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    return service.get(post_id)


@router.post("", response_model=PostResponseSchema, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostRequestSchema, service: PostService = Depends(get_post_service)):
    return service.create(payload.to_entity())


@router.put("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_post(
    post_id: int,
    payload: PostRequestSchema,
    service: PostService = Depends(get_post_service),
):
    service.update(post_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    service.delete(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
