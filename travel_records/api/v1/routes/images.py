"""Image API routes for stage photos."""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse

from travel_records.api.v1.schemas.media_schemas import ImageResponseSchema, ImageSchema
from travel_records.application.dto.media_dto import ImageResponseDTO
from travel_records.application.services import MediaService
from travel_records.core.dependencies import get_media_service

router = APIRouter(prefix="/api/Images", tags=["images"])


def _response(result: ImageResponseDTO, error_status: int) -> JSONResponse:
    body = ImageResponseSchema.model_validate(result).model_dump()
    return JSONResponse(
        status_code=error_status if result.error else status.HTTP_200_OK,
        content=body,
    )


@router.get("", response_model=List[ImageSchema])
def list_images(service: MediaService = Depends(get_media_service)):
    return list(service.list())


@router.get("/{stage_id}/stageImages", response_model=List[ImageSchema])
def list_stage_images(stage_id: int, service: MediaService = Depends(get_media_service)):
    """
    Images of a stage.

    Only names shaped like {prefix}_{ownerId}_{stageId}_{suffix}.jpg match.
    """
    return list(service.list_by_stage(stage_id))


@router.get("/{image_id}", response_model=ImageSchema)
def download_image(image_id: str, service: MediaService = Depends(get_media_service)):
    image = service.download(image_id)
    if image is None:
        raise HTTPException(status_code=404, detail=f"File {image_id}.jpg not found")
    return image


@router.post("", response_model=ImageResponseSchema)
def upload_image(
    id: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    service: MediaService = Depends(get_media_service),
):
    """
    Upload a photo stored as {id}{extension of the uploaded file}.

    Returns 400 with a structured body when no file was sent or the name
    is already taken.
    """
    if file is None:
        result = service.upload(None, None, id)
    else:
        result = service.upload(file.file, file.filename, id, content_type=file.content_type)
    return _response(result, status.HTTP_400_BAD_REQUEST)


@router.delete("/{image_id}", response_model=ImageResponseSchema)
def delete_image(image_id: str, service: MediaService = Depends(get_media_service)):
    return _response(service.delete(image_id), status.HTTP_404_NOT_FOUND)
