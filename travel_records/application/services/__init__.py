"""Application services."""
from travel_records.application.services.attraction_service import AttractionService
from travel_records.application.services.attraction_stage_service import AttractionStageService
from travel_records.application.services.entity_service import EntityService
from travel_records.application.services.id_allocator import IdAllocator
from travel_records.application.services.media_service import MediaService
from travel_records.application.services.post_service import PostService
from travel_records.application.services.stage_service import StageService
from travel_records.application.services.trip_service import TripService
from travel_records.application.services.user_service import UserService
from travel_records.application.services.validation import EntityValidator

__all__ = [
    "AttractionService",
    "AttractionStageService",
    "EntityService",
    "EntityValidator",
    "IdAllocator",
    "MediaService",
    "PostService",
    "StageService",
    "TripService",
    "UserService",
]
