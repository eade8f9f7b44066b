"""Celery application configuration."""
from celery import Celery

from travel_records.config import settings

# Create Celery app
celery_app = Celery(
    "travel_records",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=[
        "travel_records.tasks.staging_cleanup",
    ]
)

# Celery configuration
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    broker_connection_retry_on_startup=True,
    task_track_started=True,
)

# Periodic sweep of stray staged uploads
celery_app.conf.beat_schedule = {
    "sweep-staged-images": {
        "task": "travel_records.tasks.staging_cleanup.sweep_staged_images",
        "schedule": float(settings.STAGING_SWEEP_INTERVAL_SECONDS),
    },
}
