"""Cleanup of local files left behind by interrupted uploads."""
import logging
from pathlib import Path
from typing import Any, Dict

from travel_records.celery_app import celery_app
from travel_records.config import settings

logger = logging.getLogger(__name__)


def sweep_staging_dir(directory: str, pattern: str) -> Dict[str, Any]:
    """Delete files matching ``pattern`` directly inside ``directory``.

    Files that cannot be deleted are logged and skipped.

    Args:
        directory: staging directory to sweep
        pattern: glob pattern, e.g. ``upload_*``

    Returns:
        Summary with the number of deleted and failed files
    """
    staging_dir = Path(directory)
    if not staging_dir.is_dir():
        return {'status': 'skipped', 'directory': str(staging_dir), 'deleted': 0, 'failed': 0}

    deleted = 0
    failed = 0
    for path in staging_dir.glob(pattern):
        if not path.is_file():
            continue
        try:
            path.unlink()
            deleted += 1
        except OSError as e:
            failed += 1
            logger.warning(f"Could not delete staged file {path}: {e}")

    if deleted or failed:
        logger.info(f"Staging sweep of {staging_dir}: deleted {deleted}, failed {failed}")

    return {
        'status': 'completed',
        'directory': str(staging_dir),
        'deleted': deleted,
        'failed': failed,
    }


@celery_app.task(name="travel_records.tasks.staging_cleanup.sweep_staged_images")
def sweep_staged_images():
    """Sweep the configured media staging directory."""
    return sweep_staging_dir(settings.MEDIA_STAGING_DIR, settings.MEDIA_STAGING_PATTERN)
