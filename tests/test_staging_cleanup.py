"""Tests for the staged upload sweep."""
import io

from travel_records.config import settings
from travel_records.tasks.staging_cleanup import sweep_staged_images, sweep_staging_dir


def test_sweep_missing_directory(tmp_path):
    result = sweep_staging_dir(str(tmp_path / "absent"), "*.jpg")
    assert result["status"] == "skipped"
    assert result["deleted"] == 0


def test_sweep_deletes_matching_files_only(tmp_path):
    (tmp_path / "a.jpg").write_bytes(b"1")
    (tmp_path / "b.jpg").write_bytes(b"2")
    (tmp_path / "keep.png").write_bytes(b"3")
    (tmp_path / "nested.jpg").mkdir()

    result = sweep_staging_dir(str(tmp_path), "*.jpg")

    assert result == {"status": "completed", "directory": str(tmp_path), "deleted": 2, "failed": 0}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.png", "nested.jpg"]


def test_task_uses_configured_directory(tmp_path, monkeypatch):
    (tmp_path / "upload_stale.jpg").write_bytes(b"1")
    (tmp_path / "upload_stale.png").write_bytes(b"2")
    (tmp_path / "unrelated.png").write_bytes(b"3")
    monkeypatch.setattr(settings, "MEDIA_STAGING_DIR", str(tmp_path))
    result = sweep_staged_images()
    assert result["deleted"] == 2
    assert [p.name for p in tmp_path.iterdir()] == ["unrelated.png"]


def test_sweep_removes_leftovers_of_any_extension(media_service):
    staged = [media_service._stage(io.BytesIO(b"x"), name) for name in ("a.jpg", "b.png", "c.webp")]
    result = sweep_staging_dir(str(staged[0].parent), settings.MEDIA_STAGING_PATTERN)
    assert result["deleted"] == 3
    assert not any(path.exists() for path in staged)
