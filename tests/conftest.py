"""Common test fixtures for all test modules"""
import pytest

from core.config import AppSettings
from core.store import VideoStore


@pytest.fixture
def data_file(tmp_path):
    """Path to a data file that does not exist yet"""
    return tmp_path / "videos-data.json"


@pytest.fixture
def store(data_file):
    """Store opened on a missing file, so it starts from the seed data"""
    return VideoStore.open(data_file)


@pytest.fixture
def settings(data_file):
    return AppSettings(data_file=data_file)


@pytest.fixture
def client(store, settings):
    """API client wired to the temporary store"""
    from fastapi.testclient import TestClient

    from app.deps.common import get_app_settings, get_store
    from app.main import app

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_app_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def classifier_cases():
    """URL samples keyed by the expected descriptor kind"""
    return {
        "iframe": [
            "https://www.youtube.com/watch?v=abc123&t=5",
            "https://youtu.be/xyz789?si=1",
            "https://www.youtube.com/embed/PkZNo7MFNFg",
            "https://vimeo.com/555444",
            "https://cdn.example.com/iframe/clip",
            "https://www.dailymotion.com/video/x7tgad0_some-title",
            "https://media.example.com/embed/42",
        ],
        "video": [
            "https://example.com/video.mp4",
            "https://example.com/clip.m3u8",
            "https://example.com/movie.MKV",
            "https://example.com/stream/12345",
        ],
        "unsupported": [
            "not-a-url",
            "",
            "   ",
            "ftp://example.com/file",
        ],
    }
