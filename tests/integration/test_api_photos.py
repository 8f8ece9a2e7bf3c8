"""
Integration tests for the webview photo API.
Uses TestClient against the real app with an in-memory session store.
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from face_viewer.application.use_cases.photo import GetLatestPhotoUseCase
from face_viewer.core.security import create_jwt_token
from face_viewer.di.container import get_container
from face_viewer.domain.models.photo import Capture
from face_viewer.infrastructure.cache.session_store import SessionStore
from factories import make_detection, make_photo


@pytest.fixture
def client(fresh_container):
    """Create test client with an empty container."""
    from face_viewer.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(client) -> SessionStore:
    return get_container().get(SessionStore)


def _auth(user_id: str = "user-a") -> dict:
    return {"Authorization": f"Bearer {create_jwt_token({'sub': user_id})}"}


def _put_photo(store: SessionStore, request_id: str, user_id: str = "user-a") -> Capture:
    capture = Capture.from_photo(make_photo(request_id, buffer=b"\x89PNG-bytes", mime_type="image/png"), user_id)
    store.photos.put(capture)
    return capture


class TestAuthentication:
    """Identity is required before anything else"""

    @pytest.mark.parametrize("path", ["/api/latest-photo", "/api/photo/r1", "/api/faces/r1"])
    def test_missing_token_returns_401(self, client, path):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    @pytest.mark.parametrize("path", ["/api/latest-photo", "/api/photo/r1", "/api/faces/r1"])
    def test_invalid_token_returns_401(self, client, path):
        response = client.get(path, headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == 401

    def test_token_without_subject_returns_401(self, client):
        token = create_jwt_token({"email": "someone@example.com"})
        response = client.get("/api/latest-photo", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_rejected_before_cache_lookup(self, client):
        use_case = AsyncMock(spec=GetLatestPhotoUseCase)
        get_container().register_factory(GetLatestPhotoUseCase, lambda: use_case)

        response = client.get("/api/latest-photo")

        assert response.status_code == 401
        use_case.execute.assert_not_awaited()


class TestLatestPhoto:
    """Tests for GET /api/latest-photo"""

    def test_no_photo_returns_404(self, client, store):
        response = client.get("/api/latest-photo", headers=_auth())
        assert response.status_code == 404
        assert response.json()["detail"] == "No photo available"

    def test_returns_descriptor(self, client, store):
        capture = _put_photo(store, "r1")
        response = client.get("/api/latest-photo", headers=_auth())
        assert response.status_code == 200
        assert response.json() == {
            "requestId": "r1",
            "timestamp": capture.timestamp_ms,
            "hasPhoto": True,
        }


class TestPhotoBytes:
    """Tests for GET /api/photo/{request_id}"""

    def test_returns_raw_bytes(self, client, store):
        _put_photo(store, "r1")
        response = client.get("/api/photo/r1", headers=_auth())
        assert response.status_code == 200
        assert response.content == b"\x89PNG-bytes"
        assert response.headers["content-type"] == "image/png"
        assert response.headers["cache-control"] == "no-cache"

    def test_superseded_id_returns_404(self, client, store):
        _put_photo(store, "r1")
        _put_photo(store, "r2")
        response = client.get("/api/photo/r1", headers=_auth())
        assert response.status_code == 404

    def test_other_users_photo_returns_404(self, client, store):
        _put_photo(store, "b1", user_id="user-b")
        response = client.get("/api/photo/b1", headers=_auth("user-a"))
        assert response.status_code == 404


class TestFaces:
    """Tests for GET /api/faces/{request_id}"""

    def test_returns_faces(self, client, store):
        _put_photo(store, "r1")
        store.faces.put("r1", [make_detection(0.92, "d1"), make_detection(0.77, "d2")])

        response = client.get("/api/faces/r1", headers=_auth())

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert data["requestId"] == "r1"
        assert data["faces"][0] == {
            "x": 320.0,
            "y": 240.0,
            "width": 100.0,
            "height": 120.0,
            "confidence": 0.92,
            "class": "face",
            "class_id": 0,
            "detection_id": "d1",
        }

    def test_pending_returns_404_with_processing_detail(self, client, store):
        _put_photo(store, "r1")
        response = client.get("/api/faces/r1", headers=_auth())
        assert response.status_code == 404
        assert response.json()["detail"] == "No face data available yet"

    def test_stale_and_unknown_ids_are_indistinguishable(self, client, store):
        _put_photo(store, "r1")
        store.faces.put("r1", [])
        _put_photo(store, "r2")

        stale = client.get("/api/faces/r1", headers=_auth())
        unknown = client.get("/api/faces/nope", headers=_auth())

        assert stale.status_code == unknown.status_code == 404
        assert stale.json() == unknown.json() == {"detail": "Photo not found or not authorized"}


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
