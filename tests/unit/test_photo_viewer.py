"""
Unit tests for the polling PhotoViewer against a fake webview API.
"""
import io

import httpx
import pytest
from PIL import Image

from face_viewer.viewer.photo_viewer import PhotoViewer, ViewerStatus, read_image_size

FACE = {
    "x": 320.0,
    "y": 240.0,
    "width": 100.0,
    "height": 120.0,
    "confidence": 0.92,
    "class": "face",
    "class_id": 0,
    "detection_id": "d1",
}


def _jpeg(width: int = 640, height: int = 480) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color=(200, 120, 40)).save(buffer, format="JPEG")
    return buffer.getvalue()


class FakeWebviewApi:
    """Routes viewer requests; faces become available after `faces_after` misses."""

    def __init__(self, request_id="r1", faces_after=0, image=None):
        self.request_id = request_id
        self.faces_after = faces_after
        self.image = image or _jpeg()
        self.calls = {"latest": 0, "photo": 0, "faces": 0}
        self.auth_headers = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.auth_headers.append(request.headers.get("authorization"))
        path = request.url.path
        if path == "/api/latest-photo":
            self.calls["latest"] += 1
            if self.request_id is None:
                return httpx.Response(404, json={"detail": "No photo available"})
            return httpx.Response(200, json={"requestId": self.request_id, "timestamp": 1700000000000, "hasPhoto": True})
        if path == f"/api/photo/{self.request_id}":
            self.calls["photo"] += 1
            return httpx.Response(200, content=self.image, headers={"content-type": "image/jpeg"})
        if path == f"/api/faces/{self.request_id}":
            self.calls["faces"] += 1
            if self.calls["faces"] <= self.faces_after:
                return httpx.Response(404, json={"detail": "No face data available yet"})
            return httpx.Response(200, json={"faces": [FACE], "count": 1, "requestId": self.request_id})
        return httpx.Response(404, json={"detail": "Photo not found"})


def _viewer(api, **kwargs) -> PhotoViewer:
    client = httpx.AsyncClient(transport=httpx.MockTransport(api))
    options = dict(poll_interval=0.0, max_attempts=5, retry_delay=0.0)
    options.update(kwargs)
    return PhotoViewer("http://webview.test", token="tok-123", http_client=client, **options)


class TestPollOnce:
    """Tests for PhotoViewer.poll_once"""

    @pytest.mark.asyncio
    async def test_no_photo_yet(self):
        viewer = _viewer(FakeWebviewApi(request_id=None))
        assert await viewer.poll_once() is False
        assert viewer.status == ViewerStatus.WAITING
        assert viewer.frame is None

    @pytest.mark.asyncio
    async def test_new_photo_loaded_then_faces(self):
        api = FakeWebviewApi(faces_after=2)
        updates = []
        viewer = _viewer(api, on_update=lambda frame: updates.append(frame.status))

        assert await viewer.poll_once() is True
        assert viewer.frame.request_id == "r1"
        assert viewer.frame.natural_size == (640, 480)
        assert viewer.frame.content_type == "image/jpeg"

        await viewer.face_task
        assert viewer.status == ViewerStatus.DONE
        assert api.calls["faces"] == 3
        assert [f.detection_id for f in viewer.frame.faces] == ["d1"]
        assert updates == [ViewerStatus.PROCESSING, ViewerStatus.DONE]
        assert set(api.auth_headers) == {"Bearer tok-123"}

    @pytest.mark.asyncio
    async def test_same_photo_not_reloaded(self):
        api = FakeWebviewApi()
        viewer = _viewer(api)
        assert await viewer.poll_once() is True
        await viewer.face_task
        assert await viewer.poll_once() is False
        assert api.calls["photo"] == 1

    @pytest.mark.asyncio
    async def test_unauthenticated_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"detail": "Not authenticated"})

        viewer = PhotoViewer(
            "http://webview.test",
            token="bad",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        with pytest.raises(httpx.HTTPStatusError):
            await viewer.poll_once()


class TestAwaitFaces:
    """Tests for the bounded face retry loop"""

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        api = FakeWebviewApi(faces_after=100)
        viewer = _viewer(api, max_attempts=3)

        await viewer.poll_once()
        assert await viewer.face_task is None

        assert api.calls["faces"] == 3
        assert viewer.status == ViewerStatus.TIMEOUT
        assert viewer.frame.faces == []

    @pytest.mark.asyncio
    async def test_connection_error_counts_as_failed_attempt(self):
        api = FakeWebviewApi(faces_after=100)

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/faces/r1" and api.calls["faces"] == 1:
                api.calls["faces"] += 1
                raise httpx.ConnectError("connection refused", request=request)
            return api(request)

        viewer = PhotoViewer(
            "http://webview.test",
            token="tok-123",
            max_attempts=5,
            retry_delay=0.0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        await viewer.poll_once()
        assert await viewer.face_task is None

        assert api.calls["faces"] == 5
        assert viewer.status == ViewerStatus.TIMEOUT

    @pytest.mark.asyncio
    async def test_recovers_after_connection_error(self):
        api = FakeWebviewApi()
        failures = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/faces/r1" and not failures:
                failures.append(request)
                raise httpx.ConnectError("connection reset", request=request)
            return api(request)

        viewer = PhotoViewer(
            "http://webview.test",
            token="tok-123",
            retry_delay=0.0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

        await viewer.poll_once()
        faces = await viewer.face_task

        assert len(failures) == 1
        assert [f.detection_id for f in faces] == ["d1"]
        assert viewer.status == ViewerStatus.DONE

    @pytest.mark.asyncio
    async def test_boxes_scaled_to_display(self):
        viewer = _viewer(FakeWebviewApi())
        await viewer.poll_once()
        await viewer.face_task

        [box] = viewer.boxes((320, 240))
        assert (box.left, box.top, box.width, box.height) == (135.0, 90.0, 50.0, 60.0)

    @pytest.mark.asyncio
    async def test_boxes_empty_without_frame(self):
        assert _viewer(FakeWebviewApi(request_id=None)).boxes((320, 240)) == []


class TestReadImageSize:
    """Tests for read_image_size"""

    def test_jpeg_size(self):
        assert read_image_size(_jpeg(123, 45)) == (123, 45)

    def test_undecodable_bytes(self):
        assert read_image_size(b"not an image") == (0, 0)
