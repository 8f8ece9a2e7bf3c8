"""
Photo Viewer
------------

Polling client for the webview API. It reproduces what the browser page
does: poll the latest photo descriptor on a fixed interval, load the photo
when its request ID changes, then retry the faces endpoint a bounded number
of times until detections show up or the attempt budget runs out.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
from PIL import Image

from ..domain.constants import PredictionFields
from ..domain.models.detection import Detection
from .geometry import BoxRect, Size, scale_detections

logger = logging.getLogger(__name__)


class ViewerStatus(str, Enum):
    WAITING = "waiting"  # no photo yet
    PROCESSING = "processing"  # photo shown, detections pending
    DONE = "done"
    TIMEOUT = "timeout"  # retry budget exhausted


@dataclass
class ViewerFrame:
    """What the viewer currently shows."""
    request_id: str
    timestamp: int
    image: bytes
    content_type: str
    natural_size: Tuple[int, int]
    faces: List[Detection] = field(default_factory=list)
    status: ViewerStatus = ViewerStatus.PROCESSING


def detection_from_json(face: Dict[str, Any]) -> Detection:
    return Detection(
        x=float(face[PredictionFields.X]),
        y=float(face[PredictionFields.Y]),
        width=float(face[PredictionFields.WIDTH]),
        height=float(face[PredictionFields.HEIGHT]),
        confidence=float(face[PredictionFields.CONFIDENCE]),
        class_name=str(face[PredictionFields.CLASS]),
        class_id=int(face[PredictionFields.CLASS_ID]),
        detection_id=str(face[PredictionFields.DETECTION_ID]),
    )


def read_image_size(image: bytes) -> Tuple[int, int]:
    """Natural (width, height) of an encoded image, (0, 0) if it cannot be decoded."""
    try:
        with Image.open(BytesIO(image)) as img:
            return img.size
    except OSError:  # includes UnidentifiedImageError
        logger.warning("Could not decode photo to read its size")
        return (0, 0)


class PhotoViewer:
    """Async polling client for /api/latest-photo, /api/photo/{id} and /api/faces/{id}."""

    def __init__(
        self,
        base_url: str,
        token: str,
        poll_interval: float = 0.5,
        max_attempts: int = 10,
        retry_delay: float = 1.0,
        http_client: Optional[httpx.AsyncClient] = None,
        on_update: Optional[Callable[[ViewerFrame], None]] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.on_update = on_update
        self.frame: Optional[ViewerFrame] = None
        self.face_task: Optional[asyncio.Task] = None

        self._headers = {"Authorization": f"Bearer {token}"}
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=10.0)

    @property
    def status(self) -> ViewerStatus:
        return self.frame.status if self.frame else ViewerStatus.WAITING

    async def poll_once(self) -> bool:
        """
        Check for a new photo and start fetching its detections.

        Returns:
            True if a new photo was loaded

        Raises:
            httpx.HTTPStatusError: On responses other than 200/404 (e.g. 401)
        """
        response = await self._get("/api/latest-photo")
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        response.raise_for_status()

        descriptor = response.json()
        request_id = descriptor["requestId"]
        if self.frame is not None and self.frame.request_id == request_id:
            return False

        photo = await self._get(f"/api/photo/{request_id}")
        if photo.status_code == httpx.codes.NOT_FOUND:
            # Superseded between the two calls; the next poll picks up the newer one
            return False
        photo.raise_for_status()

        self.frame = ViewerFrame(
            request_id=request_id,
            timestamp=int(descriptor["timestamp"]),
            image=photo.content,
            content_type=photo.headers.get("content-type", "application/octet-stream"),
            natural_size=read_image_size(photo.content),
        )
        logger.info(f"Showing photo {request_id}")
        self._notify()

        if self.face_task is not None and not self.face_task.done():
            self.face_task.cancel()
        self.face_task = asyncio.create_task(self.await_faces(request_id))
        return True

    async def await_faces(self, request_id: str) -> Optional[List[Detection]]:
        """
        Retry the faces endpoint until it answers 200 or attempts run out.

        A transport error counts as a failed attempt.

        Returns:
            The detections, or None on timeout
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                response = await self._get(f"/api/faces/{request_id}")
            except httpx.HTTPError as e:
                logger.warning(f"Error fetching faces for photo {request_id} (attempt {attempt}): {e}")
                response = None
            if response is not None and response.status_code == httpx.codes.OK:
                faces = [detection_from_json(face) for face in response.json()["faces"]]
                self._update_faces(request_id, faces, ViewerStatus.DONE)
                logger.info(f"Loaded {len(faces)} face(s) for photo {request_id}")
                return faces
            if attempt < self.max_attempts:
                await asyncio.sleep(self.retry_delay)

        logger.warning(f"Face detection timed out for photo {request_id} after {self.max_attempts} attempts")
        self._update_faces(request_id, [], ViewerStatus.TIMEOUT)
        return None

    def boxes(self, displayed_size: Size) -> List[BoxRect]:
        """Boxes of the current frame scaled to the displayed image size."""
        if self.frame is None:
            return []
        return scale_detections(self.frame.faces, self.frame.natural_size, displayed_size)

    async def run(self) -> None:
        """Poll forever (until cancelled)."""
        while True:
            try:
                await self.poll_once()
            except httpx.HTTPError as e:
                logger.warning(f"Error polling for latest photo: {e}")
            await asyncio.sleep(self.poll_interval)

    async def aclose(self) -> None:
        if self.face_task is not None and not self.face_task.done():
            self.face_task.cancel()
        if self._owns_client:
            await self._client.aclose()

    async def _get(self, path: str) -> httpx.Response:
        return await self._client.get(f"{self.base_url}{path}", headers=self._headers)

    def _update_faces(self, request_id: str, faces: List[Detection], status: ViewerStatus) -> None:
        # A newer photo may have replaced the one these faces belong to
        if self.frame is None or self.frame.request_id != request_id:
            return
        self.frame.faces = faces
        self.frame.status = status
        self._notify()

    def _notify(self) -> None:
        if self.on_update is not None and self.frame is not None:
            self.on_update(self.frame)
