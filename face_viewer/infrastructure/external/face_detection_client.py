# Standard library imports
import base64
import logging
from typing import List, Optional

# External package imports
import httpx
from pydantic import BaseModel, Field, ValidationError

# Local application imports
from ...core.config import get_settings
from ...domain.constants import PredictionFields
from ...domain.models.detection import Detection
from ..http_client_factory import get_inference_http_client

logger = logging.getLogger(__name__)


class FaceDetectionError(Exception):
    """Raised when the hosted face detection call does not produce predictions."""
    pass


class _Prediction(BaseModel):
    x: float
    y: float
    width: float
    height: float
    confidence: float
    class_name: str = Field(alias=PredictionFields.CLASS)
    class_id: int
    detection_id: str


class _PredictionResponse(BaseModel):
    predictions: List[_Prediction]


class FaceDetectionClient:
    """
    HTTP client for the hosted (Roboflow serverless) face detection model.

    One call per photo: the image is base64 encoded and posted as a
    form-urlencoded body, the API key travels as a query parameter.
    There is no retry; callers decide what a failure means.
    """

    def __init__(
        self,
        model_url: Optional[str] = None,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize face detection client.

        Args:
            model_url: Inference endpoint. If None, reads from settings.
            api_key: Inference API key. If None, reads from settings.
            http_client: Client to send requests with. If None, the shared
                pooled client is used.
        """
        settings = get_settings()
        self.model_url = model_url or settings.roboflow_model_url
        self.api_key = api_key if api_key is not None else settings.roboflow_api_key
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return get_inference_http_client()
        return self._http_client

    async def detect(self, image_bytes: bytes) -> List[Detection]:
        """
        Detect faces in an image.

        Args:
            image_bytes: Raw encoded image (e.g. JPEG bytes)

        Returns:
            Detections in source-image pixel space (may be empty)

        Raises:
            FaceDetectionError: On transport errors, non-2xx responses or
                a payload without a valid predictions list
        """
        encoded_image = base64.b64encode(image_bytes).decode("ascii")

        try:
            response = await self.http_client.post(
                self.model_url,
                params={"api_key": self.api_key},
                content=encoded_image,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FaceDetectionError(f"Timeout calling face detection API: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FaceDetectionError(
                f"Face detection API returned {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise FaceDetectionError(f"Face detection API request failed: {e}") from e

        try:
            payload = _PredictionResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise FaceDetectionError(f"Unexpected face detection response: {e}") from e

        try:
            return [
                Detection(
                    x=prediction.x,
                    y=prediction.y,
                    width=prediction.width,
                    height=prediction.height,
                    confidence=prediction.confidence,
                    class_name=prediction.class_name,
                    class_id=prediction.class_id,
                    detection_id=prediction.detection_id,
                )
                for prediction in payload.predictions
            ]
        except ValueError as e:
            raise FaceDetectionError(f"Invalid prediction in face detection response: {e}") from e
