"""Pooled HTTP client for calls to the hosted face detection model."""
import httpx
import logging
from typing import Optional

from ..core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# One client per process, created on first detection call
_inference_client: Optional[httpx.AsyncClient] = None


def build_inference_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Build an AsyncClient sized for concurrent face detection requests.

    Timeout and pool limits come from the ROBOFLOW_* settings; every
    capture from every user is one request, so the pool bounds how many
    detections can be in flight against the model at once.
    """
    return httpx.AsyncClient(
        timeout=settings.roboflow_timeout_seconds,
        limits=httpx.Limits(
            max_keepalive_connections=settings.roboflow_max_keepalive_connections,
            max_connections=settings.roboflow_max_connections,
            keepalive_expiry=settings.roboflow_keepalive_seconds,
        ),
        http2=settings.roboflow_http2,
    )


def get_inference_http_client() -> httpx.AsyncClient:
    """
    Get or create the shared client used by FaceDetectionClient.

    Returns:
        Shared AsyncClient instance
    """
    global _inference_client

    if _inference_client is None:
        settings = get_settings()
        _inference_client = build_inference_http_client(settings)
        logger.info(
            f"Created inference HTTP client (max {settings.roboflow_max_connections} connections, "
            f"timeout {settings.roboflow_timeout_seconds}s)"
        )

    return _inference_client


async def close_inference_http_client() -> None:
    """Close the shared inference client (application shutdown)."""
    global _inference_client

    if _inference_client is not None:
        await _inference_client.aclose()
        _inference_client = None
        logger.info("Closed inference HTTP client")
