# Standard library imports
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PhotoData:
    """
    Photo as delivered by the device session for a single capture request.

    Mirrors the payload the glasses SDK hands back from a photo request.
    """
    request_id: str
    buffer: bytes
    timestamp: datetime
    mime_type: str
    filename: str
    size: int


@dataclass(frozen=True)
class Capture:
    """
    Pure domain model for a cached photo owned by one user.

    Only the newest capture per user is kept; a new capture for the same
    user supersedes the previous one.
    """
    request_id: str
    user_id: str
    buffer: bytes
    timestamp: datetime
    mime_type: str
    filename: str
    size: int

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.request_id:
            raise ValueError("Capture request ID is required")
        if not self.user_id:
            raise ValueError("Capture user ID is required")
        if self.size < 0:
            raise ValueError("Capture size must be non-negative")

    @classmethod
    def from_photo(cls, photo: PhotoData, user_id: str) -> "Capture":
        return cls(
            request_id=photo.request_id,
            user_id=user_id,
            buffer=photo.buffer,
            timestamp=photo.timestamp,
            mime_type=photo.mime_type,
            filename=photo.filename,
            size=photo.size,
        )

    @property
    def timestamp_ms(self) -> int:
        """Capture time as epoch milliseconds (the webview's clock unit)."""
        return int(self.timestamp.timestamp() * 1000)
