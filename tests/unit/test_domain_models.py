"""
Unit tests for domain models (Capture, Detection).
"""
from datetime import datetime, timezone

import pytest

from face_viewer.domain.models.photo import Capture
from factories import make_detection, make_photo


class TestCapture:
    """Tests for Capture"""

    def test_from_photo_copies_fields(self):
        photo = make_photo("req-1", buffer=b"abc")
        capture = Capture.from_photo(photo, "user-1")
        assert capture.request_id == "req-1"
        assert capture.user_id == "user-1"
        assert capture.buffer == b"abc"
        assert capture.size == 3
        assert capture.mime_type == "image/jpeg"

    def test_timestamp_ms(self):
        ts = datetime(2026, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
        capture = Capture.from_photo(make_photo("req-1", timestamp=ts), "user-1")
        assert capture.timestamp_ms == int(ts.timestamp() * 1000)

    def test_missing_user_raises(self):
        with pytest.raises(ValueError, match="user ID is required"):
            Capture.from_photo(make_photo("req-1"), "")

    def test_missing_request_id_raises(self):
        with pytest.raises(ValueError, match="request ID is required"):
            Capture.from_photo(make_photo(""), "user-1")


class TestDetection:
    """Tests for Detection"""

    def test_valid_detection(self):
        detection = make_detection(confidence=0.5)
        assert detection.confidence == 0.5

    @pytest.mark.parametrize("confidence", [-0.1, 1.2])
    def test_confidence_out_of_range_raises(self, confidence):
        with pytest.raises(ValueError, match="Confidence"):
            make_detection(confidence=confidence)

    def test_negative_size_raises(self):
        with pytest.raises(ValueError):
            make_detection(width=-1.0)
