"""
Unit tests for viewer box geometry.
"""
import pytest

from face_viewer.viewer.geometry import BoxRect, scale_detections
from factories import make_detection


class TestScaleDetections:
    """Tests for scale_detections"""

    def test_same_size_converts_centre_to_top_left(self):
        detection = make_detection(x=100.0, y=50.0, width=40.0, height=20.0)
        [box] = scale_detections([detection], (640, 480), (640, 480))
        assert box.left == pytest.approx(80.0)
        assert box.top == pytest.approx(40.0)
        assert box.width == pytest.approx(40.0)
        assert box.height == pytest.approx(20.0)

    def test_downscaled_display(self):
        detection = make_detection(x=320.0, y=240.0, width=100.0, height=120.0, confidence=0.92)
        [box] = scale_detections([detection], (640, 480), (320, 240))
        assert box == BoxRect(left=135.0, top=90.0, width=50.0, height=60.0, label="face", confidence=0.92)

    def test_non_uniform_scale(self):
        detection = make_detection(x=200.0, y=100.0, width=100.0, height=100.0)
        [box] = scale_detections([detection], (400, 200), (800, 100))
        assert box.width == pytest.approx(200.0)
        assert box.height == pytest.approx(50.0)
        assert box.left == pytest.approx(300.0)
        assert box.top == pytest.approx(25.0)

    def test_unknown_natural_size_yields_no_boxes(self):
        assert scale_detections([make_detection()], (0, 0), (320, 240)) == []

    def test_no_detections(self):
        assert scale_detections([], (640, 480), (320, 240)) == []

    def test_caption(self):
        [box] = scale_detections([make_detection(confidence=0.771)], (10, 10), (10, 10))
        assert box.caption == "face 77%"
