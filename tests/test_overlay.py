"""Tests for MetricsOverlay rendering."""

import numpy as np
import pytest

from skin_age_analyzer.models import FrameResult
from skin_age_analyzer.processing.frame_processor import FrameProcessor
from skin_age_analyzer.processing.stabilizer import MetricsStabilizer
from skin_age_analyzer.visualization import MetricsOverlay, OverlayStyle


@pytest.fixture
def frame():
    return np.full((720, 1280, 3), 64, dtype=np.uint8)


@pytest.fixture
def face_result(adult_landmarks):
    processor = FrameProcessor(detector=object(), stabilizer=MetricsStabilizer())
    return processor.process_landmarks(adult_landmarks)


class TestMetricsOverlay:

    def test_draw_face_does_not_modify_input(self, frame, face_result):
        original = frame.copy()
        canvas = MetricsOverlay().draw(frame, face_result)
        assert canvas.shape == frame.shape
        assert np.array_equal(frame, original)
        assert not np.array_equal(canvas, frame)

    def test_annotation_point_color(self, frame, face_result):
        style = OverlayStyle(point_color=(0, 0, 255))
        canvas = MetricsOverlay(style).draw_mesh(frame.copy(), face_result.landmarks)
        # 코끝(4) 포인트 중앙
        x, y = int(0.5 * 1280), int(0.55 * 720)
        assert tuple(canvas[y, x]) == (0, 0, 255)

    def test_too_few_landmarks_skips_mesh(self, frame, face_result):
        canvas = MetricsOverlay().draw_mesh(frame.copy(), face_result.landmarks[:100])
        assert np.array_equal(canvas, frame)

    def test_searching_indicator(self, frame):
        overlay = MetricsOverlay()
        searching = overlay.draw(frame, FrameResult(face_detected=False))
        with_hint = overlay.draw(frame, FrameResult(face_detected=False, no_face_hint=True))
        assert not np.array_equal(searching, frame)
        assert not np.array_equal(with_hint, searching)

    def test_default_style_alphas(self):
        style = OverlayStyle()
        assert 0.0 < style.mesh_alpha < 1.0
        assert 0.0 < style.panel_alpha < 1.0
