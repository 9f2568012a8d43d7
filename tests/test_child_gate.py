"""Tests for the child / adult gate."""

import pytest

from skin_age_analyzer.models import ChildGeometryRatios
from skin_age_analyzer.processing.child_gate import calculate_child_score, is_child
from skin_age_analyzer.processing.geometry import GeometryCalculator


def _ratios(eye=0.2, chin=0.3, jaw=150.0, wrinkle=0.1):
    return ChildGeometryRatios(
        eye_ratio=eye,
        chin_ratio=chin,
        jaw_angle=jaw,
        wrinkle_score=wrinkle,
        face_height_ratio=1.3,
    )


class TestChildScore:

    def test_no_signals(self):
        assert calculate_child_score(_ratios()) == 0.0

    def test_all_signals(self):
        score = calculate_child_score(_ratios(eye=0.3, chin=0.1, jaw=120.0, wrinkle=0.0))
        assert score == pytest.approx(1.0)

    def test_individual_weights(self):
        assert calculate_child_score(_ratios(eye=0.3)) == pytest.approx(0.3)
        assert calculate_child_score(_ratios(chin=0.1)) == pytest.approx(0.3)
        assert calculate_child_score(_ratios(jaw=139.9)) == pytest.approx(0.2)
        assert calculate_child_score(_ratios(wrinkle=0.04)) == pytest.approx(0.2)

    def test_thresholds_are_strict(self):
        assert calculate_child_score(_ratios(eye=0.28, chin=0.18, jaw=140.0, wrinkle=0.05)) == 0.0


class TestIsChild:

    def test_exactly_threshold_is_adult(self):
        score = calculate_child_score(_ratios(eye=0.3, chin=0.1))
        assert score == pytest.approx(0.6)
        assert is_child(score) is False

    def test_above_threshold_is_child(self):
        assert is_child(0.8) is True
        assert is_child(0.61) is True

    def test_synthetic_faces(self, adult_landmarks, child_landmarks):
        adult_score = calculate_child_score(GeometryCalculator.extract_child_ratios(adult_landmarks))
        child_score = calculate_child_score(GeometryCalculator.extract_child_ratios(child_landmarks))
        assert adult_score == pytest.approx(0.2)
        assert child_score == pytest.approx(0.8)
        assert not is_child(adult_score)
        assert is_child(child_score)
