"""Tests for geometry ratio extraction."""

import math

import pytest

from skin_age_analyzer.models import Landmark
from skin_age_analyzer.processing.geometry import (
    GeometryCalculator,
    angle_between_points,
    clamp,
    round_half_up,
    safe_div,
)


class TestHelpers:
    """Tests for numeric helpers."""

    def test_safe_div_zero_denominator(self):
        assert safe_div(1.0, 0.0) == 0.0

    def test_safe_div_regular(self):
        assert safe_div(3.0, 4.0) == pytest.approx(0.75)

    def test_safe_div_non_finite_result(self):
        assert safe_div(1e308, 1e-308) == 0.0

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(2, 0, 3) == 2

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2
        assert round_half_up(-2.5) == -2

    def test_angle_right_angle(self):
        apex = Landmark(0.5, 0.5)
        assert angle_between_points(apex, Landmark(0.6, 0.5), Landmark(0.5, 0.4)) == pytest.approx(90.0)

    def test_angle_straight_line(self):
        apex = Landmark(0.5, 0.5)
        assert angle_between_points(apex, Landmark(0.4, 0.5), Landmark(0.6, 0.5)) == pytest.approx(180.0)

    def test_angle_zero_length_ray(self):
        apex = Landmark(0.5, 0.5)
        assert angle_between_points(apex, Landmark(0.5, 0.5), Landmark(0.6, 0.5)) == 180.0


class TestChildRatios:
    """Tests for GeometryCalculator.extract_child_ratios."""

    def test_adult_face(self, adult_landmarks):
        ratios = GeometryCalculator.extract_child_ratios(adult_landmarks)
        assert ratios.eye_ratio == pytest.approx(0.25)
        assert ratios.chin_ratio == pytest.approx(0.25)
        assert ratios.jaw_angle == pytest.approx(90.0)
        assert ratios.wrinkle_score == pytest.approx(0.25)
        assert ratios.face_height_ratio == pytest.approx(1.5)

    def test_child_face(self, child_landmarks):
        ratios = GeometryCalculator.extract_child_ratios(child_landmarks)
        assert ratios.eye_ratio == pytest.approx(0.6)
        assert ratios.chin_ratio == pytest.approx(0.05 / 0.6)
        assert ratios.jaw_angle == pytest.approx(2 * math.degrees(math.atan(3.0)))
        assert ratios.wrinkle_score == 0.0

    def test_wrinkle_score_capped_at_one(self, make_landmarks):
        points = {10: (0.5, 0.45), 152: (0.5, 0.5), 338: (0.5, 0.95)}
        ratios = GeometryCalculator.extract_child_ratios(make_landmarks(points))
        assert ratios.wrinkle_score == 1.0

    def test_degenerate_face(self, make_landmarks):
        ratios = GeometryCalculator.extract_child_ratios(make_landmarks({}))
        assert ratios.eye_ratio == 0.0
        assert ratios.chin_ratio == 0.0
        assert ratios.jaw_angle == 180.0
        assert ratios.wrinkle_score == 0.0
        assert ratios.face_height_ratio == 0.0


class TestAdultRatios:
    """Tests for GeometryCalculator.extract_adult_ratios."""

    def test_adult_face(self, adult_landmarks):
        ratios = GeometryCalculator.extract_adult_ratios(adult_landmarks)
        assert ratios.face_height_ratio == pytest.approx(1.5)
        assert ratios.eye_distance_ratio == pytest.approx(0.25)
        assert ratios.forehead_ratio == pytest.approx(0.08 / 0.6)
        assert ratios.jaw_ratio == pytest.approx(0.75)
        assert ratios.nose_ratio == pytest.approx(0.25)
        assert ratios.eye_openness_ratio == pytest.approx(0.2)
        assert ratios.lip_ratio == pytest.approx(0.02 / 0.15)
        assert ratios.brow_ratio == pytest.approx(0.5)

    def test_degenerate_face_all_zero(self, make_landmarks):
        ratios = GeometryCalculator.extract_adult_ratios(make_landmarks({}))
        assert all(value == 0.0 for value in ratios.to_dict().values())

    def test_ratios_non_negative(self, adult_landmarks):
        mirrored = [Landmark(x=1 - lm.x, y=1 - lm.y) for lm in adult_landmarks]
        ratios = GeometryCalculator.extract_adult_ratios(mirrored)
        assert all(value >= 0 for value in ratios.to_dict().values())
