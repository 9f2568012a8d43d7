"""Shared fixtures for skin_age_analyzer tests.

All landmark sets are synthetic, built from a handful of named points.
No camera or MediaPipe model needed.
"""

from typing import Dict, List, Tuple

import numpy as np
import pytest

from skin_age_analyzer.models import Landmark, SkinMetrics

FACE_MESH_SIZE = 478

# 성인: 눈 간격 좁음, 턱 높이 큼, 이마 라인 굴곡 있음 → child_score 0.2
ADULT_FACE: Dict[int, Tuple[float, float]] = {
    10: (0.50, 0.20),   # forehead
    151: (0.50, 0.28),  # forehead reference
    152: (0.50, 0.80),  # chin
    172: (0.35, 0.65),  # jaw left
    397: (0.65, 0.65),  # jaw right
    33: (0.45, 0.40),   # eye left
    263: (0.55, 0.40),  # eye right
    159: (0.47, 0.39),  # eye top
    145: (0.47, 0.41),  # eye bottom
    234: (0.30, 0.45),  # face left
    454: (0.70, 0.45),  # face right
    4: (0.50, 0.55),    # nose tip
    6: (0.50, 0.40),    # nose bridge
    13: (0.50, 0.64),   # lip upper
    14: (0.50, 0.66),   # lip lower
    66: (0.47, 0.35),   # brow
    338: (0.55, 0.21),
    297: (0.60, 0.23),
    332: (0.63, 0.26),
    284: (0.66, 0.30),
    251: (0.68, 0.35),
}

# 아이: 눈 간격 넓음, 턱이 짧음, 이마 라인 평평 → child_score 0.8
CHILD_FACE: Dict[int, Tuple[float, float]] = {
    **ADULT_FACE,
    33: (0.38, 0.40),
    263: (0.62, 0.40),
    172: (0.35, 0.75),
    397: (0.65, 0.75),
    338: (0.55, 0.20),
    297: (0.60, 0.20),
    332: (0.63, 0.20),
    284: (0.66, 0.20),
    251: (0.68, 0.20),
}


def build_landmarks(points: Dict[int, Tuple[float, float]], size: int = FACE_MESH_SIZE) -> List[Landmark]:
    """지정하지 않은 인덱스는 얼굴 중앙 (0.5, 0.5) 으로 채운 랜드마크 세트"""
    landmarks = [Landmark(x=0.5, y=0.5) for _ in range(size)]
    for index, (x, y) in points.items():
        landmarks[index] = Landmark(x=x, y=y)
    return landmarks


@pytest.fixture
def adult_landmarks():
    return build_landmarks(ADULT_FACE)


@pytest.fixture
def child_landmarks():
    return build_landmarks(CHILD_FACE)


@pytest.fixture
def make_landmarks():
    """Factory fixture for custom landmark sets."""
    return build_landmarks


@pytest.fixture
def make_metrics():
    """Factory fixture for SkinMetrics with uniform sub-metric values."""
    def _make(age: int, value: int = 50, **overrides) -> SkinMetrics:
        fields = dict(
            wrinkles=value,
            texture=value,
            volume=value,
            eye_aging=value,
            skin_tone=value,
            estimated_age=age,
        )
        fields.update(overrides)
        return SkinMetrics(**fields)
    return _make


@pytest.fixture
def blank_frame():
    return np.zeros((480, 640, 3), dtype=np.uint8)
