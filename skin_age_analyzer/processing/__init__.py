"""Processing layer components"""

from .geometry import GeometryCalculator, angle_between_points, clamp, round_half_up, safe_div
from .child_gate import calculate_child_score, is_child
from .age_estimator import (
    analyze_landmarks,
    calculate_child_age,
    calculate_metrics,
    estimate_adult_metrics,
    estimate_child_metrics,
)
from .stabilizer import MetricsStabilizer
from .frame_processor import FrameProcessor

__all__ = [
    'GeometryCalculator',
    'angle_between_points',
    'clamp',
    'round_half_up',
    'safe_div',
    'calculate_child_score',
    'is_child',
    'analyze_landmarks',
    'calculate_child_age',
    'calculate_metrics',
    'estimate_adult_metrics',
    'estimate_child_metrics',
    'MetricsStabilizer',
    'FrameProcessor',
]
