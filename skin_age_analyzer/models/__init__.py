"""데이터 모델"""

from .landmark_models import Landmark, DetectionResult
from .metrics_models import (
    ChildGeometryRatios,
    AdultGeometryRatios,
    SkinMetrics,
    Unlocked,
    Locked,
    LockState,
    MetricsAnalysis,
    FrameResult,
)

__all__ = [
    'Landmark',
    'DetectionResult',
    'ChildGeometryRatios',
    'AdultGeometryRatios',
    'SkinMetrics',
    'Unlocked',
    'Locked',
    'LockState',
    'MetricsAnalysis',
    'FrameResult',
]
