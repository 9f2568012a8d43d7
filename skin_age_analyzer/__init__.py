"""
Skin Age Analyzer
MediaPipe FaceMesh 기하 비율 기반 피부 나이 추정 (비의료용)
"""

__version__ = "0.1.0"

from .models import FrameResult, Landmark, SkinMetrics
from .config.settings import DetectionConfig, ScannerConfig, StabilizerConfig
from .processing import FrameProcessor, MetricsStabilizer, analyze_landmarks, calculate_metrics

__all__ = [
    'FrameResult',
    'Landmark',
    'SkinMetrics',
    'DetectionConfig',
    'ScannerConfig',
    'StabilizerConfig',
    'FrameProcessor',
    'MetricsStabilizer',
    'analyze_landmarks',
    'calculate_metrics',
]
