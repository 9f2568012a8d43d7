"""Configuration layer"""

from .settings import DetectionConfig, StabilizerConfig, ScannerConfig

__all__ = [
    'DetectionConfig',
    'StabilizerConfig',
    'ScannerConfig',
]
