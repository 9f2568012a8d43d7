"""Visualization (metrics sink) components"""

from .overlay import MetricsOverlay, OverlayStyle

__all__ = ['MetricsOverlay', 'OverlayStyle']
