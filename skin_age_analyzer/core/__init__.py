"""
Landmark source (MediaPipe FaceMesh) package.
"""
# FaceDetector 는 mediapipe 가 필요하므로 lazy import
# (from skin_age_analyzer.core.face_detector import FaceDetector)
from .landmark_extractor import LandmarkExtractor

__all__ = ['LandmarkExtractor']
