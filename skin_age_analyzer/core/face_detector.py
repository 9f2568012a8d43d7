"""MediaPipe FaceMesh 랜드마크 소스 (한 명만 추적)"""

import time
from dataclasses import asdict
from typing import Any, Dict, Optional

import cv2
import mediapipe as mp
import numpy as np

from ..config.settings import DetectionConfig
from ..models import DetectionResult
from ..utils import get_logger
from ..utils.exceptions import ConfigurationError, DetectionError, LandmarkExtractionError
from ..utils.validators import validate_image
from .landmark_extractor import LandmarkExtractor

logger = get_logger(__name__)


class FaceDetector:
    """
    BGR 프레임 → 정규화 랜드마크 세트

    얼굴이 없으면 success=False 인 DetectionResult 를 돌려주고
    호출 측(FrameProcessor)은 해당 프레임을 안정화기에 넣지 않는다.

    Usage:
        with FaceDetector() as detector:
            result = detector.detect(frame)
    """

    def __init__(self, config: Optional[DetectionConfig] = None):
        """
        Args:
            config: 검출 설정 (None 이면 config.yaml 의 mediapipe.detection)

        Raises:
            ConfigurationError: FaceMesh 그래프 생성 실패
        """
        self.config = config or DetectionConfig.from_config()
        self.extractor = LandmarkExtractor()

        options = asdict(self.config)
        try:
            self._face_mesh = mp.solutions.face_mesh.FaceMesh(**options)
        except Exception as e:
            raise ConfigurationError(f"Could not create MediaPipe FaceMesh ({options}): {e}")
        logger.info(f"FaceMesh ready (max_num_faces={self.config.max_num_faces}, "
                    f"refine_landmarks={self.config.refine_landmarks})")

    def __enter__(self) -> 'FaceDetector':
        return self

    def __exit__(self, *exc_info):
        self.release()

    def detect(self, image: np.ndarray) -> DetectionResult:
        """
        프레임 하나에서 첫 번째 얼굴의 랜드마크 검출

        Args:
            image: BGR 프레임 (H, W, 3) 또는 그레이스케일

        Returns:
            DetectionResult: processing_time 은 ms 단위
        """
        validate_image(image)
        if self._face_mesh is None:
            raise DetectionError("FaceDetector already released")

        # MediaPipe 는 RGB 입력
        if image.ndim == 2:
            rgb = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
        else:
            rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

        started = time.perf_counter()
        output = self._face_mesh.process(rgb)
        elapsed_ms = (time.perf_counter() - started) * 1000

        height, width = image.shape[:2]
        try:
            landmarks = self.extractor.extract_landmarks(output, width, height)
        except LandmarkExtractionError:
            return DetectionResult(success=False, processing_time=elapsed_ms)

        logger.debug(f"{len(landmarks)} landmarks in {elapsed_ms:.1f}ms")
        return DetectionResult(
            success=True,
            landmarks=landmarks,
            confidence=self.config.min_detection_confidence,  # FaceMesh 는 얼굴별 점수를 주지 않음
            bounding_box=self.extractor.get_bounding_box(landmarks),
            processing_time=elapsed_ms,
        )

    def get_model_info(self) -> Dict[str, Any]:
        """현재 FaceMesh 옵션"""
        return asdict(self.config)

    def release(self):
        """FaceMesh 그래프 종료 (여러 번 호출해도 안전)"""
        face_mesh, self._face_mesh = getattr(self, '_face_mesh', None), None
        if face_mesh is not None:
            face_mesh.close()
            logger.debug("FaceMesh closed")
