"""프레임 처리 파이프라인 (검출 → 지표 추정 → 안정화)"""

import time
from pathlib import Path
from typing import Callable, Generator, Optional, Sequence, Union

import cv2
import numpy as np

from ..config.settings import ScannerConfig, StabilizerConfig
from ..models import FrameResult, Landmark
from ..utils import get_logger
from ..utils.exceptions import InvalidImageError
from ..utils.validators import validate_image, validate_landmark_set
from ..visualization import MetricsOverlay
from .age_estimator import analyze_landmarks
from .stabilizer import MetricsStabilizer

logger = get_logger(__name__)


class FrameProcessor:
    """
    프레임 처리 파이프라인

    한 명의 피험자 스트림을 처리한다. 얼굴이 없는 프레임은 안정화 상태를
    건드리지 않으며, 얼굴 없는 상태가 no_face_hint_seconds 이상 이어지면
    결과에 안내 표시 플래그를 세운다.
    """

    def __init__(
        self,
        detector=None,
        stabilizer: Optional[MetricsStabilizer] = None,
        scanner_config: Optional[ScannerConfig] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        초기화

        Args:
            detector: detect(image) -> DetectionResult 를 제공하는 검출기
                      (None 이면 첫 프레임에서 FaceDetector 생성)
            stabilizer: MetricsStabilizer 인스턴스 (None 이면 config.yaml 설정으로 생성)
            scanner_config: 스캐너 설정 (None 이면 config.yaml 값 사용)
            clock: 안내 표시 타이머용 시계 (초 단위)
        """
        self._detector = detector
        self.stabilizer = stabilizer or MetricsStabilizer(StabilizerConfig.from_config())
        self.scanner_config = scanner_config or ScannerConfig.from_config()
        self.clock = clock
        self._no_face_since: Optional[float] = None

    @property
    def detector(self):
        if self._detector is None:
            # mediapipe 는 카메라 입력을 쓸 때만 필요
            from ..core.face_detector import FaceDetector
            self._detector = FaceDetector()
        return self._detector

    def process_landmarks(self, landmarks: Sequence[Landmark]) -> FrameResult:
        """
        랜드마크 세트 하나를 분석하고 안정화

        Args:
            landmarks: 정규화된 FaceMesh 랜드마크

        Returns:
            FrameResult: 원시/안정화 지표 포함

        Raises:
            InvalidLandmarkSetError: 랜드마크 수가 부족한 경우
        """
        validate_landmark_set(landmarks)
        self._no_face_since = None

        analysis = analyze_landmarks(landmarks)
        metrics = self.stabilizer.update(analysis.metrics)

        return FrameResult(
            face_detected=True,
            raw_metrics=analysis.metrics,
            metrics=metrics,
            analysis=analysis,
            locked=self.stabilizer.is_locked,
            landmarks=list(landmarks),
        )

    def _no_face_result(self) -> FrameResult:
        now = self.clock()
        if self._no_face_since is None:
            self._no_face_since = now
        elapsed = now - self._no_face_since
        return FrameResult(
            face_detected=False,
            locked=self.stabilizer.is_locked,
            no_face_hint=elapsed >= self.scanner_config.no_face_hint_seconds,
        )

    def process_frame(self, image: np.ndarray) -> FrameResult:
        """
        BGR 프레임 하나 처리

        Args:
            image: BGR 이미지

        Returns:
            FrameResult: 얼굴이 없으면 face_detected=False (지표 None)
        """
        validate_image(image)

        detection = self.detector.detect(image)
        if not detection.success:
            return self._no_face_result()

        result = self.process_landmarks(detection.landmarks)
        result.metadata['processing_time'] = detection.processing_time
        result.metadata['bounding_box'] = detection.bounding_box
        return result

    def process_image(self, image_path: Union[str, Path]) -> FrameResult:
        """
        단일 이미지 파일 처리

        Raises:
            InvalidImageError: 이미지 로드 실패
        """
        image = cv2.imread(str(image_path))
        if image is None:
            raise InvalidImageError(f"Failed to load image: {image_path}")

        result = self.process_frame(image)
        result.metadata['image_path'] = str(image_path)
        return result

    def process_video(
        self,
        video_path: Union[str, Path],
        overlay=None,
        display: bool = False,
        max_frames: Optional[int] = None
    ) -> Generator[FrameResult, None, None]:
        """
        비디오 파일 처리 (제너레이터)

        Args:
            video_path: 비디오 파일 경로
            overlay: MetricsOverlay (display=True 일 때 사용)
            display: 결과 화면 표시 여부
            max_frames: 최대 처리 프레임 수 (None 이면 끝까지)

        Yields:
            FrameResult: 각 프레임의 처리 결과
        """
        cap = cv2.VideoCapture(str(video_path))
        if not cap.isOpened():
            raise InvalidImageError(f"Failed to open video: {video_path}")

        logger.info(f"Processing video: {video_path}")
        try:
            yield from self._run_capture(cap, {'video_path': str(video_path)}, overlay, display, max_frames)
        finally:
            cap.release()
            if display:
                cv2.destroyAllWindows()

    def process_realtime(
        self,
        camera_id: Optional[int] = None,
        overlay=None,
        display: bool = True,
        max_frames: Optional[int] = None
    ) -> Generator[FrameResult, None, None]:
        """
        실시간 카메라 처리

        Args:
            camera_id: 카메라 디바이스 ID (None 이면 설정값)
            overlay: MetricsOverlay (display=True 일 때 사용)
            display: 결과 화면 표시 여부 ('q' 로 종료)
            max_frames: 최대 처리 프레임 수 (None 이면 무한)

        Yields:
            FrameResult: 각 프레임의 처리 결과
        """
        if camera_id is None:
            camera_id = self.scanner_config.camera_id

        cap = cv2.VideoCapture(camera_id)
        if not cap.isOpened():
            raise InvalidImageError(f"Failed to open camera {camera_id}")

        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.scanner_config.frame_width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.scanner_config.frame_height)
        logger.info(f"Camera {camera_id} opened")

        try:
            yield from self._run_capture(cap, {'camera_id': camera_id}, overlay, display, max_frames)
        finally:
            cap.release()
            if display:
                cv2.destroyAllWindows()
            logger.info(f"Camera {camera_id} released")

    def _run_capture(self, cap, metadata, overlay, display, max_frames):
        if display and overlay is None:
            overlay = MetricsOverlay()

        frame_count = 0
        while cap.isOpened():
            if max_frames and frame_count >= max_frames:
                break

            ret, frame = cap.read()
            if not ret:
                break

            result = self.process_frame(frame)
            result.metadata.update(metadata)
            result.metadata['frame_number'] = frame_count

            if display:
                cv2.imshow(self.scanner_config.window_name, overlay.draw(frame, result))
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break

            yield result
            frame_count += 1

        logger.info(f"Processed {frame_count} frames")

    def reset(self):
        """안정화 상태와 안내 타이머 초기화 (새 세션)"""
        self.stabilizer.reset()
        self._no_face_since = None

    def release(self):
        """내부에서 만든 검출기 리소스 해제"""
        release = getattr(self._detector, 'release', None)
        if callable(release):
            release()
