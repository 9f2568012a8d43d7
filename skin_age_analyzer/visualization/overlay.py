"""피부 지표 오버레이 렌더링 (OpenCV)"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import cv2
import numpy as np

from ..config.constants import ANNOTATION_POINTS, REQUIRED_LANDMARK_COUNT, RIGHT_FACE_CONTOUR
from ..models import FrameResult, Landmark

# 패널 라벨 (지표 이름, 표시 문구)
METRIC_LABELS: Tuple[Tuple[str, str], ...] = (
    ('wrinkles', 'Fine lines & wrinkles'),
    ('texture', 'Texture & elasticity'),
    ('volume', 'Volume & sagging'),
    ('eye_aging', 'Aging around the eyes'),
    ('skin_tone', 'Skin tone & pigmentation'),
)

SEARCHING_TEXT = 'Searching for a face...'
HINT_TEXT = 'Center your face in the frame and make sure there is enough light.'
DISCLAIMER_TEXT = 'Aesthetic analysis - non-medical'


@dataclass
class OverlayStyle:
    """오버레이 스타일 설정 (BGR)"""

    mesh_color: Tuple[int, int, int] = (255, 255, 255)
    mesh_alpha: float = 0.3
    point_color: Tuple[int, int, int] = (0, 165, 255)  # 주황색
    point_outline_color: Tuple[int, int, int] = (255, 255, 255)
    point_radius: int = 5
    text_color: Tuple[int, int, int] = (255, 255, 255)
    panel_color: Tuple[int, int, int] = (0, 0, 0)
    panel_alpha: float = 0.4
    font_scale: float = 0.6


class MetricsOverlay:
    """
    프레임 위에 분석 결과를 그리는 렌더러

    - 얼굴 오른쪽 절반 윤곽선 + 지표별 주석 포인트
    - 우측 상단 지표 패널, 하단 추정 나이
    - 얼굴 미검출 시 검색 중 표시 (+ 일정 시간 후 안내 문구)
    """

    def __init__(self, style: OverlayStyle = None):
        self.style = style or OverlayStyle()

    @staticmethod
    def _to_pixels(landmarks: Sequence[Landmark], indices: Sequence[int], width: int, height: int) -> np.ndarray:
        return np.array(
            [[int(landmarks[i].x * width), int(landmarks[i].y * height)] for i in indices],
            dtype=np.int32,
        )

    def _blend(self, image: np.ndarray, layer: np.ndarray, alpha: float) -> np.ndarray:
        return cv2.addWeighted(layer, alpha, image, 1 - alpha, 0)

    def draw_mesh(self, image: np.ndarray, landmarks: Sequence[Landmark]) -> np.ndarray:
        """얼굴 오른쪽 절반 윤곽 + 주석 포인트"""
        if len(landmarks) < REQUIRED_LANDMARK_COUNT:
            return image

        height, width = image.shape[:2]
        style = self.style

        layer = image.copy()
        contour = self._to_pixels(landmarks, RIGHT_FACE_CONTOUR, width, height)
        cv2.polylines(layer, [contour], False, style.mesh_color, 1, cv2.LINE_AA)
        image = self._blend(image, layer, style.mesh_alpha)

        # 코끝 기준 오른쪽 절반에만 포인트 표시
        face_center_x = landmarks[4].x * width
        for index, _label, _metric in ANNOTATION_POINTS.values():
            x = int(landmarks[index].x * width)
            y = int(landmarks[index].y * height)
            if x >= face_center_x - 30:
                cv2.circle(image, (x, y), style.point_radius, style.point_color, -1, cv2.LINE_AA)
                cv2.circle(image, (x, y), style.point_radius, style.point_outline_color, 1, cv2.LINE_AA)

        return image

    def _panel_lines(self, result: FrameResult) -> List[str]:
        metrics = result.metrics
        return [f"{label}: {getattr(metrics, name)}%" for name, label in METRIC_LABELS]

    def draw_metrics(self, image: np.ndarray, result: FrameResult) -> np.ndarray:
        """우측 상단 지표 패널 + 하단 추정 나이"""
        height, width = image.shape[:2]
        style = self.style
        font = cv2.FONT_HERSHEY_SIMPLEX

        lines = self._panel_lines(result)
        line_height = int(32 * style.font_scale / 0.6)
        text_width = max(cv2.getTextSize(line, font, style.font_scale, 1)[0][0] for line in lines)
        x0 = max(0, width - text_width - 40)
        y0 = 40

        layer = image.copy()
        cv2.rectangle(layer, (x0 - 10, y0 - 25), (width - 20, y0 + line_height * len(lines) - 15),
                      style.panel_color, -1)
        image = self._blend(image, layer, style.panel_alpha)

        for i, line in enumerate(lines):
            y = y0 + i * line_height
            cv2.circle(image, (x0, y - 5), 4, style.point_color, -1, cv2.LINE_AA)
            cv2.putText(image, line, (x0 + 12, y), font, style.font_scale, style.text_color, 1, cv2.LINE_AA)

        age_text = f"Estimated skin age: {result.metrics.estimated_age} years"
        (age_w, _), _ = cv2.getTextSize(age_text, font, style.font_scale * 1.8, 2)
        cv2.putText(image, age_text, ((width - age_w) // 2, height - 60), font,
                    style.font_scale * 1.8, style.text_color, 2, cv2.LINE_AA)

        (disc_w, _), _ = cv2.getTextSize(DISCLAIMER_TEXT, font, style.font_scale * 0.8, 1)
        cv2.putText(image, DISCLAIMER_TEXT, ((width - disc_w) // 2, height - 30), font,
                    style.font_scale * 0.8, style.text_color, 1, cv2.LINE_AA)
        return image

    def draw_searching(self, image: np.ndarray, show_hint: bool) -> np.ndarray:
        """얼굴 검색 중 표시"""
        height, width = image.shape[:2]
        style = self.style
        font = cv2.FONT_HERSHEY_SIMPLEX

        center = (width // 2, height // 2)
        cv2.circle(image, center, 48, style.point_color, 2, cv2.LINE_AA)

        (text_w, _), _ = cv2.getTextSize(SEARCHING_TEXT, font, style.font_scale * 1.2, 2)
        cv2.putText(image, SEARCHING_TEXT, ((width - text_w) // 2, center[1] + 90), font,
                    style.font_scale * 1.2, style.text_color, 2, cv2.LINE_AA)

        if show_hint:
            (hint_w, _), _ = cv2.getTextSize(HINT_TEXT, font, style.font_scale * 0.8, 1)
            cv2.putText(image, HINT_TEXT, (max(0, (width - hint_w) // 2), center[1] + 125), font,
                        style.font_scale * 0.8, style.text_color, 1, cv2.LINE_AA)
        return image

    def draw(self, image: np.ndarray, result: FrameResult) -> np.ndarray:
        """
        프레임 결과를 이미지에 렌더링

        Args:
            image: BGR 이미지 (원본은 수정하지 않음)
            result: FrameProcessor 처리 결과

        Returns:
            주석이 그려진 BGR 이미지 복사본
        """
        canvas = image.copy()

        if not result.face_detected:
            return self.draw_searching(canvas, result.no_face_hint)

        if result.landmarks:
            canvas = self.draw_mesh(canvas, result.landmarks)
        if result.metrics is not None:
            canvas = self.draw_metrics(canvas, result)
        return canvas
