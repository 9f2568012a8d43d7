"""얼굴 기하 비율 계산 유틸리티

랜드마크 세트 하나에서 해상도와 무관한 비율 두 묶음을 계산한다.

- ChildGeometryRatios: 아이/성인 게이트용
- AdultGeometryRatios: 성인 나이 추정용

분모가 0 이 되는 퇴화된 형상은 예외 대신 0 비율(각도는 180도)로 처리한다.
"""

import math
from typing import Sequence

from ..config.constants import FACE_LANDMARKS, FOREHEAD_RING
from ..models import AdultGeometryRatios, ChildGeometryRatios, Landmark


def safe_div(a: float, b: float) -> float:
    """b 가 0 이면 0, 아니면 a / b (결과는 항상 유한값)"""
    if b == 0:
        return 0.0
    result = a / b
    return result if math.isfinite(result) else 0.0


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def round_half_up(value: float) -> int:
    """.5 는 항상 올림 (파이썬 기본 round 의 banker's rounding 과 다름)"""
    return int(math.floor(value + 0.5))


def angle_between_points(apex: Landmark, p1: Landmark, p2: Landmark) -> float:
    """
    apex 에서 p1, p2 로 향하는 두 벡터 사이의 각도

    Args:
        apex: 꼭짓점 랜드마크
        p1, p2: 양 끝 랜드마크

    Returns:
        각도 (도 단위, 0 ~ 180). 길이 0 인 벡터가 있으면 180
    """
    ax = p1.x - apex.x
    ay = p1.y - apex.y
    bx = p2.x - apex.x
    by = p2.y - apex.y

    mag_a = math.hypot(ax, ay)
    mag_b = math.hypot(bx, by)
    if mag_a == 0 or mag_b == 0:
        return 180.0

    cos = clamp((ax * bx + ay * by) / (mag_a * mag_b), -1.0, 1.0)
    return math.degrees(math.acos(cos))


class GeometryCalculator:
    """얼굴 기하 비율 계산"""

    @staticmethod
    def _dx(landmarks: Sequence[Landmark], a: str, b: str) -> float:
        return abs(landmarks[FACE_LANDMARKS[a]].x - landmarks[FACE_LANDMARKS[b]].x)

    @staticmethod
    def _dy(landmarks: Sequence[Landmark], a: str, b: str) -> float:
        return abs(landmarks[FACE_LANDMARKS[a]].y - landmarks[FACE_LANDMARKS[b]].y)

    @staticmethod
    def extract_child_ratios(landmarks: Sequence[Landmark]) -> ChildGeometryRatios:
        """
        아이 판별용 비율 계산

        Args:
            landmarks: MediaPipe FaceMesh 랜드마크 (정규화 좌표)

        Returns:
            ChildGeometryRatios
        """
        calc = GeometryCalculator
        face_width = calc._dx(landmarks, 'face_left', 'face_right')
        face_height = calc._dy(landmarks, 'forehead', 'chin')

        eye_ratio = safe_div(calc._dx(landmarks, 'eye_left', 'eye_right'), face_width)

        # 턱 끝과 양쪽 턱선 중점 사이의 높이
        chin = landmarks[FACE_LANDMARKS['chin']]
        jaw_left = landmarks[FACE_LANDMARKS['jaw_left']]
        jaw_right = landmarks[FACE_LANDMARKS['jaw_right']]
        jaw_mid_y = (jaw_left.y + jaw_right.y) / 2
        chin_ratio = safe_div(abs(chin.y - jaw_mid_y), face_height)

        jaw_angle = angle_between_points(chin, jaw_left, jaw_right)

        # 이마 라인의 세로 편차 (주름/굴곡 proxy)
        forehead_ys = [landmarks[i].y for i in FOREHEAD_RING]
        if face_height > 0:
            wrinkle_score = min(1.0, safe_div(max(forehead_ys) - min(forehead_ys), face_height))
        else:
            wrinkle_score = 0.0

        return ChildGeometryRatios(
            eye_ratio=eye_ratio,
            chin_ratio=chin_ratio,
            jaw_angle=jaw_angle,
            wrinkle_score=wrinkle_score,
            face_height_ratio=safe_div(face_height, face_width),
        )

    @staticmethod
    def extract_adult_ratios(landmarks: Sequence[Landmark]) -> AdultGeometryRatios:
        """
        성인 나이 추정용 비율 계산

        Args:
            landmarks: MediaPipe FaceMesh 랜드마크 (정규화 좌표)

        Returns:
            AdultGeometryRatios
        """
        calc = GeometryCalculator
        forehead_height = calc._dy(landmarks, 'forehead', 'forehead_reference')
        eye_openness = calc._dy(landmarks, 'eye_top', 'eye_bottom')
        cheek_width = calc._dx(landmarks, 'face_left', 'face_right')
        jaw_width = calc._dx(landmarks, 'jaw_left', 'jaw_right')
        nose_length = calc._dy(landmarks, 'nose_tip', 'nose_bridge')
        face_height = calc._dy(landmarks, 'forehead', 'chin')
        eye_distance = calc._dx(landmarks, 'eye_left', 'eye_right')
        lip_thickness = calc._dy(landmarks, 'lip_upper', 'lip_lower')
        brow_height = calc._dy(landmarks, 'brow', 'eye_top')
        face_width = cheek_width

        return AdultGeometryRatios(
            face_height_ratio=safe_div(face_height, face_width),
            eye_distance_ratio=safe_div(eye_distance, face_width),
            forehead_ratio=safe_div(forehead_height, face_height),
            jaw_ratio=safe_div(jaw_width, cheek_width),
            nose_ratio=safe_div(nose_length, face_height),
            eye_openness_ratio=safe_div(eye_openness, eye_distance),
            lip_ratio=safe_div(lip_thickness, nose_length),
            brow_ratio=safe_div(brow_height, forehead_height),
        )
