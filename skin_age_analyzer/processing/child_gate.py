"""아이 판별 게이트 - 기하 비율 기반, ML 없음.

성인 공식을 아이 얼굴에 적용해 나이를 과대 추정하지 않도록
네 가지 임계값 테스트의 가중합으로 child_score 를 계산한다.
"""

from ..config.constants import CHILD_GATE
from ..models import ChildGeometryRatios


def calculate_child_score(ratios: ChildGeometryRatios) -> float:
    """
    기하 비율로부터 child_score 계산

    Args:
        ratios: 아이 판별용 기하 비율

    Returns:
        float: 0 ~ 1 사이 점수
    """
    score = 0.0

    if ratios.eye_ratio > CHILD_GATE['eye_ratio_threshold']:
        score += CHILD_GATE['eye_ratio_weight']
    if ratios.chin_ratio < CHILD_GATE['chin_ratio_threshold']:
        score += CHILD_GATE['chin_ratio_weight']
    if ratios.jaw_angle < CHILD_GATE['jaw_angle_threshold_deg']:
        score += CHILD_GATE['jaw_angle_weight']
    if ratios.wrinkle_score < CHILD_GATE['wrinkle_score_threshold']:
        score += CHILD_GATE['wrinkle_score_weight']

    return min(score, 1.0)


def is_child(child_score: float) -> bool:
    """child_score 가 게이트 임계값을 넘으면 아이 (0.6 은 성인)"""
    return child_score > CHILD_GATE['child_threshold']
