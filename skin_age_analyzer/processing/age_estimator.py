"""나이 및 피부 세부 지표 추정 (아이 게이트 → 아이/성인 공식)

기하 비율 기반의 휴리스틱이며 의학적 추정이 아니다.
같은 비율에는 항상 같은 결과를 낸다 (난수 없음).
"""

import math
from typing import Sequence

from ..config.constants import (
    ADULT_AGE,
    ADULT_METRIC_BOUNDS,
    CHILD_AGE,
    CHILD_METRIC_BOUNDS,
    SIGNATURE_WEIGHTS,
)
from ..models import (
    AdultGeometryRatios,
    Landmark,
    MetricsAnalysis,
    SkinMetrics,
)
from ..utils import get_logger
from .child_gate import calculate_child_score, is_child
from .geometry import GeometryCalculator, clamp, round_half_up

logger = get_logger(__name__)


def _bounded(name: str, value: float, bounds) -> int:
    lower, upper = bounds[name]
    return int(clamp(round_half_up(value), lower, upper))


def calculate_child_age(face_height_ratio: float) -> int:
    """얼굴 세로/가로 비율만으로 아이 나이 추정 (3 ~ 9세)"""
    age = CHILD_AGE['base'] + face_height_ratio * CHILD_AGE['height_factor']
    return int(clamp(round_half_up(age), CHILD_AGE['min'], CHILD_AGE['max']))


def estimate_child_metrics(face_height_ratio: float) -> SkinMetrics:
    """
    아이 분기 피부 지표

    세부 지표는 3~14세 구간의 선형 보간 (노화 신호가 낮게 나옴).
    """
    age = calculate_child_age(face_height_ratio)
    t = (age - CHILD_AGE['range_start']) / CHILD_AGE['range_span']

    return SkinMetrics(
        wrinkles=_bounded('wrinkles', 5 + t * 12, CHILD_METRIC_BOUNDS),
        texture=max(CHILD_METRIC_BOUNDS['texture'][0], round_half_up(98 - t * 10)),
        volume=max(CHILD_METRIC_BOUNDS['volume'][0], round_half_up(95 - t * 5)),
        eye_aging=_bounded('eye_aging', 3 + t * 10, CHILD_METRIC_BOUNDS),
        skin_tone=_bounded('skin_tone', 4 + t * 6, CHILD_METRIC_BOUNDS),
        estimated_age=age,
    )


def face_signature(ratios: AdultGeometryRatios) -> float:
    """비율 가중합 (얼굴마다 고정된 값)"""
    return sum(abs(getattr(ratios, name) * weight) for name, weight in SIGNATURE_WEIGHTS)


def estimate_adult_metrics(ratios: AdultGeometryRatios) -> SkinMetrics:
    """
    성인 분기 나이 및 피부 지표 (20 ~ 55세)

    Args:
        ratios: 성인 나이 추정용 기하 비율

    Returns:
        SkinMetrics
    """
    # 극단적인 비율로 합이 overflow 되면 sin 이 정의되지 않으므로 0 으로 취급
    signature = face_signature(ratios)
    signature_offset = math.sin(signature if math.isfinite(signature) else 0.0) * 0.5 + 0.5  # 0 ~ 1
    base = ADULT_AGE['min'] + signature_offset * ADULT_AGE['span']

    youth_score = (
        ratios.eye_openness_ratio * 10
        + ratios.lip_ratio * 5
        - ratios.forehead_ratio * 3
    )
    if math.isnan(youth_score):
        youth_score = ADULT_AGE['youth_pivot']
    limit = ADULT_AGE['adjustment_limit']
    adjustment = clamp((youth_score - ADULT_AGE['youth_pivot']) * ADULT_AGE['youth_gain'], -limit, limit)

    age = int(clamp(round_half_up(base + adjustment), ADULT_AGE['min'], ADULT_AGE['max']))
    age_percent = (age - ADULT_AGE['min']) / ADULT_AGE['span']

    return SkinMetrics(
        wrinkles=_bounded('wrinkles', 5 + age_percent * 60 + signature_offset * 10, ADULT_METRIC_BOUNDS),
        texture=_bounded('texture', 95 - age_percent * 25 - signature_offset * 10, ADULT_METRIC_BOUNDS),
        volume=_bounded('volume', 95 - age_percent * 30 - signature_offset * 10, ADULT_METRIC_BOUNDS),
        eye_aging=_bounded('eye_aging', 3 + age_percent * 45 + signature_offset * 12, ADULT_METRIC_BOUNDS),
        skin_tone=_bounded('skin_tone', 5 + age_percent * 15 + signature_offset * 5, ADULT_METRIC_BOUNDS),
        estimated_age=age,
    )


def analyze_landmarks(landmarks: Sequence[Landmark]) -> MetricsAnalysis:
    """
    아이 게이트 후 아이/성인 공식으로 피부 지표 계산

    Args:
        landmarks: MediaPipe FaceMesh 랜드마크 (정규화 좌표)

    Returns:
        MetricsAnalysis: 게이트 점수, 비율, 지표
    """
    child_ratios = GeometryCalculator.extract_child_ratios(landmarks)
    child_score = calculate_child_score(child_ratios)

    if is_child(child_score):
        metrics = estimate_child_metrics(child_ratios.face_height_ratio)
        logger.debug(f"Child branch (score={child_score:.2f}): age={metrics.estimated_age}")
        return MetricsAnalysis(
            child_ratios=child_ratios,
            child_score=child_score,
            is_child=True,
            metrics=metrics,
        )

    adult_ratios = GeometryCalculator.extract_adult_ratios(landmarks)
    metrics = estimate_adult_metrics(adult_ratios)
    logger.debug(f"Adult branch (score={child_score:.2f}): age={metrics.estimated_age}")
    return MetricsAnalysis(
        child_ratios=child_ratios,
        child_score=child_score,
        is_child=False,
        metrics=metrics,
        adult_ratios=adult_ratios,
    )


def calculate_metrics(landmarks: Sequence[Landmark]) -> SkinMetrics:
    """랜드마크 세트 하나 → 원시(안정화 전) 피부 지표"""
    return analyze_landmarks(landmarks).metrics
