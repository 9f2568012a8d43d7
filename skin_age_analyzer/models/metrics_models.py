"""피부 지표 / 기하 비율 / lock 상태 데이터 모델"""

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

from .landmark_models import Landmark


@dataclass(frozen=True)
class ChildGeometryRatios:
    """아이 판별 게이트용 기하 비율"""

    eye_ratio: float
    chin_ratio: float
    jaw_angle: float  # 도 단위 (0 ~ 180)
    wrinkle_score: float  # 0 ~ 1
    face_height_ratio: float

    def to_dict(self) -> Dict[str, Any]:
        return {k: round(v, 4) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class AdultGeometryRatios:
    """성인 나이 추정용 기하 비율 (모두 0 이상)"""

    face_height_ratio: float
    eye_distance_ratio: float
    forehead_ratio: float
    jaw_ratio: float
    nose_ratio: float
    eye_openness_ratio: float
    lip_ratio: float
    brow_ratio: float

    def to_dict(self) -> Dict[str, Any]:
        return {k: round(v, 4) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class SkinMetrics:
    """피부 지표 (퍼센트 성격의 정수 점수 + 추정 나이)"""

    wrinkles: int
    texture: int
    volume: int
    eye_aging: int
    skin_tone: int
    estimated_age: int

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return asdict(self)


@dataclass(frozen=True)
class Unlocked:
    """누적 중 (lock 전) 상태"""

    mismatch_count: int = 0


@dataclass(frozen=True)
class Locked:
    """안정화 값이 고정된 상태"""

    value: SkinMetrics
    mismatch_count: int = 0


LockState = Union[Unlocked, Locked]


@dataclass
class MetricsAnalysis:
    """단일 랜드마크 세트의 분석 상세 (디버그/로그용)"""

    child_ratios: ChildGeometryRatios
    child_score: float
    is_child: bool
    metrics: SkinMetrics
    adult_ratios: Optional[AdultGeometryRatios] = None  # 성인 분기에서만 계산

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'child_ratios': self.child_ratios.to_dict(),
            'child_score': round(self.child_score, 3),
            'is_child': self.is_child,
            'metrics': self.metrics.to_dict(),
        }
        if self.adult_ratios is not None:
            result['adult_ratios'] = self.adult_ratios.to_dict()
        return result


@dataclass
class FrameResult:
    """프레임 처리 결과"""

    face_detected: bool
    raw_metrics: Optional[SkinMetrics] = None  # 이번 프레임의 추정값
    metrics: Optional[SkinMetrics] = None  # 안정화된 (화면 표시용) 값
    analysis: Optional[MetricsAnalysis] = None
    locked: bool = False
    no_face_hint: bool = False
    landmarks: List[Landmark] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """메타데이터 초기화"""
        if 'timestamp' not in self.metadata:
            self.metadata['timestamp'] = time.time()
