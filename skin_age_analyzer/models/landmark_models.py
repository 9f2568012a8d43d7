"""랜드마크 / 검출 결과 데이터 모델"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Landmark:
    """단일 랜드마크 포인트"""

    x: float  # 정규화 x 좌표 (0-1)
    y: float  # 정규화 y 좌표 (0-1)
    z: float = 0.0  # 깊이 정보 (계산에는 미사용)
    visibility: float = 1.0

    # 픽셀 좌표 (검출기에서 계산 후 저장)
    pixel_x: Optional[int] = None
    pixel_y: Optional[int] = None


@dataclass
class DetectionResult:
    """얼굴 검출 결과"""

    success: bool
    landmarks: List[Landmark] = field(default_factory=list)
    confidence: float = 0.0
    bounding_box: Tuple[int, int, int, int] = (0, 0, 0, 0)  # (x, y, w, h)
    processing_time: float = 0.0  # ms
