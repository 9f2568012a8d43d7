"""입력 검증 (파이프라인 경계에서만 사용, 수치 계산부는 예외를 던지지 않음)"""

from typing import Optional, Sequence

import numpy as np

from ..config.constants import REQUIRED_LANDMARK_COUNT
from .exceptions import InvalidImageError, InvalidLandmarkSetError


def validate_image(image: Optional[np.ndarray]) -> None:
    """
    검출기에 넣을 프레임 검증 (H x W 또는 H x W x C, C ∈ {1, 3, 4})

    Raises:
        InvalidImageError: 프레임이 없거나 형태가 맞지 않는 경우
    """
    if not isinstance(image, np.ndarray):
        raise InvalidImageError(f"Frame must be numpy.ndarray, got {type(image).__name__}")

    if image.size == 0:
        raise InvalidImageError("Frame is empty")

    if image.ndim == 3 and image.shape[2] in (1, 3, 4):
        return
    if image.ndim != 2:
        raise InvalidImageError(f"Unsupported frame shape {image.shape}")


def validate_landmark_set(landmarks: Optional[Sequence]) -> None:
    """
    랜드마크 세트가 계산에 쓰이는 모든 인덱스(최대 454)를 포함하는지 검증

    Raises:
        InvalidLandmarkSetError: None 이거나 포인트 수가 부족한 경우
    """
    if landmarks is None:
        raise InvalidLandmarkSetError("Landmark set is None")

    if len(landmarks) < REQUIRED_LANDMARK_COUNT:
        raise InvalidLandmarkSetError(
            f"Landmark set has {len(landmarks)} points, "
            f"at least {REQUIRED_LANDMARK_COUNT} required"
        )
