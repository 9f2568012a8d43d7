"""시스템 설정 클래스 정의"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..utils.config_loader import Config, get_config
from ..utils.exceptions import ConfigurationError


def _section_kwargs(cls, config: Optional[Config], key_path: str) -> Dict[str, Any]:
    """YAML 섹션에서 dataclass 필드에 해당하는 값만 추출"""
    section = (config or get_config()).section(key_path)
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in section.items() if k in names}


@dataclass
class DetectionConfig:
    """MediaPipe FaceMesh 검출 설정"""

    static_image_mode: bool = False  # True: 이미지, False: 비디오
    max_num_faces: int = 1
    refine_landmarks: bool = True  # 눈/입 주변 정밀 검출
    min_detection_confidence: float = 0.35
    min_tracking_confidence: float = 0.35

    def __post_init__(self):
        """설정 값 검증"""
        if not 0.0 <= self.min_detection_confidence <= 1.0:
            raise ConfigurationError("min_detection_confidence must be between 0 and 1")
        if not 0.0 <= self.min_tracking_confidence <= 1.0:
            raise ConfigurationError("min_tracking_confidence must be between 0 and 1")
        if self.max_num_faces < 1:
            raise ConfigurationError("max_num_faces must be >= 1")

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'DetectionConfig':
        return cls(**_section_kwargs(cls, config, 'mediapipe.detection'))


@dataclass
class StabilizerConfig:
    """프레임 간 안정화 설정"""

    history_size: int = 90
    lock_threshold: int = 30
    age_tolerance: int = 8
    unlock_mismatch_frames: int = 20
    trim_fraction: float = 0.2

    def __post_init__(self):
        if self.history_size < 1:
            raise ConfigurationError("history_size must be >= 1")
        if not 1 <= self.lock_threshold <= self.history_size:
            raise ConfigurationError("lock_threshold must be between 1 and history_size")
        if self.age_tolerance < 0:
            raise ConfigurationError("age_tolerance must be >= 0")
        if self.unlock_mismatch_frames < 0:
            raise ConfigurationError("unlock_mismatch_frames must be >= 0")
        if not 0.0 <= self.trim_fraction < 0.5:
            raise ConfigurationError("trim_fraction must be in [0, 0.5)")

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'StabilizerConfig':
        return cls(**_section_kwargs(cls, config, 'stabilizer'))


@dataclass
class ScannerConfig:
    """카메라 스캐너 설정"""

    camera_id: int = 0
    frame_width: int = 1280
    frame_height: int = 720
    no_face_hint_seconds: float = 6.0
    window_name: str = "Skin Age Scanner"

    def __post_init__(self):
        if self.frame_width <= 0 or self.frame_height <= 0:
            raise ConfigurationError("frame size must be positive")
        if self.no_face_hint_seconds < 0:
            raise ConfigurationError("no_face_hint_seconds must be >= 0")

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'ScannerConfig':
        return cls(**_section_kwargs(cls, config, 'scanner'))
