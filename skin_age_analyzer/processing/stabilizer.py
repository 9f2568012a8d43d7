"""프레임 간 피부 지표 안정화 (trimmed mean + lock/unlock 상태 머신)

프레임마다 흔들리는 추정값을 누적해 한 번 고정(lock)하고,
고정 후에는 일정 범위의 흔들림을 무시한다. 나이 차이가 큰 프레임이
연속으로 이어지면 다른 사람으로 보고 처음부터 다시 누적한다.

한 인스턴스는 한 명의 피험자 스트림만 담당하며 thread-safe 하지 않다.
프레임은 도착 순서대로 넣어야 한다.
"""

import math
from collections import deque
from typing import Deque, List, Optional

import numpy as np

from ..config.settings import StabilizerConfig
from ..models import Locked, LockState, SkinMetrics, Unlocked
from ..utils import get_logger
from .geometry import round_half_up

logger = get_logger(__name__)

_AVERAGED_FIELDS = ('wrinkles', 'texture', 'volume', 'eye_aging', 'skin_tone')


class MetricsStabilizer:
    """
    피부 지표 안정화기

    - Unlocked: 히스토리에 누적, lock_threshold 미만이면 원시값 그대로 반환
    - Unlocked → Locked: 히스토리로 안정값 계산 (나이는 trimmed mean, 나머지는 평균)
    - Locked: 나이 차이가 age_tolerance 이하면 불일치 카운트 리셋,
      초과가 unlock_mismatch_frames 번을 넘으면 히스토리를 비우고 Unlocked 로 복귀
    """

    def __init__(self, config: Optional[StabilizerConfig] = None):
        """
        Args:
            config: 안정화 설정 (None 이면 기본값)
        """
        self.config = config or StabilizerConfig()
        self.history: Deque[SkinMetrics] = deque(maxlen=self.config.history_size)
        self.state: LockState = Unlocked()

    @property
    def is_locked(self) -> bool:
        return isinstance(self.state, Locked)

    @property
    def mismatch_count(self) -> int:
        return self.state.mismatch_count

    @property
    def locked_value(self) -> Optional[SkinMetrics]:
        return self.state.value if isinstance(self.state, Locked) else None

    @property
    def history_length(self) -> int:
        return len(self.history)

    def update(self, raw: SkinMetrics) -> SkinMetrics:
        """
        원시 지표 한 프레임을 받아 화면에 표시할 지표 반환

        Args:
            raw: 이번 프레임의 원시 SkinMetrics

        Returns:
            SkinMetrics: 원시값 (누적 중) 또는 고정된 안정값
        """
        state = self.state
        if isinstance(state, Locked):
            return self._update_locked(state, raw)
        return self._accumulate(raw)

    def reset(self):
        """히스토리와 lock 상태 초기화 (새 피험자)"""
        self.history.clear()
        self.state = Unlocked()

    def _accumulate(self, raw: SkinMetrics) -> SkinMetrics:
        self.history.append(raw)

        if len(self.history) < self.config.lock_threshold:
            return raw

        value = self.aggregate(list(self.history))
        # 다음 re-lock 에 이전 프레임이 섞이지 않도록 lock 시점에 비움
        self.history.clear()
        self.state = Locked(value=value)
        logger.info(
            f"Metrics locked: age={value.estimated_age}, "
            f"wrinkles={value.wrinkles}, texture={value.texture}, volume={value.volume}, "
            f"eye_aging={value.eye_aging}, skin_tone={value.skin_tone}"
        )
        return value

    def _update_locked(self, state: Locked, raw: SkinMetrics) -> SkinMetrics:
        deviation = abs(raw.estimated_age - state.value.estimated_age)

        if deviation <= self.config.age_tolerance:
            if state.mismatch_count:
                logger.debug(f"Age back within tolerance, mismatch count reset ({state.mismatch_count} -> 0)")
                self.state = Locked(value=state.value)
            return state.value

        mismatch_count = state.mismatch_count + 1
        if mismatch_count > self.config.unlock_mismatch_frames:
            logger.info(
                f"New subject detected: {mismatch_count} consecutive frames deviate "
                f"> {self.config.age_tolerance} years from locked age {state.value.estimated_age}, unlocking"
            )
            self.reset()
            return raw

        logger.debug(
            f"Age mismatch {mismatch_count}/{self.config.unlock_mismatch_frames}: "
            f"raw={raw.estimated_age}, locked={state.value.estimated_age}"
        )
        self.state = Locked(value=state.value, mismatch_count=mismatch_count)
        return state.value

    def aggregate(self, window: List[SkinMetrics]) -> SkinMetrics:
        """
        히스토리 윈도우로 안정값 계산

        Args:
            window: 시간 순서대로 정렬된 원시 지표 (1개 이상)

        Returns:
            SkinMetrics: 나이는 trimmed mean, 나머지 지표는 산술 평균 (반올림)
        """
        n = len(window)
        ages = np.sort(np.array([m.estimated_age for m in window], dtype=float))
        trim_start = math.floor(n * self.config.trim_fraction)
        trim_end = n - trim_start  # == ceil(n * (1 - trim_fraction))
        stable_age = round_half_up(float(np.mean(ages[trim_start:trim_end])))

        averaged = {
            name: round_half_up(float(np.mean([getattr(m, name) for m in window])))
            for name in _AVERAGED_FIELDS
        }
        return SkinMetrics(estimated_age=stable_age, **averaged)
