"""
YAML 설정 로더

패키지에 포함된 config.yaml 을 기본값으로 읽고, 사용자 설정 파일이 주어지면
그 위에 덮어쓴다 (바꾸고 싶은 키만 적으면 됨).
"""
import copy
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

CONFIG_ENV_VAR = 'SKIN_AGE_CONFIG_PATH'
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

PathLike = Union[str, Path]


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path} "
            f"(pass --config or set {CONFIG_ENV_VAR})"
        )
    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format in {path}: {e}")
    return data or {}


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """override 의 값을 base 에 재귀적으로 병합한 새 딕셔너리"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigSection:
    """중첩 딕셔너리를 속성 방식으로 읽기 위한 래퍼"""

    def __init__(self, data: Mapping[str, Any], path: str = ''):
        self._data = data
        self._path = path

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            value = self._data[name]
        except KeyError:
            where = self._path or 'config'
            raise AttributeError(f"{where} has no key '{name}'") from None
        if isinstance(value, Mapping):
            return ConfigSection(value, f"{self._path}.{name}" if self._path else name)
        return value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        점(.) 구분 경로로 값 조회

        Example:
            >>> config.get('stabilizer.lock_threshold')
            30
        """
        value: Any = self._data
        for key in key_path.split('.'):
            if not isinstance(value, Mapping) or key not in value:
                return default
            value = value[key]
        return value

    def section(self, key_path: str) -> Dict[str, Any]:
        """하위 섹션을 딕셔너리 복사본으로 반환 (없으면 빈 딕셔너리)"""
        value = self.get(key_path, {})
        return dict(value) if isinstance(value, Mapping) else {}

    def __repr__(self):
        return f"{self.__class__.__name__}({sorted(self._data)})"


class Config(ConfigSection):
    """
    설정 관리자

    Usage:
        config = Config()                      # 패키지 기본값 (또는 환경 변수 경로)
        config = Config('my_scanner.yaml')     # 기본값 + 사용자 파일
        config.stabilizer.age_tolerance
    """

    def __init__(self, config_path: Optional[PathLike] = None):
        """
        Args:
            config_path: 사용자 설정 파일 (None 이면 SKIN_AGE_CONFIG_PATH, 없으면 기본값만)
        """
        if config_path is None and os.environ.get(CONFIG_ENV_VAR):
            config_path = os.environ[CONFIG_ENV_VAR]

        data = _read_yaml(DEFAULT_CONFIG_PATH)
        self.config_path = DEFAULT_CONFIG_PATH
        if config_path is not None:
            self.config_path = Path(config_path)
            data = _deep_merge(data, _read_yaml(self.config_path))

        super().__init__(data)

    def __repr__(self):
        return f"Config(path={self.config_path})"


_global_config: Optional[Config] = None


def get_config() -> Config:
    """전역 Config 인스턴스 (처음 호출 시 로드)"""
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def set_config(config_path: Optional[PathLike]) -> Config:
    """전역 Config 를 지정한 파일로 교체 (CLI --config 옵션용)"""
    global _global_config
    _global_config = Config(config_path)
    return _global_config
