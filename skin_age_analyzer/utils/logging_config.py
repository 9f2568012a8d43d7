"""
패키지 로깅 설정

핸들러는 패키지 루트 로거(skin_age_analyzer)에 한 번만 붙이고,
모듈 로거는 전파(propagate)로 출력한다.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .config_loader import get_config

PACKAGE_LOGGER = 'skin_age_analyzer'


def _level(name: Optional[str], default: int) -> int:
    return getattr(logging, str(name).upper(), default) if name else default


def setup_logging(force: bool = False) -> logging.Logger:
    """
    config.yaml 의 logging 섹션으로 패키지 로거 구성

    Args:
        force: 이미 구성된 핸들러를 제거하고 다시 구성 (--config 교체 후)

    Returns:
        logging.Logger: 패키지 루트 로거
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers and not force:
        return logger

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_config = get_config().section('logging')
    logger.setLevel(_level(log_config.get('level'), logging.INFO))

    formatter = logging.Formatter(
        log_config.get('format', '%(asctime)s [%(levelname)s] %(name)s: %(message)s'),
        datefmt=log_config.get('date_format'),
    )

    console = log_config.get('console') or {}
    if console.get('enabled', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console.get('level'), logging.INFO))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    file_config = log_config.get('file') or {}
    if file_config.get('enabled', False):
        log_dir = Path(file_config.get('directory', 'logs'))
        log_dir.mkdir(parents=True, exist_ok=True)

        # 10MB x 5 개 로테이션이 기본
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / file_config.get('filename', 'skin_age_analyzer.log'),
            maxBytes=file_config.get('max_bytes', 10 * 1024 * 1024),
            backupCount=file_config.get('backup_count', 5),
            encoding='utf-8'
        )
        file_handler.setLevel(_level(file_config.get('level'), logging.DEBUG))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    모듈 로거 반환 (패키지 로거가 아직 구성되지 않았으면 구성)

    Args:
        name: 로거 이름 (보통 __name__)
    """
    setup_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
