"""
Utilities package.
"""
from .config_loader import Config, get_config, set_config
from .logging_config import get_logger, setup_logging

__all__ = [
    'Config', 'get_config', 'set_config',
    'get_logger', 'setup_logging',
]
