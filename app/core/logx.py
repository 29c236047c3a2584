import logging
import sys

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"


def _build_logger(name: str = "blog") -> logging.Logger:
    _logger = logging.getLogger(name)
    # 避免重复 import 时重复挂 handler
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
    # 日志级别由配置 LOG_LEVEL 决定，默认 INFO
    _logger.setLevel(get_settings().log_level.upper())
    _logger.propagate = False
    return _logger


logger = _build_logger()
