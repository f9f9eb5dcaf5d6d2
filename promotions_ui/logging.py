import sys
from typing import Optional

from loguru import logger
from promotions_ui.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
DEFAULT_NAME = "promotions_ui"

_handler_id: Optional[int] = None
_handler_level: Optional[str] = None


def configure_logging(level: Optional[str] = None) -> int:
    """Install the promotions sink at ``level`` (default: config log_level).

    The sink is replaced only when the level changes, so every module can
    call ``get_logger`` at construction time without stacking handlers.
    """
    global _handler_id, _handler_level
    level = (level or get_config().log_level).upper()
    if _handler_id is not None and _handler_level == level:
        return _handler_id

    logger.remove()
    logger.configure(extra={"name": DEFAULT_NAME})
    _handler_id = logger.add(sys.stdout, level=level, format=LOG_FORMAT)
    _handler_level = level
    return _handler_id


def get_logger(name: str = None):
    """Logger bound to ``name``, configured from the latest AppConfig."""
    configure_logging()
    return logger.bind(name=name or DEFAULT_NAME)
