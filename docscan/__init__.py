"""DocScan Text - анализ OCR текста сканированных документов."""

import sys
from typing import Optional

from loguru import logger

__version__ = "1.0.0"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Настраивает loguru: один sink в stdout.
    
    Args:
        level: Уровень логирования (по умолчанию из settings)
    """
    if level is None:
        from config.settings import LOG_LEVEL
        level = LOG_LEVEL
    
    logger.remove()
    logger.add(
        sys.stdout,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
    )
