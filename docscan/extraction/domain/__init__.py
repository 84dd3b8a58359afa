"""
Domain слой домена Extraction.

Содержит интерфейс OCR провайдера и исключения.
"""

from .interfaces import IOCRProvider

from .exceptions import (
    ExtractionError,
    OCRProcessingError,
    OCRProviderError,
    OCRResponseError,
    ExtractionConfigurationError,
)

__all__ = [
    # Интерфейсы
    "IOCRProvider",
    
    # Исключения
    "ExtractionError",
    "OCRProcessingError",
    "OCRProviderError",
    "OCRResponseError",
    "ExtractionConfigurationError",
]
