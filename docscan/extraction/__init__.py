"""
Домен Extraction: OCR обработка.

Этот домен отвечает за:
1. Выполнение OCR через Google Vision API
2. Формирование результата в формате RawOCRResult

Граница домена: contracts.RawOCRResult

GoogleVisionOCR не импортируется здесь, чтобы анализ текста
не требовал загрузки google-cloud-vision.
"""

from .domain import IOCRProvider

__all__ = [
    "IOCRProvider",
]
