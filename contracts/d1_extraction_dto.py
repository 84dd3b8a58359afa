"""
DTO контракт: D1 (Extraction) -> D2 (Analysis)

Результат OCR обработки изображения документа.
Для анализа нужен только полный текст: ссылки, сумма и категория
ищутся regex-ами по full_text, координаты слов не используются.

ВАЖНО: Пустой full_text - нормальный результат (OCR ничего не нашёл),
а не ошибка. D2 вернёт для него пустой ExtractionResult.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OCRMetadata(BaseModel):
    """
    Метаданные OCR обработки.
    """

    source_file: str = Field(..., description="Имя исходного файла")
    image_width: int = Field(0, ge=0, description="Ширина изображения (px)")
    image_height: int = Field(0, ge=0, description="Высота изображения (px)")
    processed_at: str = Field(..., description="Timestamp обработки (ISO 8601)")
    language_hints: List[str] = Field(default_factory=list, description="Подсказки языка для OCR")

    model_config = ConfigDict(frozen=True)


class RawOCRResult(BaseModel):
    """
    Результат OCR обработки изображения.

    Пример использования:

    raw_ocr = ocr_provider.recognize(image_bytes, "scan_001")
    if raw_ocr.has_content():
        result = pipeline.process_ocr_result(raw_ocr)
    """

    # Полный текст, строки разделены "\n"
    full_text: str = Field("", description="Распознанный текст документа")

    # Метаданные обработки
    metadata: Optional[OCRMetadata] = Field(None, description="Метаданные OCR")

    model_config = ConfigDict(frozen=True)

    def has_content(self) -> bool:
        """True если OCR распознал хоть какой-то непробельный текст."""
        return bool(self.full_text.strip())
