"""
Интерфейсы (абстрактные классы) для домена Extraction.

Домен Extraction отвечает только за OCR: байты изображения -> текст.
Обработка изображений и layout-анализ сюда не входят.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from contracts.d1_extraction_dto import RawOCRResult
from .exceptions import OCRProcessingError


class IOCRProvider(ABC):
    """Интерфейс для провайдеров OCR (домен Extraction)."""

    @abstractmethod
    def recognize(self, image_content: bytes, source_file: str = "unknown") -> RawOCRResult:
        """
        Распознаёт текст на изображении.

        Args:
            image_content: Байты изображения
            source_file: Имя исходного файла (для метаданных)

        Returns:
            RawOCRResult: full_text может быть пустым

        Raises:
            OCRProcessingError: Если распознавание не удалось
        """
        pass

    def recognize_from_file(self, image_path: Path) -> RawOCRResult:
        """
        Распознаёт текст из файла изображения.

        Args:
            image_path: Путь к файлу изображения

        Returns:
            RawOCRResult
        """
        image_path = Path(image_path)
        try:
            with open(image_path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise OCRProcessingError(
                message=f"Не удалось прочитать файл: {image_path}",
                component=type(self).__name__,
                original_error=e
            )

        return self.recognize(content, source_file=image_path.stem)
