"""
OCR: Google Vision API интеграция.

Внешний коллаборатор домена Analysis:
- Отправка изображения документа в Google Vision
- Получение распознанного текста
- Формирование RawOCRResult (контракт D1->D2)

ВАЖНО: Возвращает RawOCRResult из contracts/d1_extraction_dto.py
"""

import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from google.cloud import vision
from google.cloud.vision_v1 import types
from loguru import logger

from config.settings import GOOGLE_APPLICATION_CREDENTIALS, OCR_LANGUAGE_HINTS
from contracts.d1_extraction_dto import RawOCRResult, OCRMetadata
from ...domain.interfaces import IOCRProvider
from ...domain.exceptions import OCRProviderError, OCRResponseError


class GoogleVisionOCR(IOCRProvider):
    """
    Обёртка над Google Cloud Vision API.
    
    Возвращает RawOCRResult с full_text для regex-анализа.
    Документы бывают на турецком и английском, поэтому по умолчанию
    передаются подсказки языка ["tr", "en"].
    """
    
    def __init__(
        self,
        credentials_path: Optional[str] = None,
        language_hints: Optional[List[str]] = None,
        client=None
    ):
        """
        Инициализация OCR клиента.
        
        Args:
            credentials_path: Путь к JSON-файлу credentials.
                            Если не указан, берётся из settings.
            language_hints: Подсказки языка (по умолчанию из settings)
            client: Готовый ImageAnnotatorClient (для тестов)
        """
        self.language_hints = list(language_hints if language_hints is not None else OCR_LANGUAGE_HINTS)
        
        if client is not None:
            self.client = client
            logger.debug("[GoogleVisionOCR] Используется переданный клиент")
            return
        
        creds_path = credentials_path or GOOGLE_APPLICATION_CREDENTIALS
        
        if not creds_path:
            raise OCRProviderError(
                message="Google credentials не указаны",
                component="GoogleVisionOCR"
            )
        
        if not Path(creds_path).exists():
            raise OCRProviderError(
                message=f"Credentials файл не найден: {creds_path}",
                component="GoogleVisionOCR"
            )
        
        # Устанавливаем credentials через переменную окружения
        os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = str(creds_path)
        
        try:
            self.client = vision.ImageAnnotatorClient()
        except Exception as e:
            raise OCRProviderError(
                message="Не удалось инициализировать ImageAnnotatorClient",
                component="GoogleVisionOCR",
                original_error=e
            )
    
        logger.info("[GoogleVisionOCR] Клиент инициализирован")
    
    def recognize(
        self, 
        image_content: bytes, 
        source_file: str = "unknown"
    ) -> RawOCRResult:
        """
        Распознаёт текст на изображении.
        
        Args:
            image_content: Байты изображения
            source_file: Имя исходного файла (для метаданных)
            
        Returns:
            RawOCRResult: Контракт D1->D2
            
        Raises:
            OCRResponseError: Если API вернул ошибку или вызов упал
        """
        logger.debug(f"[GoogleVisionOCR] Распознавание: {source_file}")
        
        image = types.Image(content=image_content)
        
        # Настройка запроса с подсказками языка
        image_context = types.ImageContext(
            language_hints=self.language_hints
        )
        
        try:
            # DOCUMENT_TEXT_DETECTION лучше подходит для плотного текста документов
            response = self.client.document_text_detection(
                image=image,
                image_context=image_context
            )
        except Exception as e:
            raise OCRResponseError(
                message=f"Ошибка при распознавании: {source_file}",
                component="GoogleVisionOCR",
                original_error=e
            )
        
        if response.error.message:
            raise OCRResponseError(
                message=f"Google Vision API error: {response.error.message}",
                component="GoogleVisionOCR"
            )
        
        return self._parse_response(response, source_file)
    
    def _parse_response(self, response, source_file: str) -> RawOCRResult:
        """
        Парсит ответ Google Vision в RawOCRResult.
        """
        full_text = ""
        image_width = 0
        image_height = 0
        
        if response.full_text_annotation:
            full_text = response.full_text_annotation.text or ""
            
            pages = list(response.full_text_annotation.pages)
            if pages:
                image_width = pages[0].width
                image_height = pages[0].height
        
        logger.debug(f"[GoogleVisionOCR] Распознано символов: {len(full_text)}")
        
        metadata = OCRMetadata(
            source_file=source_file,
            image_width=image_width,
            image_height=image_height,
            processed_at=datetime.now().isoformat(),
            language_hints=self.language_hints
        )
        
        return RawOCRResult(full_text=full_text, metadata=metadata)
