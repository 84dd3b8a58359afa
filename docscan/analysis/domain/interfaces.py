"""
Интерфейсы (абстрактные классы) для домена Analysis.

Домен Analysis отвечает за:
1. Извлечение ссылок из OCR текста
2. Извлечение денежной суммы с валютой
3. Классификацию документа по ключевым словам
4. Сборку ExtractionResult для хранилища/UI
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from contracts.d2_analysis_dto import AmountCandidate, ClassificationResult, ExtractionResult
from .cancellation import CancellationToken


class ILinkExtractor(ABC):
    """Интерфейс извлечения ссылок."""
    
    @abstractmethod
    def extract(self, text: str) -> Tuple[str, ...]:
        """
        Находит все http(s) ссылки в тексте.
        
        Args:
            text: OCR текст
            
        Returns:
            Ссылки в порядке появления, включая повторы
        """
        pass


class IAmountExtractor(ABC):
    """Интерфейс извлечения денежной суммы."""
    
    @abstractmethod
    def extract(self, text: str) -> Optional[AmountCandidate]:
        """
        Находит максимальную денежную сумму в тексте.
        
        Args:
            text: OCR текст
            
        Returns:
            AmountCandidate или None если суммы нет
        """
        pass


class IDocumentClassifier(ABC):
    """Интерфейс классификации документа."""
    
    @abstractmethod
    def classify(self, text: str) -> ClassificationResult:
        """
        Определяет категорию документа.
        
        Args:
            text: OCR текст
            
        Returns:
            ClassificationResult (всегда, категория не бывает пустой)
        """
        pass


class IAnalysisPipeline(ABC):
    """Интерфейс пайплайна анализа (домен Analysis)."""
    
    @abstractmethod
    def run(self, ocr_text: str, cancel_token: Optional[CancellationToken] = None) -> ExtractionResult:
        """
        Анализирует OCR текст и собирает ExtractionResult.
        
        Args:
            ocr_text: Распознанный текст документа
            cancel_token: Токен отмены (опционально)
            
        Returns:
            ExtractionResult
        """
        pass
