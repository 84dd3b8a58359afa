"""
Фабрика для создания компонентов домена Analysis.

Предоставляет удобные методы для создания и конфигурации
всех компонентов домена Analysis через единый интерфейс.
"""

from typing import Optional, Dict, Any
from loguru import logger

from docscan.extraction.domain.interfaces import IOCRProvider
from ..domain.interfaces import ILinkExtractor, IAmountExtractor, IDocumentClassifier
from ..extractors.link_extractor import LinkExtractor
from ..extractors.amount_extractor import AmountExtractor
from ..classification.document_classifier import DocumentClassifier
from ..rules_config import RulesConfig
from .analysis_pipeline import DocumentAnalysisPipeline


class AnalysisComponentFactory:
    """
    Фабрика для создания компонентов домена Analysis.

    Домен Analysis отвечает за:
    - Извлечение ссылок
    - Извлечение денежной суммы
    - Классификацию документа
    """

    @staticmethod
    def create_link_extractor() -> ILinkExtractor:
        logger.debug("[Analysis] Создание LinkExtractor")
        return LinkExtractor()

    @staticmethod
    def create_amount_extractor(rules: Optional[RulesConfig] = None) -> IAmountExtractor:
        """
        Создает извлекатель суммы с ключевыми словами из правил.

        Args:
            rules: Правила анализа (по умолчанию из settings)
        """
        logger.debug("[Analysis] Создание AmountExtractor")
        rules = rules or RulesConfig.load()
        return AmountExtractor(keywords=rules.amount_keywords)

    @staticmethod
    def create_document_classifier(rules: Optional[RulesConfig] = None) -> IDocumentClassifier:
        """
        Создает классификатор документа.

        Args:
            rules: Правила анализа (по умолчанию из settings)
        """
        logger.debug("[Analysis] Создание DocumentClassifier")
        return DocumentClassifier(rules or RulesConfig.load())

    @staticmethod
    def create_analysis_pipeline(
        ocr_provider: Optional[IOCRProvider] = None,
        rules: Optional[RulesConfig] = None,
        max_workers: Optional[int] = None
    ) -> DocumentAnalysisPipeline:
        """
        Создает пайплайн analysis.

        Args:
            ocr_provider: Провайдер OCR (опционально, нужен для analyze_image)
            rules: Правила анализа (по умолчанию из settings)
            max_workers: Потоки для batch_process (по умолчанию из settings)

        Returns:
            DocumentAnalysisPipeline
        """
        logger.debug("[Analysis] Создание пайплайна analysis")

        rules = rules or RulesConfig.load()

        if max_workers is None:
            from config.settings import BATCH_MAX_WORKERS
            max_workers = BATCH_MAX_WORKERS

        return DocumentAnalysisPipeline(
            link_extractor=AnalysisComponentFactory.create_link_extractor(),
            amount_extractor=AnalysisComponentFactory.create_amount_extractor(rules),
            classifier=AnalysisComponentFactory.create_document_classifier(rules),
            ocr_provider=ocr_provider,
            max_workers=max_workers
        )

    @staticmethod
    def create_default_analysis_pipeline(credentials_path: Optional[str] = None) -> DocumentAnalysisPipeline:
        """
        Создает пайплайн analysis с Google Vision OCR.

        Returns:
            Полностью сконфигурированный пайплайн analysis
        """
        logger.info("[Analysis] Создание пайплайна analysis с настройками по умолчанию")

        # Импорт здесь: google-cloud-vision нужен только для OCR
        from docscan.extraction.infrastructure.ocr.google_vision_ocr import GoogleVisionOCR

        return AnalysisComponentFactory.create_analysis_pipeline(
            ocr_provider=GoogleVisionOCR(credentials_path)
        )

    @staticmethod
    def get_analysis_info() -> Dict[str, Any]:
        """
        Возвращает информацию о домене Analysis.

        Returns:
            Словарь с информацией о доступных компонентах и их возможностях
        """
        return {
            "domain": "Analysis",
            "responsibility": "Ссылки + сумма + категория документа из OCR текста",
            "output": "ExtractionResult",
            "components": {
                "link_extractor": "LinkExtractor",
                "amount_extractor": "AmountExtractor",
                "classifier": "DocumentClassifier",
                "analysis_pipeline": "DocumentAnalysisPipeline"
            },
            "capabilities": [
                "link_extraction",
                "amount_extraction",
                "document_classification",
                "batch_processing",
                "cancellation"
            ],
            "dependencies": ["PyYAML", "Google Cloud Vision API (опционально)"]
        }
