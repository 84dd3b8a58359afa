"""
Домен Analysis: анализ распознанного текста документа.

Этот домен отвечает за:
1. Извлечение ссылок (http/https)
2. Извлечение денежной суммы с валютой (TL, ₺, $, USD, EUR, €)
3. Классификацию документа (Fatura, Kimlik, Kartvizit, Doküman)

Граница домена: contracts.RawOCRResult -> contracts.ExtractionResult
"""

from .extractors import LinkExtractor, AmountExtractor, normalize_amount
from .classification import DocumentClassifier
from .rules_config import RulesConfig, ClassificationRule

# Экспортируем application слой
from .application.factory import AnalysisComponentFactory
from .application.analysis_pipeline import DocumentAnalysisPipeline

__all__ = [
    # Основные классы
    "LinkExtractor",
    "AmountExtractor",
    "normalize_amount",
    "DocumentClassifier",
    "RulesConfig",
    "ClassificationRule",
    
    # Application слой
    "AnalysisComponentFactory",
    "DocumentAnalysisPipeline",
]
