"""
Domain слой домена Analysis.

Содержит интерфейсы, токен отмены и исключения.
"""

from .interfaces import (
    ILinkExtractor,
    IAmountExtractor,
    IDocumentClassifier,
    IAnalysisPipeline,
)

from .cancellation import CancellationToken

from .exceptions import (
    AnalysisError,
    AnalysisCancelledError,
    AnalysisConfigurationError,
)

__all__ = [
    # Интерфейсы
    "ILinkExtractor",
    "IAmountExtractor",
    "IDocumentClassifier",
    "IAnalysisPipeline",
    
    # Отмена
    "CancellationToken",
    
    # Исключения
    "AnalysisError",
    "AnalysisCancelledError",
    "AnalysisConfigurationError",
]
