"""
Application слой домена Analysis.

Содержит фабрику и оркестратор компонентов.
"""

from .factory import AnalysisComponentFactory
from .analysis_pipeline import DocumentAnalysisPipeline

__all__ = [
    "AnalysisComponentFactory",
    "DocumentAnalysisPipeline",
]
