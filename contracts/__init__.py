"""
Контракты DTO между доменами проекта DocScan Text.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- D1 -> D2: RawOCRResult (d1_extraction_dto.py)
- D2 -> Storage/UI: ExtractionResult (d2_analysis_dto.py)
"""

# D1 -> D2 (Extraction -> Analysis)
from .d1_extraction_dto import RawOCRResult, OCRMetadata

# D2 -> Storage/UI
from .d2_analysis_dto import (
    Category,
    AmountCandidate,
    ClassificationResult,
    ExtractionResult,
)

__all__ = [
    # D1 -> D2
    "RawOCRResult",
    "OCRMetadata",
    # D2 -> Storage/UI
    "Category",
    "AmountCandidate",
    "ClassificationResult",
    "ExtractionResult",
]
