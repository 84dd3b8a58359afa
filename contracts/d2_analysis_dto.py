"""
DTO контракт: D2 (Analysis) -> Storage/UI

Результат анализа распознанного текста документа:
ссылки, денежная сумма с валютой и категория документа.

ВАЖНО: Все модели frozen. Результат создаётся заново на каждый вызов
пайплайна и целиком передаётся вызывающему коду, который сам решает,
сохранять ли его.
"""

from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """
    Категория документа. Закрытое перечисление.
    """

    INVOICE = "invoice"
    IDENTITY_DOCUMENT = "identity_document"
    BUSINESS_CARD = "business_card"
    GENERIC = "generic"

    @property
    def display_name(self) -> str:
        """Название категории для UI (как в приложении-сканере)."""
        return _DISPLAY_NAMES[self]

    @property
    def folder_name(self) -> str:
        """Папка по умолчанию для документов категории (GENERIC -> "Diğer")."""
        return _FOLDER_NAMES[self]


_DISPLAY_NAMES = {
    Category.INVOICE: "Fatura",
    Category.IDENTITY_DOCUMENT: "Kimlik",
    Category.BUSINESS_CARD: "Kartvizit",
    Category.GENERIC: "Doküman",
}

_FOLDER_NAMES = {
    Category.INVOICE: "Faturalar",
    Category.IDENTITY_DOCUMENT: "Kimlikler",
    Category.BUSINESS_CARD: "Kartvizitler",
    Category.GENERIC: "Diğer",
}


class AmountCandidate(BaseModel):
    """
    Денежная сумма, найденная одним regex-паттерном.
    """

    amount: float = Field(..., description="Нормализованное значение суммы")
    currency: str = Field(..., description="Валютный токен как в тексте (TL, ₺, $, USD, EUR, €)")

    model_config = ConfigDict(frozen=True)


class ClassificationResult(BaseModel):
    """
    Категория документа и фиксированная уверенность правила.
    """

    category: Category = Field(..., description="Категория документа")
    confidence: float = Field(..., description="Уверенность правила (0.0 - 1.0)")

    model_config = ConfigDict(frozen=True)

    @field_validator("confidence")
    @classmethod
    def validate_confidence(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {v}")
        return v


class ExtractionResult(BaseModel):
    """
    DTO результата анализа одного OCR текста.
    Output домена Analysis, идущий в хранилище и UI.
    """

    raw_text: str = Field("", description="Исходный OCR текст")
    links: Tuple[str, ...] = Field(default_factory=tuple, description="Ссылки в порядке появления (с повторами)")
    amount: AmountCandidate | None = Field(None, description="Максимальная найденная сумма")
    classification: ClassificationResult = Field(..., description="Категория документа")

    model_config = ConfigDict(frozen=True)

    @property
    def amount_value(self) -> float | None:
        return self.amount.amount if self.amount else None

    @property
    def currency(self) -> str | None:
        return self.amount.currency if self.amount else None

    def has_signal(self) -> bool:
        """True если найдена хотя бы одна ссылка, сумма или не-GENERIC категория."""
        return bool(
            self.links
            or self.amount is not None
            or self.classification.category is not Category.GENERIC
        )

    def to_document_record(self) -> Dict[str, Any]:
        """
        Плоские поля сканированного документа для хранилища.

        Пустой текст сохраняется как None, а не как "".
        """
        return {
            "category": self.classification.category.display_name,
            "confidence": self.classification.confidence,
            "extracted_text": self.raw_text or None,
            "detected_urls": list(self.links),
            "detected_amount": self.amount_value,
            "detected_currency": self.currency,
        }
