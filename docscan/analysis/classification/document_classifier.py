from typing import Optional
from loguru import logger

from contracts.d2_analysis_dto import ClassificationResult
from ..domain.interfaces import IDocumentClassifier
from ..rules_config import RulesConfig


class DocumentClassifier(IDocumentClassifier):
    """
    Определяет категорию документа по ключевым словам.
    
    Правила проверяются строго по порядку из RulesConfig, побеждает первое
    сработавшее (Fatura > Kimlik > Kartvizit). Поиск - простое вхождение
    подстроки в текст в нижнем регистре, поэтому "tel" сработает и внутри
    "otel". Уверенность фиксирована для правила и не зависит от текста.
    """
    
    def __init__(self, rules: Optional[RulesConfig] = None):
        """
        Args:
            rules: Правила классификации (по умолчанию из settings)
        """
        self.rules = rules or RulesConfig.load()
        self._default = ClassificationResult(
            category=self.rules.default_category,
            confidence=self.rules.default_confidence
        )

    def classify(self, text: str) -> ClassificationResult:
        """
        ЦКП: Категория документа и уверенность правила.
        
        Пустой текст -> категория по умолчанию (GENERIC, 0.60).
        """
        lowered_text = (text or "").lower()
        
        for rule in self.rules.rules:
            if rule.matches(lowered_text):
                logger.debug(f"[DocumentClassifier] Категория: {rule.category.value} ({rule.confidence})")
                return ClassificationResult(category=rule.category, confidence=rule.confidence)
        
        logger.debug(f"[DocumentClassifier] Правила не сработали, категория по умолчанию: {self._default.category.value}")
        return self._default
