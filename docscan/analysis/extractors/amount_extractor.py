"""
Извлечение денежной суммы из OCR текста документа.

Четыре семейства паттернов применяются по очереди ко всему тексту:
1. Турецкий формат:       1.234,56 TL  / 1.234,56 ₺
2. Международный формат:  1,234.56 USD / 1,234.56 $
3. Простой формат:        123,45 TL    / 123.45 EUR
4. После ключевого слова: Toplam: 123.45 TL

Из всех совпадений всех паттернов выбирается максимальная сумма.
"""

import re
from typing import Iterable, List, Optional, Tuple
from loguru import logger

from contracts.d2_analysis_dto import AmountCandidate
from ..domain.interfaces import IAmountExtractor

# Валютные токены
TRY_CURRENCIES = r"TL|₺"
FOREIGN_CURRENCIES = r"\$|USD|EUR|€"
ALL_CURRENCIES = rf"{TRY_CURRENCIES}|{FOREIGN_CURRENCIES}"

DEFAULT_AMOUNT_KEYWORDS = ("toplam", "total", "tutar", "amount")


def normalize_amount(raw_amount: str) -> str:
    """
    Приводит строку суммы к виду, понятному float().
    
    Примеры:
    - "1.234,56" → "1234.56"  (европейская группировка)
    - "1,234.56" → "1234.56"  (международная группировка)
    - "123,45"   → "123.45"
    - "123.45"   → "123.45"
    
    Если есть и "," и ".", десятичным считается тот, что стоит правее.
    """
    if "," in raw_amount and "." in raw_amount:
        if raw_amount.rfind(",") > raw_amount.rfind("."):
            return raw_amount.replace(".", "").replace(",", ".")
        return raw_amount.replace(",", "")
    if "," in raw_amount:
        return raw_amount.replace(",", ".")
    return raw_amount


def build_amount_patterns(keywords: Iterable[str] = DEFAULT_AMOUNT_KEYWORDS) -> List[re.Pattern]:
    """
    Компилирует паттерны сумм. Группа 1 - число, группа 2 - валюта.

    Цифры только ASCII: [0-9], а не \\d (\\d совпадает с любыми Unicode-цифрами).
    """
    keyword_group = "|".join(re.escape(kw) for kw in keywords)
    raw_patterns = [
        # Турецкий: 1.234,56 TL
        rf"([0-9]{{1,3}}(?:\.[0-9]{{3}})*(?:,[0-9]{{2}})?)\s*({TRY_CURRENCIES})",
        # Международный: 1,234.56 USD
        rf"([0-9]{{1,3}}(?:,[0-9]{{3}})*(?:\.[0-9]{{2}})?)\s*({FOREIGN_CURRENCIES})",
        # Простой: 123.45 TL / 123,45 TL
        rf"([0-9]+[.,][0-9]{{2}})\s*({ALL_CURRENCIES})",
        # С ключевым словом: Toplam: 123.45 TL
        rf"(?:{keyword_group})[:\s]+([0-9]{{1,3}}(?:[.,][0-9]{{3}})*(?:[.,][0-9]{{2}})?)\s*({ALL_CURRENCIES})",
    ]
    return [re.compile(p, re.IGNORECASE) for p in raw_patterns]


class AmountExtractor(IAmountExtractor):
    """
    Элемент-функция: Извлекает максимальную денежную сумму и её валюту.
    
    Паттерны компилируются один раз в конструкторе, extract() не имеет
    состояния и безопасен для параллельных вызовов.
    """
    
    def __init__(self, keywords: Optional[Iterable[str]] = None):
        """
        Args:
            keywords: Ключевые слова перед суммой (по умолчанию toplam/total/tutar/amount)
        """
        self.keywords = tuple(keywords) if keywords else DEFAULT_AMOUNT_KEYWORDS
        self.patterns = build_amount_patterns(self.keywords)

    def extract(self, text: str) -> Optional[AmountCandidate]:
        """
        ЦКП: Максимальная сумма среди всех кандидатов или None.
        
        При равных суммах остаётся кандидат, найденный раньше
        (порядок паттернов, затем позиция в тексте).
        """
        if not text:
            return None
        
        best: Optional[AmountCandidate] = None
        for value, currency in self._iter_candidates(text):
            if best is None or value > best.amount:
                best = AmountCandidate(amount=value, currency=currency)
        
        if best:
            logger.debug(f"[AmountExtractor] Выбрана сумма: {best.amount} {best.currency}")
        else:
            logger.debug("[AmountExtractor] Сумма не найдена")
        return best

    def _iter_candidates(self, text: str) -> Iterable[Tuple[float, str]]:
        for p_idx, pattern in enumerate(self.patterns):
            for m in pattern.finditer(text):
                raw_amount, currency = m.group(1), m.group(2)
                try:
                    value = float(normalize_amount(raw_amount))
                except ValueError:
                    logger.trace(f"[AmountExtractor] Пропущен кандидат '{raw_amount}' (паттерн {p_idx + 1})")
                    continue
                logger.trace(f"[AmountExtractor] Кандидат: {value} {currency} (паттерн {p_idx + 1})")
                yield value, currency
