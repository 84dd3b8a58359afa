"""
Загрузчик правил анализа из YAML.

ЦКП: Неизменяемый RulesConfig с правилами классификации и ключевыми
словами для суммы.

Архитектурный принцип:
- Правила живут в YAML (rules/default.yaml), код их только исполняет
- Порядок правил в YAML = приоритет классификации
- Загруженные конфиги кешируются по пути файла
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

import yaml
from loguru import logger

from contracts.d2_analysis_dto import Category
from .domain.exceptions import AnalysisConfigurationError


@dataclass(frozen=True)
class ClassificationRule:
    """
    Одно правило классификации: любое из ключевых слов -> категория.
    """
    category: Category
    confidence: float
    keywords: Tuple[str, ...]

    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)


@dataclass(frozen=True)
class RulesConfig:
    """
    Правила анализа документа.
    
    rules - упорядоченные правила классификации (первое совпадение побеждает),
    default_category/default_confidence - результат, если ни одно не сработало.
    """
    amount_keywords: Tuple[str, ...]
    rules: Tuple[ClassificationRule, ...]
    default_category: Category
    default_confidence: float
    source_file: Optional[str] = None

    _cache: ClassVar[Dict[str, "RulesConfig"]] = {}

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "RulesConfig":
        """
        Загружает правила из YAML файла (по умолчанию из settings).
        """
        if path is None:
            from config.settings import RULES_CONFIG_PATH
            path = RULES_CONFIG_PATH

        config_file = Path(path)
        cache_key = str(config_file.resolve())

        if cache_key in cls._cache:
            return cls._cache[cache_key]

        raw = cls._read_yaml(config_file)
        config = cls.from_dict(raw, source_file=config_file.name)
        cls._cache[cache_key] = config

        logger.debug(
            f"[RulesConfig] Загружены правила из {config_file.name}: "
            f"{len(config.rules)} правил классификации, "
            f"{len(config.amount_keywords)} ключевых слов суммы"
        )
        return config

    @classmethod
    def default(cls) -> "RulesConfig":
        """Правила, поставляемые вместе с пакетом."""
        return cls.load(Path(__file__).parent / "rules" / "default.yaml")

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()

    @classmethod
    def _read_yaml(cls, config_file: Path) -> dict:
        if not config_file.exists():
            raise AnalysisConfigurationError(
                message=f"Файл правил не найден: {config_file}",
                component="RulesConfig"
            )

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise AnalysisConfigurationError(
                message=f"Некорректный YAML: {config_file}",
                component="RulesConfig",
                original_error=e
            )

        if not isinstance(data, dict):
            raise AnalysisConfigurationError(
                message=f"Ожидался словарь верхнего уровня в {config_file}",
                component="RulesConfig"
            )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_file: Optional[str] = None) -> "RulesConfig":
        """
        Собирает RulesConfig из словаря (структура как в default.yaml).
        """
        amount_section = cls._section(data.get("amount"), "amount")
        classification_section = cls._section(data.get("classification"), "classification")

        amount_keywords = cls._keywords(amount_section.get("keywords"), "amount.keywords")

        raw_rules = classification_section.get("rules") or []
        if not isinstance(raw_rules, list):
            raise AnalysisConfigurationError(
                message="classification.rules: ожидался список правил",
                component="RulesConfig"
            )

        rules = []
        for idx, raw_rule in enumerate(raw_rules):
            where = f"classification.rules[{idx}]"
            if not isinstance(raw_rule, dict):
                raise AnalysisConfigurationError(
                    message=f"{where}: ожидался словарь",
                    component="RulesConfig"
                )
            rules.append(ClassificationRule(
                category=cls._category(raw_rule.get("category"), where),
                confidence=cls._confidence(raw_rule.get("confidence"), where),
                keywords=cls._keywords(raw_rule.get("keywords"), f"{where}.keywords"),
            ))

        default_section = cls._section(classification_section.get("default"), "classification.default")
        default_category = cls._category(default_section.get("category", "generic"), "classification.default")
        default_confidence = cls._confidence(default_section.get("confidence", 0.60), "classification.default")

        return cls(
            amount_keywords=amount_keywords,
            rules=tuple(rules),
            default_category=default_category,
            default_confidence=default_confidence,
            source_file=source_file,
        )

    @staticmethod
    def _section(value: Any, where: str) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise AnalysisConfigurationError(
                message=f"{where}: ожидался словарь, получено {type(value).__name__}",
                component="RulesConfig"
            )
        return value

    @staticmethod
    def _keywords(value: Any, where: str) -> Tuple[str, ...]:
        if not isinstance(value, list) or not value:
            raise AnalysisConfigurationError(
                message=f"{where}: нужен непустой список ключевых слов",
                component="RulesConfig"
            )
        # Сравнение идёт с текстом в нижнем регистре
        return tuple(str(keyword).lower() for keyword in value)

    @staticmethod
    def _category(value: Any, where: str) -> Category:
        try:
            return Category(value)
        except ValueError:
            raise AnalysisConfigurationError(
                message=f"{where}: неизвестная категория '{value}'",
                component="RulesConfig"
            )

    @staticmethod
    def _confidence(value: Any, where: str) -> float:
        try:
            confidence = float(value)
        except (TypeError, ValueError):
            raise AnalysisConfigurationError(
                message=f"{where}: confidence должен быть числом, получено '{value}'",
                component="RulesConfig"
            )
        if not 0.0 <= confidence <= 1.0:
            raise AnalysisConfigurationError(
                message=f"{where}: confidence вне диапазона [0, 1]: {confidence}",
                component="RulesConfig"
            )
        return confidence
