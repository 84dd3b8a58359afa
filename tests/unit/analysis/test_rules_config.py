"""
Unit-тесты для загрузки правил анализа через RulesConfig.

ЦКП: Проверка корректности загрузки default.yaml и валидации правил.
"""

import pytest

from contracts.d2_analysis_dto import Category
from docscan.analysis.rules_config import RulesConfig
from docscan.analysis.domain.exceptions import AnalysisConfigurationError


VALID_RULES = {
    "amount": {"keywords": ["toplam"]},
    "classification": {
        "rules": [{"category": "invoice", "confidence": 0.85, "keywords": ["fatura"]}],
        "default": {"category": "generic", "confidence": 0.6},
    },
}


@pytest.fixture(autouse=True)
def clear_rules_cache():
    RulesConfig.clear_cache()
    yield
    RulesConfig.clear_cache()


class TestDefaultRules:
    """Тесты правил, поставляемых с пакетом."""

    def test_rules_order(self):
        """Порядок правил: Invoice > Identity > BusinessCard."""
        config = RulesConfig.default()
        assert [rule.category for rule in config.rules] == [
            Category.INVOICE,
            Category.IDENTITY_DOCUMENT,
            Category.BUSINESS_CARD,
        ]
        assert [rule.confidence for rule in config.rules] == [0.85, 0.80, 0.75]

    def test_rule_keywords(self):
        config = RulesConfig.default()
        assert config.rules[0].keywords == ("fatura", "invoice", "tutar", "toplam")
        assert config.rules[1].keywords == ("tc", "kimlik", "t.c.", "doğum")
        assert config.rules[2].keywords == ("tel", "email", "@", "gsm")

    def test_default_category(self):
        config = RulesConfig.default()
        assert config.default_category is Category.GENERIC
        assert config.default_confidence == 0.60

    def test_amount_keywords(self):
        config = RulesConfig.default()
        assert config.amount_keywords == ("toplam", "total", "tutar", "amount")

    def test_cached(self):
        """Повторная загрузка возвращает тот же объект из кеша."""
        assert RulesConfig.default() is RulesConfig.default()


class TestRulesValidation:
    """Тесты валидации правил."""

    def test_keywords_lowercased(self):
        data = {
            "amount": {"keywords": ["TOPLAM"]},
            "classification": {
                "rules": [{"category": "invoice", "confidence": 0.85, "keywords": ["FATURA"]}],
            },
        }
        config = RulesConfig.from_dict(data)
        assert config.amount_keywords == ("toplam",)
        assert config.rules[0].keywords == ("fatura",)
        # default секция необязательна
        assert config.default_category is Category.GENERIC
        assert config.default_confidence == 0.60

    def test_unknown_category(self):
        data = {**VALID_RULES, "classification": {
            "rules": [{"category": "receipt", "confidence": 0.5, "keywords": ["fis"]}],
        }}
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.from_dict(data)

    @pytest.mark.parametrize("confidence", [1.5, -0.1, "high", None])
    def test_invalid_confidence(self, confidence):
        data = {**VALID_RULES, "classification": {
            "rules": [{"category": "invoice", "confidence": confidence, "keywords": ["fatura"]}],
        }}
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.from_dict(data)

    def test_empty_keywords(self):
        data = {**VALID_RULES, "amount": {"keywords": []}}
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.from_dict(data)

    def test_rule_must_be_mapping(self):
        data = {**VALID_RULES, "classification": {"rules": ["fatura"]}}
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.from_dict(data)

    @pytest.mark.parametrize("data", [
        {**VALID_RULES, "amount": ["toplam"]},
        {**VALID_RULES, "classification": "invoice"},
        {**VALID_RULES, "classification": {"rules": [], "default": 5}},
        {**VALID_RULES, "classification": {"rules": {"category": "invoice"}}},
    ])
    def test_section_must_be_mapping(self, data):
        """Секция не того типа - ошибка конфигурации, а не AttributeError."""
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.from_dict(data)


class TestRulesLoading:
    """Тесты загрузки YAML файлов."""

    def test_load_from_file(self, tmp_path):
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            "amount:\n"
            "  keywords: [ödenecek]\n"
            "classification:\n"
            "  rules:\n"
            "    - category: business_card\n"
            "      confidence: 0.7\n"
            "      keywords: [gsm]\n",
            encoding="utf-8",
        )
        config = RulesConfig.load(rules_file)
        assert config.amount_keywords == ("ödenecek",)
        assert config.rules[0].category is Category.BUSINESS_CARD
        assert config.source_file == "rules.yaml"

    def test_missing_file(self, tmp_path):
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        rules_file = tmp_path / "broken.yaml"
        rules_file.write_text("amount: [unclosed\n", encoding="utf-8")
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.load(rules_file)

    def test_top_level_must_be_mapping(self, tmp_path):
        rules_file = tmp_path / "list.yaml"
        rules_file.write_text("- toplam\n", encoding="utf-8")
        with pytest.raises(AnalysisConfigurationError):
            RulesConfig.load(rules_file)
