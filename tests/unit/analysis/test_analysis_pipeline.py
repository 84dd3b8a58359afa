"""
Unit тесты для пайплайна домена Analysis.

Проверяют:
1. Сборку ExtractionResult из трёх компонентов
2. Пустой текст и сбой OCR -> пустой результат, а не ошибка
3. Отмену между этапами
4. Futures и batch-обработку
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from contracts.d1_extraction_dto import RawOCRResult, OCRMetadata
from contracts.d2_analysis_dto import Category, ExtractionResult
from docscan.analysis.application.factory import AnalysisComponentFactory
from docscan.analysis.domain.cancellation import CancellationToken
from docscan.analysis.domain.exceptions import AnalysisCancelledError, AnalysisConfigurationError
from docscan.analysis.extractors.amount_extractor import AmountExtractor
from docscan.analysis.rules_config import RulesConfig
from docscan.extraction.domain.exceptions import OCRResponseError
from docscan.extraction.domain.interfaces import IOCRProvider


INVOICE_TEXT = (
    "FATURA\n"
    "Web: https://firma.com.tr/fatura?id=42\n"
    "KDV: 188,32 TL\n"
    "Toplam: 1.234,56 TL"
)


class StaticOCR(IOCRProvider):
    """OCR провайдер, возвращающий заранее заданный текст."""

    def __init__(self, text):
        self.text = text
        self.calls = []

    def recognize(self, image_content, source_file="unknown"):
        self.calls.append(source_file)
        return RawOCRResult(
            full_text=self.text,
            metadata=OCRMetadata(source_file=source_file, processed_at="2026-01-01T00:00:00")
        )


class FailingOCR(IOCRProvider):
    def recognize(self, image_content, source_file="unknown"):
        raise OCRResponseError(message="quota exceeded", component="FailingOCR")


@pytest.fixture
def rules():
    return RulesConfig.default()


@pytest.fixture
def pipeline(rules):
    return AnalysisComponentFactory.create_analysis_pipeline(rules=rules, max_workers=4)


def assert_empty_result(result: ExtractionResult):
    assert result.links == ()
    assert result.amount is None
    assert result.classification.category is Category.GENERIC
    assert result.classification.confidence == 0.60


class TestRun:
    """Тесты основного сценария run()."""

    def test_invoice_document(self, pipeline):
        result = pipeline.run(INVOICE_TEXT)

        assert result.raw_text == INVOICE_TEXT
        assert result.links == ("https://firma.com.tr/fatura?id=42",)
        assert result.amount.amount == 1234.56
        assert result.amount.currency == "TL"
        assert result.classification.category is Category.INVOICE
        assert result.classification.confidence == 0.85

    def test_empty_text(self, pipeline):
        result = pipeline.run("")
        assert result.raw_text == ""
        assert_empty_result(result)
        assert result.has_signal() is False

    def test_none_text_treated_as_empty(self, pipeline):
        assert_empty_result(pipeline.run(None))

    def test_idempotent(self, pipeline):
        """Два прогона одного текста дают одинаковый результат."""
        first = pipeline.run(INVOICE_TEXT)
        second = pipeline.run(INVOICE_TEXT)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_result_is_frozen(self, pipeline):
        result = pipeline.run(INVOICE_TEXT)
        with pytest.raises(Exception):
            result.raw_text = "changed"

    def test_process_ocr_result(self, pipeline):
        raw_ocr = RawOCRResult(
            full_text="Ahmet Yılmaz\nTel: 0532 000 00 00",
            metadata=OCRMetadata(source_file="kartvizit", processed_at="2026-01-01T00:00:00")
        )
        result = pipeline.process_ocr_result(raw_ocr)
        assert result.classification.category is Category.BUSINESS_CARD


class TestCancellation:
    """Тесты отмены через CancellationToken."""

    def test_cancelled_before_start(self, pipeline):
        token = CancellationToken()
        token.cancel()
        with pytest.raises(AnalysisCancelledError):
            pipeline.run(INVOICE_TEXT, cancel_token=token)

    def test_not_cancelled(self, pipeline):
        token = CancellationToken()
        result = pipeline.run(INVOICE_TEXT, cancel_token=token)
        assert token.is_cancelled is False
        assert result.amount.amount == 1234.56

    def test_running_stage_completes_before_cancel(self, rules):
        """Отмена во время извлечения суммы не прерывает его, а срабатывает перед следующим этапом."""
        token = CancellationToken()
        finished = []

        class CancellingAmountExtractor(AmountExtractor):
            def extract(self, text):
                token.cancel()
                result = super().extract(text)
                finished.append(result)
                return result

        pipeline = AnalysisComponentFactory.create_analysis_pipeline(rules=rules)
        pipeline.amount_extractor = CancellingAmountExtractor(rules.amount_keywords)

        with pytest.raises(AnalysisCancelledError) as exc_info:
            pipeline.run(INVOICE_TEXT, cancel_token=token)

        assert finished[0].amount == 1234.56
        assert "classification" in str(exc_info.value)


class TestAnalyzeImage:
    """Тесты OCR + анализа."""

    def test_ocr_text_analyzed(self, rules):
        ocr = StaticOCR("Total: 1,234.56 USD\nInvoice")
        pipeline = AnalysisComponentFactory.create_analysis_pipeline(ocr_provider=ocr, rules=rules)

        result = pipeline.analyze_image(b"image-bytes", source_file="scan_001")

        assert ocr.calls == ["scan_001"]
        assert result.amount.amount == 1234.56
        assert result.amount.currency == "USD"
        assert result.classification.category is Category.INVOICE

    def test_ocr_failure_degrades_to_empty_result(self, rules):
        pipeline = AnalysisComponentFactory.create_analysis_pipeline(ocr_provider=FailingOCR(), rules=rules)
        assert_empty_result(pipeline.analyze_image(b"image-bytes"))

    def test_ocr_empty_text(self, rules):
        pipeline = AnalysisComponentFactory.create_analysis_pipeline(ocr_provider=StaticOCR(""), rules=rules)
        assert_empty_result(pipeline.analyze_image(b"image-bytes"))

    def test_without_ocr_provider(self, pipeline):
        with pytest.raises(AnalysisConfigurationError):
            pipeline.analyze_image(b"image-bytes")

    def test_recognize_from_file(self, tmp_path):
        image = tmp_path / "fis_01.jpg"
        image.write_bytes(b"\xff\xd8\xff")
        ocr = StaticOCR("metin")

        raw_ocr = ocr.recognize_from_file(image)

        assert ocr.calls == ["fis_01"]
        assert raw_ocr.metadata.source_file == "fis_01"


class TestConcurrency:
    """Тесты futures и batch-обработки."""

    def test_submit_returns_future(self, pipeline):
        with ThreadPoolExecutor(max_workers=2) as executor:
            future = pipeline.submit(executor, INVOICE_TEXT)
            result = future.result(timeout=10)
        assert result.classification.category is Category.INVOICE

    def test_submit_cancelled_future_raises(self, pipeline):
        token = CancellationToken()
        token.cancel()
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = pipeline.submit(executor, INVOICE_TEXT, token)
            with pytest.raises(AnalysisCancelledError):
                future.result(timeout=10)

    def test_batch_preserves_order(self, pipeline):
        texts = [INVOICE_TEXT, "", "GSM: 0532", "Çay 12.00 TL\nYemek 50.00 TL"] * 5
        results = pipeline.batch_process(texts)

        assert len(results) == len(texts)
        assert [r.raw_text for r in results] == texts
        assert results[0].classification.category is Category.INVOICE
        assert results[1].classification.category is Category.GENERIC
        assert results[2].classification.category is Category.BUSINESS_CARD
        assert results[3].amount.amount == 50.00

    def test_batch_matches_sequential(self, pipeline):
        texts = [INVOICE_TEXT, "https://a.com https://a.com", "T.C. Kimlik"]
        assert pipeline.batch_process(texts) == [pipeline.run(t) for t in texts]

    def test_empty_batch(self, pipeline):
        assert pipeline.batch_process([]) == []
