"""
Пайплайн для домена Analysis.

Обрабатывает OCR текст через:
1. Извлечение ссылок
2. Извлечение денежной суммы
3. Классификацию документа

ЦКП: ExtractionResult - ссылки, сумма и категория одного документа.

ВАЖНО: Пайплайн не хранит состояния между вызовами и не делает I/O
(кроме опционального OCR в analyze_image). "Нет сигнала" - нормальный
результат, а не ошибка.
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Iterable, List, Optional

from loguru import logger

from contracts.d1_extraction_dto import RawOCRResult
from contracts.d2_analysis_dto import ExtractionResult
from docscan.extraction.domain.exceptions import ExtractionError
from docscan.extraction.domain.interfaces import IOCRProvider
from ..domain.cancellation import CancellationToken
from ..domain.exceptions import AnalysisConfigurationError
from ..domain.interfaces import (
    IAnalysisPipeline,
    IAmountExtractor,
    IDocumentClassifier,
    ILinkExtractor,
)


class DocumentAnalysisPipeline(IAnalysisPipeline):
    """
    Пайплайн домена Analysis.

    Координирует:
    1. LinkExtractor
    2. AmountExtractor
    3. DocumentClassifier

    Компоненты независимы друг от друга и работают по одному и тому же тексту.
    """

    def __init__(
        self,
        link_extractor: ILinkExtractor,
        amount_extractor: IAmountExtractor,
        classifier: IDocumentClassifier,
        ocr_provider: Optional[IOCRProvider] = None,
        max_workers: Optional[int] = None
    ):
        """
        Инициализация пайплайна analysis.

        Args:
            link_extractor: Извлечение ссылок
            amount_extractor: Извлечение суммы
            classifier: Классификатор документа
            ocr_provider: Провайдер OCR (нужен только для analyze_image)
            max_workers: Потоки для batch_process (None = по умолчанию)
        """
        self.link_extractor = link_extractor
        self.amount_extractor = amount_extractor
        self.classifier = classifier
        self.ocr_provider = ocr_provider
        self.max_workers = max_workers

        logger.info("[Analysis] Pipeline инициализирован")

    def run(self, ocr_text: str, cancel_token: Optional[CancellationToken] = None) -> ExtractionResult:
        """
        Анализирует OCR текст.

        Args:
            ocr_text: Распознанный текст (может быть пустым)
            cancel_token: Токен отмены, проверяется между этапами

        Returns:
            ExtractionResult

        Raises:
            AnalysisCancelledError: Если токен отменён
        """
        text = ocr_text or ""

        logger.debug(f"[Analysis] Этап 1: Ссылки ({len(text)} символов)")
        self._checkpoint(cancel_token, "links")
        links = self.link_extractor.extract(text)

        logger.debug("[Analysis] Этап 2: Сумма")
        self._checkpoint(cancel_token, "amount")
        amount = self.amount_extractor.extract(text)

        logger.debug("[Analysis] Этап 3: Классификация")
        self._checkpoint(cancel_token, "classification")
        classification = self.classifier.classify(text)

        self._checkpoint(cancel_token, "assembly")
        result = ExtractionResult(
            raw_text=text,
            links=links,
            amount=amount,
            classification=classification
        )

        amount_info = f"{amount.amount} {amount.currency}" if amount else "нет"
        logger.info(
            f"[Analysis] Готово: {classification.category.value} ({classification.confidence}), "
            f"{len(links)} ссылок, сумма: {amount_info}"
        )

        return result

    def process_ocr_result(
        self,
        raw_ocr: RawOCRResult,
        cancel_token: Optional[CancellationToken] = None
    ) -> ExtractionResult:
        """Анализирует результат OCR (контракт D1->D2)."""
        if raw_ocr.metadata:
            logger.debug(f"[Analysis] Источник: {raw_ocr.metadata.source_file}")
        return self.run(raw_ocr.full_text, cancel_token)

    def analyze_image(
        self,
        image_content: bytes,
        source_file: str = "unknown",
        cancel_token: Optional[CancellationToken] = None
    ) -> ExtractionResult:
        """
        OCR + анализ одного изображения.

        Сбой OCR не является ошибкой анализа: результат строится
        по пустому тексту (пустые ссылки, нет суммы, GENERIC).

        Args:
            image_content: Байты изображения
            source_file: Имя исходного файла
            cancel_token: Токен отмены

        Returns:
            ExtractionResult
        """
        if self.ocr_provider is None:
            raise AnalysisConfigurationError(
                message="OCR провайдер не указан",
                component="DocumentAnalysisPipeline"
            )

        self._checkpoint(cancel_token, "ocr")

        try:
            raw_ocr = self.ocr_provider.recognize(image_content, source_file)
        except ExtractionError as e:
            logger.warning(f"[Analysis] OCR не удался для {source_file}, анализируем пустой текст: {e}")
            raw_ocr = RawOCRResult(full_text="")

        return self.process_ocr_result(raw_ocr, cancel_token)

    def submit(
        self,
        executor: Executor,
        ocr_text: str,
        cancel_token: Optional[CancellationToken] = None
    ) -> Future:
        """
        Запускает run() в переданном executor.

        Returns:
            Future с одним ExtractionResult (или AnalysisCancelledError)
        """
        return executor.submit(self.run, ocr_text, cancel_token)

    def batch_process(
        self,
        texts: Iterable[str],
        cancel_token: Optional[CancellationToken] = None
    ) -> List[ExtractionResult]:
        """
        Анализирует несколько текстов параллельно.

        Args:
            texts: OCR тексты
            cancel_token: Общий токен отмены для всего batch

        Returns:
            list[ExtractionResult] в порядке входных текстов
        """
        texts = list(texts)
        if not texts:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [self.submit(executor, text, cancel_token) for text in texts]
            results = [future.result() for future in futures]

        logger.info(f"[Analysis] Batch: {len(results)} документов")

        return results

    @staticmethod
    def _checkpoint(cancel_token: Optional[CancellationToken], stage: str) -> None:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled(stage)
