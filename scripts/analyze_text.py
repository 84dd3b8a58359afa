#!/usr/bin/env python3
"""
Точка входа для домена Analysis (ссылки, сумма, категория документа).

Использование:
    # Проанализировать текстовые файлы с OCR текстом
    python scripts/analyze_text.py scan_1.txt scan_2.txt

    # Текст из stdin
    echo "Toplam: 1.234,56 TL" | python scripts/analyze_text.py

    # Изображения через Google Vision OCR
    python scripts/analyze_text.py --image photo.jpg

    # Свои правила классификации
    python scripts/analyze_text.py --rules my_rules.yaml scan.txt
"""

import sys
import argparse
import json
from pathlib import Path
from typing import Optional

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import validate_config
from docscan import configure_logging
from docscan.analysis import AnalysisComponentFactory, RulesConfig
from docscan.analysis.domain.exceptions import AnalysisError
from contracts.d2_analysis_dto import ExtractionResult


def print_result(name: str, result: ExtractionResult, as_record: bool) -> None:
    """Печатает результат анализа в JSON."""
    payload = result.to_document_record() if as_record else result.model_dump(mode="json")
    print(json.dumps({"source": name, "result": payload}, ensure_ascii=False, indent=2))


def main(argv: Optional[list] = None) -> int:
    """Главная функция запуска домена Analysis."""
    parser = argparse.ArgumentParser(description="DocScan Text Analysis")
    parser.add_argument("paths", nargs="*", help="Файлы с OCR текстом (по умолчанию stdin)")
    parser.add_argument("--image", action="append", default=[], help="Изображение для OCR (можно несколько)")
    parser.add_argument("--rules", help="YAML с правилами анализа")
    parser.add_argument("--record", action="store_true", help="Печатать плоскую запись для хранилища")
    parser.add_argument("--log-level", default=None, help="Уровень логирования (DEBUG, INFO, ...)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        validate_config(require_ocr=bool(args.image))
        rules = RulesConfig.load(args.rules) if args.rules else None
        ocr_provider = None
        if args.image:
            from docscan.extraction.infrastructure.ocr.google_vision_ocr import GoogleVisionOCR
            ocr_provider = GoogleVisionOCR()
        pipeline = AnalysisComponentFactory.create_analysis_pipeline(ocr_provider=ocr_provider, rules=rules)
    except Exception as e:
        logger.error(f"[Analysis] Не удалось создать пайплайн: {e}")
        return 1

    try:
        for image in args.image:
            image_path = Path(image)
            with open(image_path, "rb") as f:
                result = pipeline.analyze_image(f.read(), source_file=image_path.stem)
            print_result(image_path.name, result, args.record)

        for path in args.paths:
            text = Path(path).read_text(encoding="utf-8")
            print_result(Path(path).name, pipeline.run(text), args.record)

        if not args.paths and not args.image:
            print_result("stdin", pipeline.run(sys.stdin.read()), args.record)
    except (OSError, AnalysisError) as e:
        logger.error(f"[Analysis] Ошибка: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
