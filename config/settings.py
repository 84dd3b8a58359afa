"""
Настройки проекта DocScan Text.

ВАЖНО: Для OCR через Google Vision укажите путь к credentials файлу!
Анализ текста (ссылки, сумма, категория) работает и без него.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_DIR = PROJECT_ROOT / "docscan"

# =============================================================================
# GOOGLE CLOUD VISION API
# =============================================================================
# Путь к JSON-файлу с ключом сервисного аккаунта
GOOGLE_APPLICATION_CREDENTIALS = os.getenv(
    "GOOGLE_APPLICATION_CREDENTIALS",
    str(PROJECT_ROOT / "config" / "google_credentials.json")
)

# Языки распознавания (подсказка OCR): турецкий + английский
OCR_LANGUAGE_HINTS = [
    hint.strip()
    for hint in os.getenv("DOCSCAN_OCR_LANGUAGE_HINTS", "tr,en").split(",")
    if hint.strip()
]

# =============================================================================
# НАСТРОЙКИ АНАЛИЗА ТЕКСТА
# =============================================================================
# YAML с правилами классификации и ключевыми словами суммы
RULES_CONFIG_PATH = Path(os.getenv(
    "DOCSCAN_RULES_PATH",
    str(PACKAGE_DIR / "analysis" / "rules" / "default.yaml")
))

# Количество потоков для batch-обработки (None = по умолчанию ThreadPoolExecutor)
_batch_workers = os.getenv("DOCSCAN_BATCH_MAX_WORKERS")
BATCH_MAX_WORKERS = int(_batch_workers) if _batch_workers else None

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("DOCSCAN_LOG_LEVEL", "INFO")

# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config(require_ocr: bool = False):
    """Проверяет корректность конфигурации."""
    errors = []

    if not RULES_CONFIG_PATH.exists():
        errors.append(f"Файл правил не найден: {RULES_CONFIG_PATH}")

    if BATCH_MAX_WORKERS is not None and BATCH_MAX_WORKERS < 1:
        errors.append(f"DOCSCAN_BATCH_MAX_WORKERS должен быть >= 1, получено {BATCH_MAX_WORKERS}")

    if require_ocr:
        if not GOOGLE_APPLICATION_CREDENTIALS:
            errors.append(
                "GOOGLE_APPLICATION_CREDENTIALS не указан!\n"
                "Укажите путь к JSON-ключу в config/settings.py или через переменную окружения."
            )
        elif not Path(GOOGLE_APPLICATION_CREDENTIALS).exists():
            errors.append(
                f"Файл credentials не найден: {GOOGLE_APPLICATION_CREDENTIALS}"
            )

    if errors:
        raise ValueError("\n".join(errors))

    return True
