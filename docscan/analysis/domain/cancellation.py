"""
Токен отмены для пайплайна анализа.

Проверяется только между этапами пайплайна: уже начатое извлечение
ссылок или суммы всегда доходит до конца.
"""

import threading

from .exceptions import AnalysisCancelledError


class CancellationToken:
    """Потокобезопасный флаг отмены, разделяемый вызывающим кодом и пайплайном."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, stage: str = "") -> None:
        """Бросает AnalysisCancelledError, если токен отменён."""
        if self._event.is_set():
            raise AnalysisCancelledError(
                message=f"Анализ отменён перед этапом '{stage}'" if stage else "Анализ отменён",
                component="CancellationToken"
            )
