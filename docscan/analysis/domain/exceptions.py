"""
Исключения для домена Analysis.

Сам анализ текста не бросает исключений ни на каком входе:
пустой текст и отсутствие совпадений - нормальный результат.
Исключения возникают только при отмене и ошибках конфигурации.
"""

from typing import Optional


class AnalysisError(Exception):
    """Базовое исключение для ошибок домена Analysis."""
    
    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())
    
    def _format_message(self) -> str:
        msg = f"Analysis Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class AnalysisCancelledError(AnalysisError):
    """Анализ отменён через CancellationToken."""
    pass


class AnalysisConfigurationError(AnalysisError):
    """Ошибка конфигурации домена Analysis (правила, OCR провайдер)."""
    pass
