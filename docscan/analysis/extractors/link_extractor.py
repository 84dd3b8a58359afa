import re
from typing import Tuple
from loguru import logger

from ..domain.interfaces import ILinkExtractor


class LinkExtractor(ILinkExtractor):
    """
    Элемент-функция: Извлекает http(s) ссылки из OCR текста.
    
    Ссылка - это "http://" или "https://" и дальше один или больше символов
    из набора: буквы, цифры, _ и -._~:/?#[]@!$&'()*+,;=%
    Корректность URL не проверяется, повторы не удаляются.
    """
    
    URL_PATTERN = re.compile(r"https?://[\w\-._~:/?#\[\]@!$&'()*+,;=%]+", re.IGNORECASE)

    def extract(self, text: str) -> Tuple[str, ...]:
        """
        ЦКП: Ссылки в порядке появления в тексте.
        
        Args:
            text: OCR текст
            
        Returns:
            tuple[str, ...]: Ссылки (пустой кортеж если нет)
        """
        if not text:
            return ()
        
        links = tuple(m.group(0) for m in self.URL_PATTERN.finditer(text))
        logger.debug(f"[LinkExtractor] Найдено ссылок: {len(links)}")
        return links
