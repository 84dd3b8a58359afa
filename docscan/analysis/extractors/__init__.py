from .link_extractor import LinkExtractor
from .amount_extractor import AmountExtractor, normalize_amount

__all__ = ["LinkExtractor", "AmountExtractor", "normalize_amount"]
