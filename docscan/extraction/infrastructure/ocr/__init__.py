from .google_vision_ocr import GoogleVisionOCR

__all__ = ["GoogleVisionOCR"]
