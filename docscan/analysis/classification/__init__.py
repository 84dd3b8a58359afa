from .document_classifier import DocumentClassifier

__all__ = ["DocumentClassifier"]
