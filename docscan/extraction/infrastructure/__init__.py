"""
Infrastructure слой домена Extraction.

Конкретные реализации IOCRProvider.
"""
