"""In-memory workspace state for wordls."""
from .document_store import DocumentNotOpenError, DocumentStore, OpenDocument
from .keywords import DEFAULT_KEYWORDS, KeywordTable

__all__ = [
    'DocumentNotOpenError',
    'DocumentStore',
    'OpenDocument',
    'DEFAULT_KEYWORDS',
    'KeywordTable',
]
