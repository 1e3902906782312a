"""
Open document store.

Holds the text of every document the editor has opened together with its
word frequencies. Documents are replaced wholesale on each change and are
kept for the lifetime of the process unless eviction is enabled.
"""

from __future__ import annotations

from collections.abc import Container, Iterator
from dataclasses import dataclass

from wordls.context.tokenizer import tokenize


class DocumentNotOpenError(KeyError):
    """Raised when a document is looked up before it was opened."""

    def __init__(self, uri: str) -> None:
        super().__init__(uri)
        self.uri = uri

    def __str__(self) -> str:
        return f"Document not open: {self.uri}"


@dataclass(frozen=True)
class OpenDocument:
    """An open document and the word counts derived from its text."""

    uri: str
    text: str
    frequencies: dict[str, int]


class DocumentStore:
    """
    In-memory mapping of URI to OpenDocument.

    The store owns tokenization so a record's frequencies always match its
    text.

    Usage:
        store = DocumentStore(keywords=KeywordTable.default())
        store.put("file:///a.py", "cat cat dog")
        store.get("file:///a.py").frequencies  # {"cat": 2, "dog": 1}
    """

    def __init__(self, keywords: Container[str] = ()) -> None:
        self.keywords = keywords
        self._documents: dict[str, OpenDocument] = {}

    def put(self, uri: str, text: str) -> OpenDocument:
        """Store text for uri, replacing any previous record."""
        document = OpenDocument(uri, text, tokenize(text, self.keywords))
        self._documents[uri] = document
        return document

    def get(self, uri: str) -> OpenDocument:
        """
        Look up an open document.

        Raises:
            DocumentNotOpenError: If uri was never put
        """
        try:
            return self._documents[uri]
        except KeyError:
            raise DocumentNotOpenError(uri) from None

    def remove(self, uri: str) -> bool:
        """Forget a document. Returns False if it was not open."""
        return self._documents.pop(uri, None) is not None

    def uris(self) -> list[str]:
        return list(self._documents)

    def __contains__(self, uri: object) -> bool:
        return uri in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[OpenDocument]:
        return iter(self._documents.values())
