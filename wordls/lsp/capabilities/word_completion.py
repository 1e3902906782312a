"""
Word completion capability.

Offers every word of the current document, most frequent first, together
with the keyword table.
"""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    InsertTextFormat,
)

from wordls.context.cursor import resolve_cursor
from wordls.features.completion.ranker import CompletionCandidate, rank_candidates
from wordls.lsp.capabilities.capabilities import CompletionCapability
from wordls.lsp.errors import DecodeError

# Wire value 3, what clients have always received from this server
WORD_ITEM_KIND = CompletionItemKind.Function


def to_completion_item(candidate: CompletionCandidate) -> CompletionItem:
    return CompletionItem(
        label=candidate.label,
        kind=WORD_ITEM_KIND,
        insert_text=candidate.label,
        insert_text_format=InsertTextFormat.PlainText,
        sort_text=candidate.sort_text,
    )


class WordCompletionCapability(CompletionCapability):
    """Provides frequency-ranked word completion for any document."""

    @property
    def name(self) -> str:
        return "word_completion"

    @property
    def description(self) -> str:
        return "Complete words seen in the document and common keywords, most frequent first"

    async def can_handle(self, params: CompletionParams) -> bool:
        return True

    async def complete(self, params: CompletionParams) -> CompletionList:
        """
        Rank candidates for the word under the cursor.

        Raises:
            DecodeError: If the request names no document
            DocumentNotOpenError: If the document was never opened
        """
        uri = params.text_document.uri
        if not uri:
            raise DecodeError(TEXT_DOCUMENT_COMPLETION, "textDocument.uri is empty")

        document = self.server.document_store.get(uri)

        position = params.position
        context = resolve_cursor(document.text, position.line, position.character)
        self.server.log(context.dotted)

        candidates = rank_candidates(
            context.partial, document.frequencies, self.server.keyword_table
        )

        return CompletionList(
            is_incomplete=False,
            items=[to_completion_item(c) for c in candidates],
        )
