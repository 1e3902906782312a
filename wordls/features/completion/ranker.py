"""
Frequency-based completion ranking.

Editors sort completion items by their ``sortText`` string, so frequency
is encoded as a fixed-width number that sorts the most frequent word first:
``1_000_000 - count`` left-padded with zeros to six digits. A count of 2
gives ``"999998"``, a keyword weight of 11 gives ``"999989"``.

Counts of a million or more make the number zero or negative and the
padding stops preserving the order. Nothing fails, the items just sort
oddly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

SORT_BASE = 1_000_000
SORT_TEXT_WIDTH = 6


class CandidateSource(Enum):
    """Where a completion candidate came from."""

    DOCUMENT = "document"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class CompletionCandidate:
    label: str
    count: int
    source: CandidateSource

    @property
    def sort_text(self) -> str:
        return make_sort_text(self.count)


def make_sort_text(count: int) -> str:
    """Encode count so that ascending string order is descending count."""
    return str(SORT_BASE - count).rjust(SORT_TEXT_WIDTH, "0")


def rank_candidates(
    partial: str,
    doc_frequencies: Mapping[str, int],
    keyword_frequencies: Mapping[str, int],
) -> list[CompletionCandidate]:
    """
    Build the ordered candidate list for a completion request.

    Every word is offered; there is no prefix filtering. Only the word
    being typed is left out. Document words come before keywords when
    their sort text is equal.

    Args:
        partial: The word under the cursor
        doc_frequencies: Word counts of the open document
        keyword_frequencies: Keyword table weights

    Returns:
        Candidates sorted by sort text
    """
    candidates: list[CompletionCandidate] = []
    seen: set[str] = {partial}

    sources = (
        (doc_frequencies, CandidateSource.DOCUMENT),
        (keyword_frequencies, CandidateSource.KEYWORD),
    )
    for frequencies, source in sources:
        for label, count in frequencies.items():
            if label in seen:
                continue
            seen.add(label)
            candidates.append(CompletionCandidate(label, count, source))

    # sorted() is stable, so ties keep document-then-keyword order
    return sorted(candidates, key=lambda candidate: candidate.sort_text)
