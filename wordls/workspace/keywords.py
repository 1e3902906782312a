"""
Static keyword table.

Keywords and builtins are always offered as completions with the same low
weight, and are never counted as document words.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

DEFAULT_KEYWORD_WEIGHT = 11

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "for", "range", "import", "int", "if", "elif", "else", "in", "open",
    "sort", "sorted", "def", "print", "continue", "break", "return", "not",
    "del", "eval", "True", "False", "str", "while", "and", "as", "is", "or",
    "try", "except", "finally", "raise", "assert", "with", "lambda", "yield",
    "async", "await", "class", "from", "global", "nonlocal", "pass", "None",
    "abs", "all", "any", "ascii", "bin", "bool", "breakpoint", "bytearray",
    "bytes", "callable", "chr", "classmethod", "compile", "complex",
    "delattr", "dict", "dir", "divmod", "enumerate", "exec", "filter",
    "float", "format", "frozenset", "getattr", "globals", "hasattr", "hash",
    "help", "hex", "id", "input", "isinstance", "issubclass", "iter", "len",
    "list", "locals", "map", "max", "memoryview", "min", "next", "object",
    "oct", "pow", "property", "repr", "reversed", "round", "set", "setattr",
    "slice", "staticmethod", "sum", "super", "tuple", "type", "vars", "zip",
    "__import__",
)


class KeywordTable(Mapping[str, int]):
    """
    Read-only mapping of reserved word to completion weight.

    Usage:
        table = KeywordTable.default()
        table["lambda"]  # 11
        "lambda" in table  # True
    """

    def __init__(
        self,
        words: Iterable[str] = DEFAULT_KEYWORDS,
        weight: int = DEFAULT_KEYWORD_WEIGHT,
    ) -> None:
        self.weight = weight
        self._weights = MappingProxyType(dict.fromkeys(words, weight))

    @classmethod
    def default(cls) -> KeywordTable:
        return cls()

    @classmethod
    def with_extra(
        cls, extra: Iterable[str], weight: int = DEFAULT_KEYWORD_WEIGHT
    ) -> KeywordTable:
        """Default keywords followed by extra words, all with one weight."""
        return cls((*DEFAULT_KEYWORDS, *extra), weight)

    def __getitem__(self, word: str) -> int:
        return self._weights[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"KeywordTable({len(self)} words, weight={self.weight})"
