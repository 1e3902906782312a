"""Text analysis: tokenizing documents and resolving the cursor context."""
from .cursor import CursorContext, resolve_cursor
from .tokenizer import is_identifier_char, tokenize

__all__ = ['CursorContext', 'resolve_cursor', 'is_identifier_char', 'tokenize']
