"""
Cursor context resolution.

Works out which word is being typed at an LSP position and which dotted
path leads up to it. For ``foo.bar.ba|z`` the lead-up is ``["foo", "bar"]``
and the partial word is ``"ba"``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wordls.context.tokenizer import is_identifier_char


@dataclass
class CursorContext:
    """The word under the cursor and the dotted segments before it."""

    partial: str = ""
    lead_up: list[str] = field(default_factory=list)

    @property
    def dotted(self) -> str:
        """Lead-up and partial joined the way they appear in the text."""
        return "".join(f"{segment}." for segment in self.lead_up) + self.partial


def resolve_cursor(text: str, line: int, character: int) -> CursorContext:
    """
    Resolve the completion context at a zero-based (line, character) position.

    Only the target line is tokenized. A ``.`` pushes the current word onto
    the lead-up, any other delimiter discards both the word and the lead-up.
    The partial word is taken at the cursor offset; the lead-up is whatever
    the target line had accumulated when the scan stopped. Positions that do
    not exist in the text are not an error.

    Args:
        text: Full document content
        line: Zero-based line of the cursor
        character: Zero-based offset of the cursor within the line

    Returns:
        CursorContext with the partial word and its lead-up
    """
    partial = ""

    current_line = 0
    line_pos = 0
    word: list[str] = []
    lead_up: list[str] = []

    for c in text:
        line_pos += 1

        if c == "\n":
            if current_line == line and line_pos == character:
                partial = "".join(word)

            current_line += 1
            line_pos = 0
            if current_line > line:
                break
        elif current_line == line:
            if is_identifier_char(c):
                word.append(c)
            elif c == ".":
                lead_up.append("".join(word))
                word = []
            else:
                lead_up = []
                word = []

            if line_pos == character:
                partial = "".join(word)

    # Cursor one past the last character of the final line
    if line_pos + 1 == character and current_line == line:
        partial = "".join(word)

    return CursorContext(partial, lead_up)
