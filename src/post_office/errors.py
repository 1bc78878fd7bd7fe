"""Exceptions raised while reading post-tonal notation."""

from __future__ import annotations


class PostalError(Exception):
    """Base class for every error raised by post_office."""


class ParsingFailure(PostalError):
    """Text could not be read as the expected kind of value.

    Attributes:
        text: The offending substring.
        expected: Label of the category the text should have matched,
            e.g. "note name", "pitch class" or "expression".
        column: 1-based column of the syntax error, when the grammar
            reported one.
        expected_tokens: Grammar terminals that would have been accepted
            at that column.
    """

    def __init__(
        self,
        text: str,
        expected: str,
        column: int | None = None,
        expected_tokens: frozenset[str] = frozenset(),
    ) -> None:
        article = "an" if expected[:1] in ("a", "e", "i", "o", "u") else "a"
        super().__init__(f"could not parse `{text}` as {article} {expected}")
        self.text = text
        self.expected = expected
        self.column = column
        self.expected_tokens = expected_tokens
