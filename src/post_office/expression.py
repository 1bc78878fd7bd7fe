"""Post-tonal expressions: pitch classes, pitches and collections of them.

Collections nest arbitrarily. Square brackets make an ordered collection
(a row), curly braces an unordered one (a set)::

    [0, 1, 4]           ordered pitch classes
    {C4, E4, G4}        unordered pitches
    [{0, 4}, {7, ↊}]    a row of sets

Elements are kept exactly as written: unordered collections are not
deduplicated or sorted.

A lone e or E is integer notation for 11, not the note E, so `{C, E, G}`
reads as `{0, ↋, 7}`. Write the major triad as `{C, En, G}` or `{0, 4, 7}`;
with accidentals or an octave (`Eb`, `E4`) the letter is always a note.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from lark import Tree

from post_office.errors import ParsingFailure
from post_office.grammar.parser import parse, source_text
from post_office.pitch import Pitch
from post_office.pitch_class import PitchClass

logger = logging.getLogger(__name__)


class CollectionKind(Enum):
    ORDERED = "[]"
    UNORDERED = "{}"


@dataclass(frozen=True)
class Collection:
    """A sequence of nested expressions tagged ordered or unordered."""

    elements: tuple[Expression, ...]
    kind: CollectionKind = CollectionKind.ORDERED

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    @property
    def ordered(self) -> bool:
        return self.kind is CollectionKind.ORDERED

    def __iter__(self):
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def format(self, zero: PitchClass | None = None) -> str:
        opening, closing = self.kind.value
        inner = ", ".join(format_expression(e, zero) for e in self.elements)
        return f"{opening}{inner}{closing}"

    def __str__(self) -> str:
        return self.format()


Expression = PitchClass | Pitch | Collection


def parse_expression(text: str, zero: PitchClass | None = None) -> Expression:
    """Parse a complete expression.

    Args:
        text: The expression, e.g. ``"{0, 4, 7}"`` or ``"Bb3"``.
        zero: Pitch class that integer notation counts from (default C).

    Raises:
        ParsingFailure: if any part of the text fails to parse; a bad
            element fails its whole collection.
    """
    logger.debug("Parsing string %r as an expression.", text)
    return expression_from_tree(parse(text, "expression"), zero)


def expression_from_tree(tree: Tree, zero: PitchClass | None = None) -> Expression:
    """Classify an already parsed subtree, recursing into collections."""
    logger.debug("Descending into `%s` node.", tree.data)
    if tree.data == "expression":
        (child,) = tree.children
        return expression_from_tree(child, zero)
    if tree.data == "pitch_class":
        return PitchClass.from_tree(tree, zero)
    if tree.data == "pitch":
        return Pitch.from_tree(tree)
    if tree.data == "ordered":
        return Collection(
            tuple(expression_from_tree(child, zero) for child in tree.children),
            CollectionKind.ORDERED,
        )
    if tree.data == "unordered":
        return Collection(
            tuple(expression_from_tree(child, zero) for child in tree.children),
            CollectionKind.UNORDERED,
        )

    raise ParsingFailure(source_text(tree), "expression")


def format_expression(expression: Expression, zero: PitchClass | None = None) -> str:
    """Display form of an expression; integers are counted from ``zero``."""
    if isinstance(expression, PitchClass):
        return expression.numeral(zero)
    if isinstance(expression, Pitch):
        return str(expression)
    if isinstance(expression, Collection):
        return expression.format(zero)
    raise TypeError(f"Not an expression: {expression!r}")
