"""Pitches: a pitch class fixed to an octave."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import total_ordering

from lark import Tree

from post_office.errors import ParsingFailure
from post_office.grammar.parser import parse, source_text
from post_office.pitch_class import PitchClass

logger = logging.getLogger(__name__)


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """A pitch class and an octave.

    Pitches order by octave first, then by pitch class within the octave,
    so G2 < C4 < F4. Octaves are unbounded signed integers.
    """

    pitch_class: PitchClass
    octave: int

    def __post_init__(self) -> None:
        if not isinstance(self.pitch_class, PitchClass):
            object.__setattr__(self, "pitch_class", PitchClass.from_int(self.pitch_class))

    @classmethod
    def from_text(cls, text: str) -> Pitch:
        """Parse a note name followed by an octave, e.g. ``Eb4`` or ``C-1``.

        Raises:
            ParsingFailure: if the text is not a pitch.
        """
        logger.debug("Parsing string %r as a pitch.", text)
        return cls.from_tree(parse(text, "pitch"))

    @classmethod
    def from_tree(cls, tree: Tree) -> Pitch:
        """Build a pitch from a ``pitch`` subtree."""
        logger.debug("Descending into `%s` node.", tree.data)
        if tree.data != "pitch":
            raise ParsingFailure(source_text(tree), "pitch")
        note, octave = tree.children
        return cls(PitchClass.from_tree(note), int(octave.children[0]))

    def _sort_key(self) -> tuple[int, int]:
        return (self.octave, int(self.pitch_class))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.pitch_class.name}{self.octave}"
