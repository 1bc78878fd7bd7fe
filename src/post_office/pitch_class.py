"""Pitch classes: the twelve note values modulo the octave.

A pitch class can be written three ways:

- strict integer notation: one reserved numeral per value (0-9, ↊, ↋),
  with t/T and e/E accepted as synonyms for 10 and 11
- permissive integer notation: any signed base-12 numeral, reduced mod 12
  ("-8" is 4, "10" is twelve and therefore 0)
- a note name: a letter A-G in either case followed by any number of
  accidentals, whose offsets are summed ("Abx#b" is Bb)

Spellings are not retained: every value is stored as one of the twelve
canonical flats/naturals below.
"""

from __future__ import annotations

import logging
import operator
from enum import IntEnum

from lark import Tree

from post_office.errors import ParsingFailure
from post_office.grammar.parser import parse, source_text
from post_office.tables import ACCIDENTALS, NOTE_NAMES, NUMERALS, TRANSDECIMAL_NUMERALS

logger = logging.getLogger(__name__)

# Pitman digits → the letters int() understands in base 12.
_DOZENAL_DIGITS = str.maketrans({"↊": "a", "↋": "b"})


class PitchClass(IntEnum):
    """All notes sharing a name regardless of octave, C = 0."""

    C = 0
    Db = 1
    D = 2
    Eb = 3
    E = 4
    F = 5
    Gb = 6
    G = 7
    Ab = 8
    A = 9
    Bb = 10
    B = 11

    @classmethod
    def _missing_(cls, value):
        # PitchClass(14) is D, PitchClass(-1) is B.
        if isinstance(value, int):
            return cls(value % 12)
        return None

    @classmethod
    def from_int(cls, i) -> PitchClass:
        """Reduce any integer (or integral float) to its pitch class.

        Python's ``%`` with a positive modulus is already Euclidean, so
        negative values wrap around: -1 is B, -145 is B.

        Raises:
            TypeError: for non-integral or non-numeric values.
        """
        if isinstance(i, float):
            if not i.is_integer():
                raise TypeError(f"pitch class must be integral, got {i!r}")
            i = int(i)
        return cls(operator.index(i) % 12)

    @classmethod
    def from_text(cls, text: str, zero: PitchClass | None = None) -> PitchClass:
        """Parse integer notation or a note name.

        Integer notation counts up from ``zero`` (C unless given). Note
        names are absolute.

        Raises:
            ParsingFailure: if the text is not a pitch class.
        """
        logger.debug("Parsing string %r as a pitch class.", text)
        return cls.from_tree(parse(text, "pitch_class"), zero)

    @classmethod
    def from_note(cls, text: str) -> PitchClass:
        """Parse a note name only; integer notation is rejected."""
        logger.debug("Parsing string %r as a note name.", text)
        return cls.from_tree(parse(text, "note"))

    @classmethod
    def from_tree(cls, tree: Tree, zero: PitchClass | None = None) -> PitchClass:
        """Build a pitch class from a ``pitch_class`` or ``note`` subtree."""
        logger.debug("Descending into `%s` node.", tree.data)
        if tree.data == "pitch_class":
            (tree,) = tree.children
            logger.debug("Pitch class alternative: `%s`.", tree.data)

        offset = int(zero) if zero is not None else 0
        if tree.data == "integer_strict":
            return cls.from_int(offset + _parse_strict(str(tree.children[0])))
        if tree.data == "integer_permissive":
            return cls.from_int(offset + _parse_permissive(str(tree.children[0])))
        if tree.data == "note":
            return _parse_note(tree)

        raise ParsingFailure(source_text(tree), "pitch class")

    def numeral(self, zero: PitchClass | None = None) -> str:
        """Integer notation for this pitch class, counted from ``zero``."""
        if zero is None:
            return NUMERALS[self]
        return NUMERALS[self - zero]

    def __add__(self, other):
        try:
            offset = operator.index(other)
        except TypeError:
            return NotImplemented
        return PitchClass.from_int(int(self) + offset)

    __radd__ = __add__

    def __sub__(self, other):
        try:
            offset = operator.index(other)
        except TypeError:
            return NotImplemented
        return PitchClass.from_int(int(self) - offset)

    def __rsub__(self, other):
        try:
            offset = operator.index(other)
        except TypeError:
            return NotImplemented
        return PitchClass.from_int(offset - int(self))

    def __str__(self) -> str:
        return NUMERALS[self]

    def __format__(self, format_spec: str) -> str:
        # Integer presentation types format the value, everything else the numeral.
        if format_spec[-1:] in ("b", "c", "d", "n", "o", "x", "X"):
            return format(int(self), format_spec)
        return format(str(self), format_spec)


def _parse_strict(text: str) -> int:
    """Look up a single reserved numeral or transdecimal letter."""
    for i, numeral in enumerate(NUMERALS):
        if text == numeral:
            return i
    if text in TRANSDECIMAL_NUMERALS:
        return TRANSDECIMAL_NUMERALS[text]
    raise ParsingFailure(text, "integer pitch class")


def _parse_permissive(text: str) -> int:
    """Read a signed base-12 numeral."""
    try:
        return int(text.translate(_DOZENAL_DIGITS), 12)
    except ValueError as e:
        raise ParsingFailure(text, "integer pitch class") from e


def _parse_note(tree: Tree) -> PitchClass:
    """Letter plus accidentals. Unknown accidentals count as naturals."""
    name, *accidentals = tree.children
    base = NOTE_NAMES.get(str(name))
    if base is None:
        raise ParsingFailure(str(name), "note name")
    offset = sum(ACCIDENTALS.get(str(a), 0) for a in accidentals)
    return PitchClass.from_int(base + offset)
