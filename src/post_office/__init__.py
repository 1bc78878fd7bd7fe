"""post_office: parse and represent post-tonal musical notation.

Pitch classes, pitches and ordered/unordered collections of them are read
from text and displayed in integer notation::

    >>> from post_office import parse_expression
    >>> str(parse_expression("{C, Eb, G}"))
    '{0, 3, 7}'
"""

from post_office.errors import ParsingFailure, PostalError
from post_office.expression import (
    Collection, CollectionKind, Expression,
    expression_from_tree, format_expression, parse_expression,
)
from post_office.pitch import Pitch
from post_office.pitch_class import PitchClass

__version__ = "0.1.0"

__all__ = [
    "Collection", "CollectionKind", "Expression",
    "ParsingFailure", "Pitch", "PitchClass", "PostalError",
    "expression_from_tree", "format_expression", "parse_expression",
]
