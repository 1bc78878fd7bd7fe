"""Parser for post-tonal notation.

The grammar lives in notation.lark next to this module and is compiled
once into an LALR parser with one start rule per entry point:

- ``expression``: a pitch class, a pitch or a collection of expressions
- ``pitch_class``: integer notation (strict or permissive) or a note name
- ``pitch``: a note name followed by a signed octave
- ``note``: a letter and its accidentals

Syntax errors raised by Lark are translated into ParsingFailure so that
callers only ever see the package's own error type.
"""

from __future__ import annotations

import logging

from lark import Lark, Token, Tree, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from post_office.errors import ParsingFailure

logger = logging.getLogger(__name__)

# Start rule → label used in error messages.
RULES: dict[str, str] = {
    "expression": "expression",
    "pitch_class": "pitch class",
    "pitch": "pitch",
    "note": "note name",
}

_PARSER = Lark.open(
    "notation.lark",
    rel_to=__file__,
    parser="lalr",
    start=list(RULES),
)


def parse(text: str, rule: str = "expression") -> Tree:
    """Parse ``text`` against one of the start rules and return its tree.

    The whole input must match; leading or trailing text is an error.

    Raises:
        ParsingFailure: if the text does not match ``rule``.
        KeyError: if ``rule`` is not a start rule.
    """
    label = RULES[rule]
    logger.debug("Matching %r against rule `%s`.", text, rule)
    try:
        return _PARSER.parse(text, start=rule)
    except UnexpectedInput as e:
        column = e.column if isinstance(e.column, int) and e.column > 0 else None
        logger.debug("Syntax error in %r at column %s: %s", text, column, e)
        raise ParsingFailure(
            text, label, column=column, expected_tokens=_expected_tokens(e),
        ) from e


def _expected_tokens(error: UnexpectedInput) -> frozenset[str]:
    """Terminal names the parser would have accepted at the error."""
    if isinstance(error, UnexpectedCharacters):
        return frozenset(error.allowed or ())
    if isinstance(error, (UnexpectedToken, UnexpectedEOF)):
        return frozenset(error.expected or ())
    return frozenset()


def source_text(tree: Tree) -> str:
    """Reassemble the matched text of a subtree, without punctuation."""
    return "".join(tree.scan_values(lambda v: isinstance(v, Token)))
