"""Grammar for post-tonal notation."""

from post_office.grammar.parser import RULES, parse, source_text

__all__ = ["RULES", "parse", "source_text"]
