"""Static lookup tables for note names, accidentals and numerals.

Integer notation uses one reserved symbol per pitch class. 10 and 11 are
written with the Pitman digits ↊ and ↋; the transdecimal letters t/T and
e/E are accepted on input as synonyms but never displayed.
"""

from __future__ import annotations

from types import MappingProxyType

# Letter → pitch class (C = 0), both cases.
NOTE_NAMES: MappingProxyType[str, int] = MappingProxyType({
    "C": 0, "D": 2, "E": 4, "F": 5,
    "G": 7, "A": 9, "B": 11,
    "c": 0, "d": 2, "e": 4, "f": 5,
    "g": 7, "a": 9, "b": 11,
})

# Accidental symbol → offset in semitones.
ACCIDENTALS: MappingProxyType[str, int] = MappingProxyType({
    "𝄫": -2,
    "♭": -1, "b": -1,
    "♮": 0, "n": 0,
    "♯": 1, "s": 1, "#": 1,
    "𝄪": 2, "x": 2,
})

# Pitch class → display numeral.
NUMERALS: tuple[str, ...] = (
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "↊", "↋",
)

# Input-only synonyms for 10 and 11.
TRANSDECIMAL_NUMERALS: MappingProxyType[str, int] = MappingProxyType({
    "t": 10, "T": 10,
    "e": 11, "E": 11,
})
