"""Tests for pitch_class.py."""

from itertools import permutations

import pytest
from lark import Token, Tree
from post_office.errors import ParsingFailure
from post_office.pitch_class import PitchClass


class TestFromInt:
    def test_in_range(self):
        assert PitchClass.from_int(0) is PitchClass.C
        assert PitchClass.from_int(11) is PitchClass.B

    def test_wraps_up(self):
        assert PitchClass.from_int(14) is PitchClass.D
        assert PitchClass.from_int(24) is PitchClass.C

    def test_wraps_down(self):
        assert PitchClass.from_int(-2) is PitchClass.Bb
        assert PitchClass.from_int(-145) is PitchClass.B

    def test_constructor_reduces(self):
        assert PitchClass(8) is PitchClass.Ab
        assert PitchClass(12) is PitchClass.C
        assert PitchClass(-145) is PitchClass.B

    def test_integral_float(self):
        assert PitchClass.from_int(15.0) is PitchClass.Eb

    def test_fractional_float_rejected(self):
        with pytest.raises(TypeError):
            PitchClass.from_int(1.5)

    @pytest.mark.parametrize("i", range(-30, 30))
    @pytest.mark.parametrize("k", [-3, -1, 1, 7])
    def test_modular_closure(self, i, k):
        assert PitchClass.from_int(i) is PitchClass.from_int(i + 12 * k)

    @pytest.mark.parametrize("pc", list(PitchClass))
    def test_round_trip(self, pc):
        assert PitchClass.from_int(int(pc)) is pc


class TestArithmetic:
    def test_add(self):
        assert PitchClass.A + 3 is PitchClass.C
        assert 3 + PitchClass.A is PitchClass.C

    def test_sub(self):
        assert PitchClass.C - 1 is PitchClass.B
        assert PitchClass.E - 16 is PitchClass.C

    def test_rsub_inverts(self):
        assert 0 - PitchClass.Eb is PitchClass.A

    def test_pitch_class_operand(self):
        assert PitchClass.G - PitchClass.D is PitchClass.F

    def test_non_integer_operand(self):
        with pytest.raises(TypeError):
            PitchClass.C + "1"

    @pytest.mark.parametrize("pc", list(PitchClass))
    @pytest.mark.parametrize("a", [-25, -1, 0, 5, 12, 100])
    def test_identity(self, pc, a):
        assert pc + a - a is pc


class TestFromText:
    @pytest.mark.parametrize("text, expected", [
        ("c", PitchClass.C),
        ("a♭", PitchClass.Ab),
        ("Abx#b", PitchClass.Bb),
        ("Fx", PitchClass.G),
        ("bbb", PitchClass.A),
        ("-8", PitchClass.E),
        ("F♭b", PitchClass.Eb),
        ("C♯", PitchClass.Db),
        ("Cs", PitchClass.Db),
        ("B𝄪", PitchClass.Db),
        ("D𝄫", PitchClass.C),
        ("En", PitchClass.E),
        ("G♮", PitchClass.G),
    ])
    def test_note_names(self, text, expected):
        assert PitchClass.from_text(text) is expected

    @pytest.mark.parametrize("text, expected", [
        ("0", PitchClass.C),
        ("7", PitchClass.G),
        ("↊", PitchClass.Bb),
        ("↋", PitchClass.B),
        ("t", PitchClass.Bb),
        ("T", PitchClass.Bb),
        ("e", PitchClass.B),
        ("E", PitchClass.B),
    ])
    def test_strict_integers(self, text, expected):
        assert PitchClass.from_text(text) is expected

    @pytest.mark.parametrize("text, expected", [
        ("10", PitchClass.C),      # twelve in base 12
        ("13", PitchClass.Eb),
        ("+5", PitchClass.F),
        ("-1", PitchClass.B),
        ("↊↋", PitchClass.B),
        ("-↊", PitchClass.D),
    ])
    def test_permissive_integers(self, text, expected):
        assert PitchClass.from_text(text) is expected

    def test_letter_e_with_accidental_is_a_note(self):
        assert PitchClass.from_text("Eb") is PitchClass.Eb
        assert PitchClass.from_text("e#") is PitchClass.F

    @pytest.mark.parametrize("text", ["", "♭bb", "H", "C4", " C", "C ", "1.5", "tt", "[0]"])
    def test_invalid(self, text):
        with pytest.raises(ParsingFailure) as exc:
            PitchClass.from_text(text)
        assert exc.value.expected == "pitch class"
        assert exc.value.text == text

    @pytest.mark.parametrize("accidentals", list(permutations("bx#♭")))
    def test_accidental_order_irrelevant(self, accidentals):
        assert PitchClass.from_text("A" + "".join(accidentals)) is PitchClass.A + 1

    def test_zero_shifts_integers(self):
        assert PitchClass.from_text("0", zero=PitchClass.D) is PitchClass.D
        assert PitchClass.from_text("-8", zero=PitchClass.A) is PitchClass.Db

    def test_zero_leaves_notes_alone(self):
        assert PitchClass.from_text("F", zero=PitchClass.D) is PitchClass.F


class TestFromTree:
    def test_unknown_accidental_counts_as_natural(self):
        tree = Tree("note", [
            Token("NOTE_NAME", "F"), Token("ACCIDENTAL", "?"), Token("ACCIDENTAL", "#"),
        ])
        assert PitchClass.from_tree(tree) is PitchClass.Gb

    def test_only_unknown_accidentals(self):
        tree = Tree("note", [Token("NOTE_NAME", "a"), Token("ACCIDENTAL", "~")])
        assert PitchClass.from_tree(tree) is PitchClass.A

    def test_unknown_letter(self):
        tree = Tree("note", [Token("NOTE_NAME", "H")])
        with pytest.raises(ParsingFailure) as exc:
            PitchClass.from_tree(tree)
        assert exc.value.expected == "note name"

    def test_unknown_node(self):
        with pytest.raises(ParsingFailure) as exc:
            PitchClass.from_tree(Tree("octave", [Token("OCTAVE", "4")]))
        assert exc.value.expected == "pitch class"


class TestFromNote:
    def test_note(self):
        assert PitchClass.from_note("E") is PitchClass.E
        assert PitchClass.from_note("bb") is PitchClass.Bb

    @pytest.mark.parametrize("text", ["0", "t", "C4", ""])
    def test_rejects_non_notes(self, text):
        with pytest.raises(ParsingFailure) as exc:
            PitchClass.from_note(text)
        assert exc.value.expected == "note name"


class TestDisplay:
    @pytest.mark.parametrize("i, expected", [
        (-1, "↋"),
        (0, "0"),
        (3, "3"),
        (11, "↋"),
        (12, "0"),
        (130, "↊"),
    ])
    def test_numerals(self, i, expected):
        assert str(PitchClass.from_int(i)) == expected

    def test_format(self):
        assert f"{PitchClass.Bb}" == "↊"
        assert f"[{PitchClass.D:>3}]" == "[  2]"

    @pytest.mark.parametrize("spec, expected", [
        ("d", "11"),
        ("03d", "011"),
        ("x", "b"),
        ("X", "B"),
        ("b", "1011"),
        ("o", "13"),
        ("n", "11"),
    ])
    def test_integer_format_codes(self, spec, expected):
        assert format(PitchClass.B, spec) == expected

    def test_string_format_code(self):
        assert f"{PitchClass.B:s}" == "↋"

    def test_relative_numeral(self):
        assert PitchClass.D.numeral(PitchClass.D) == "0"
        assert PitchClass.C.numeral(PitchClass.D) == "↊"

    def test_canonical_spelling(self):
        assert PitchClass.from_text("C#").name == "Db"
