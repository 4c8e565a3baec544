"""Unit tests for the directive tokenizer.

Tests the functions in dviforge.core.tokenizer:
    - read_numbers: whitespace separated number scanning
    - tokenize_operands: Operands construction
    - is_command_code: TPic command code syntax
    - split_special: prefix / parameter split of a special
"""

import pytest

from dviforge.core.tokenizer import (
    Operands,
    is_command_code,
    read_numbers,
    split_special,
    tokenize_operands,
)


class TestReadNumbers:
    """Tests for read_numbers."""

    def test_integers(self):
        """Plain integers are read as floats."""
        assert read_numbers("1000 -250") == [1000.0, -250.0]

    def test_number_forms(self):
        """Signs, fractions and exponents are accepted."""
        assert read_numbers("+1.5 .25 -3. 2e3 1.5E-2") == [1.5, 0.25, -3.0, 2000.0, 0.015]

    def test_mixed_white_space(self):
        """Tabs and newlines separate numbers like blanks."""
        assert read_numbers("\t1\n 2  ") == [1.0, 2.0]

    def test_stops_at_word(self):
        """The first non-number ends the list."""
        assert read_numbers("1 2 abc 3") == [1.0, 2.0]

    def test_number_glued_to_text_is_not_a_number(self):
        """'12abc' is not read as 12."""
        assert read_numbers("12abc") == []

    def test_overflow_ends_the_list(self):
        """A number too large for a float is not a number."""
        assert read_numbers("1 1e400 2") == [1.0]
        assert read_numbers("-1e999") == []

    def test_empty(self):
        """An empty text has no numbers."""
        assert read_numbers("") == []


class TestOperands:
    """Tests for tokenize_operands and Operands."""

    def test_positional_access(self):
        """Operands index like a list and know their length."""
        ops = tokenize_operands("1 2 3")
        assert isinstance(ops, Operands)
        assert len(ops) == 3
        assert ops[1] == 2.0

    def test_get_with_default(self):
        """get() falls back to the default for missing arguments."""
        ops = tokenize_operands("4")
        assert ops.get(0, 1.0) == 4.0
        assert ops.get(1, 1.0) == 1.0
        assert ops.get(2) is None

    def test_raw_text_is_kept(self):
        """The raw parameter text stays available for custom parsing."""
        ops = tokenize_operands("DEAD BEEF")
        assert len(ops) == 0
        assert ops.text == "DEAD BEEF"

    def test_none_text(self):
        """A missing parameter text gives no operands."""
        ops = tokenize_operands(None)
        assert len(ops) == 0
        assert ops.text == ""


class TestCommandCode:
    """Tests for is_command_code."""

    @pytest.mark.parametrize("cmd", ["pa", "fp", "xy"])
    def test_valid(self, cmd):
        """Two lowercase letters form a command code."""
        assert is_command_code(cmd)

    @pytest.mark.parametrize("cmd", [None, "", "x", "xyz", "bk ", "Pa", "p1"])
    def test_invalid(self, cmd):
        """Anything else is rejected."""
        assert not is_command_code(cmd)


class TestSplitSpecial:
    """Tests for split_special."""

    def test_directive(self):
        """A TPic special splits into code and parameters."""
        assert split_special("pa 100 200") == ("pa", "100 200")

    def test_no_parameters(self):
        """A bare code has empty parameters."""
        assert split_special("fp") == ("fp", "")

    def test_leading_white_space(self):
        """White space before the prefix is skipped."""
        assert split_special("  sh 0.5") == ("sh", "0.5")

    def test_only_one_separator_is_dropped(self):
        """Further white space belongs to the parameters."""
        assert split_special("tx  ff") == ("tx", " ff")

    def test_punctuation_ends_prefix(self):
        """Prefixes followed by punctuation keep it in the parameters."""
        assert split_special("em:line 1,2") == ("em", ":line 1,2")

    def test_no_prefix(self):
        """Specials without a leading word have an empty prefix."""
        assert split_special(" \" text") == ("", "\" text")
