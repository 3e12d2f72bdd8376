"""Tests for ParseNcodeError."""

import pytest

from ncode import ParseNcodeError, decode


class TestParseNcodeError:
    def test_bare_message(self):
        assert str(ParseNcodeError()) == "ParseNcodeError"

    def test_message_with_position(self):
        err = ParseNcodeError("n1000c2", 6, "expected letter, got '2'")
        assert str(err) == "ParseNcodeError: expected letter, got '2' at position 6 in 'n1000c2'"

    def test_message_without_position(self):
        err = ParseNcodeError("n6835ylkt", None, "too big")
        assert str(err) == "ParseNcodeError: too big in 'n6835ylkt'"

    def test_repr(self):
        err = ParseNcodeError("x", 0, "expected marker 'n'")
        assert repr(err) == "ParseNcodeError(text='x', position=0, reason=\"expected marker 'n'\")"

    def test_is_value_error(self):
        assert issubclass(ParseNcodeError, ValueError)

    @pytest.mark.parametrize(
        "text,position",
        [
            ("", 0),
            ("x1000cb", 0),
            ("n12", 3),
            ("n1x00", 2),
            ("n1000c2", 6),
        ],
    )
    def test_decode_positions(self, text, position):
        with pytest.raises(ParseNcodeError) as exc_info:
            decode(text)
        assert exc_info.value.position == position
        assert exc_info.value.text == text
        assert exc_info.value.reason
