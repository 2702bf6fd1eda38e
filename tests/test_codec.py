"""
Tests for the compact answer codec and share fragments.
"""

import pytest

from models.errors import InvalidAnswerValue, InvalidEncoding
from utils.codec import (
    ALPHABET,
    UNANSWERED,
    build_share_fragment,
    decode,
    encode,
    parse_share_fragment,
)


class TestEncode:
    """Tests for encode."""

    def test_empty_answers(self):
        assert encode({}) == UNANSWERED * 112

    def test_positions_follow_ids(self):
        code = encode({0: 3, 2: 0, 111: 4})
        assert len(code) == 112
        assert code[:4] == "3-0-"
        assert code[-1] == "4"

    def test_url_safe_alphabet(self, make_answers):
        code = encode(make_answers(default=2))
        assert set(code) <= set(ALPHABET) | {UNANSWERED}
        assert ALPHABET == "01234"

    def test_ids_outside_range_ignored(self):
        assert encode({112: 3, -1: 2, 500: 1}) == encode({})

    @pytest.mark.parametrize("value", [5, -1, 1.5, "2", False])
    def test_invalid_value_raises(self, value):
        with pytest.raises(InvalidAnswerValue):
            encode({3: value})


class TestDecode:
    """Tests for decode."""

    def test_round_trip(self, make_answers):
        answers = make_answers({"A": 3, "D": 1, "H": 4})
        assert decode(encode(answers)) == answers

    def test_round_trip_partial(self):
        answers = {0: 0, 17: 4, 64: 2, 111: 1}
        assert decode(encode(answers)) == answers

    def test_unanswered_omitted(self):
        assert decode(UNANSWERED * 112) == {}

    @pytest.mark.parametrize("length", [0, 111, 113])
    def test_wrong_length(self, length):
        with pytest.raises(InvalidEncoding) as exc_info:
            decode("0" * length)
        assert exc_info.value.details == {"length": length}

    def test_invalid_character(self):
        code = "0" * 50 + "5" + "0" * 61
        with pytest.raises(InvalidEncoding) as exc_info:
            decode(code)
        assert exc_info.value.details == {"position": 50}

    @pytest.mark.parametrize("value", [None, 123, b"0" * 112, list("0" * 112)])
    def test_not_a_string(self, value):
        with pytest.raises(InvalidEncoding):
            decode(value)

    def test_invalid_encoding_is_value_error(self):
        with pytest.raises(ValueError):
            decode("x")


class TestShareFragment:
    """Share link fragments."""

    def test_build(self):
        fragment = build_share_fragment({0: 1})
        assert fragment.startswith("r=")
        assert fragment[2:] == encode({0: 1})

    @pytest.mark.parametrize("prefix", ["", "#"])
    def test_parse(self, prefix):
        answers = {5: 2, 40: 4}
        assert parse_share_fragment(prefix + build_share_fragment(answers)) == answers

    def test_missing_marker(self):
        with pytest.raises(InvalidEncoding):
            parse_share_fragment("#" + encode({}))

    def test_malformed_code(self):
        with pytest.raises(InvalidEncoding):
            parse_share_fragment("#r=0123")
