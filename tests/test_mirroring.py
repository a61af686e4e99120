"""Tests for the mirroring text utilities."""

import datetime

import pytest

from human_join.text_utils import MIRROR_MAP, mirror_char, mirror_character, mirror_string

STRINGY = ["", "stuff", 0, 4]
NON_STRINGY = [False, True, None, ["stuff", "thingys"], {"stuff": "whatsits"}, datetime.date(2020, 1, 1), len]


class TestMirrorCharacter:
    """Tests for mirror_character."""

    def test_unmapped_returned_as_is(self) -> None:
        assert mirror_character("f") == "f"
        assert mirror_character("+") == "+"

    @pytest.mark.parametrize(
        ("char", "expected"),
        [("<", ">"), (">", "<"), ("(", ")"), (")", "("), ("[", "]"), ("]", "["), ("{", "}"), ("}", "{"), ("!", "¡"), ("?", "¿")],
    )
    def test_mapped(self, char: str, expected: str) -> None:
        assert mirror_character(char) == expected

    def test_inverted_forms_not_mapped_back(self) -> None:
        assert mirror_character("¡") == "¡"
        assert mirror_character("¿") == "¿"

    @pytest.mark.parametrize("value", STRINGY)
    def test_string_like_input(self, value: object) -> None:
        assert mirror_character(value) == str(value)[:1]

    @pytest.mark.parametrize("value", NON_STRINGY)
    def test_invalid_input_returns_empty(self, value: object) -> None:
        assert mirror_character(value) == ""

    def test_numbers(self) -> None:
        assert mirror_character(42) == "4"
        assert mirror_character(-1.5) == "-"

    def test_long_strings_truncated(self) -> None:
        assert mirror_character("four") == "f"
        assert mirror_character("<five") == ">"

    def test_short_alias(self) -> None:
        assert mirror_char is mirror_character


class TestMirrorString:
    """Tests for mirror_string."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("<", ">"),
            ("f", "f"),
            ("<(", ")>"),
            ("-+", "+-"),
            ("-+(", ")+-"),
            ("--+", "+--"),
            ("<<", ">>"),
            ("-<", ">-"),
            ("", ""),
        ],
    )
    def test_mirror(self, text: str, expected: str) -> None:
        assert mirror_string(text) == expected

    @pytest.mark.parametrize("value", STRINGY)
    def test_string_like_input(self, value: object) -> None:
        assert mirror_string(value) == str(value)[::-1]

    def test_numbers(self) -> None:
        assert mirror_string(123) == "321"
        assert mirror_string(2.5) == "5.2"

    @pytest.mark.parametrize("value", NON_STRINGY)
    def test_invalid_input_returns_empty(self, value: object) -> None:
        assert mirror_string(value) == ""

    @pytest.mark.parametrize("text", ["<(", "[{x}]", "--+", "<<-)", "abc"])
    def test_mirroring_twice_restores_symmetric_strings(self, text: str) -> None:
        assert mirror_string(mirror_string(text)) == text


class TestMirrorMap:
    """Tests for MIRROR_MAP."""

    def test_brackets_are_paired(self) -> None:
        for opener, closer in ("()", "[]", "{}", "<>"):
            assert MIRROR_MAP[opener] == closer
            assert MIRROR_MAP[closer] == opener

    def test_single_characters(self) -> None:
        assert all(len(k) == 1 and len(v) == 1 for k, v in MIRROR_MAP.items())

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            MIRROR_MAP["a"] = "b"  # type: ignore[index]
