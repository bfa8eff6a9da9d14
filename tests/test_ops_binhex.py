import pytest

from binhexlib.ops_binhex import (
    binary_to_hex,
    convert,
    convert_line,
    find_binary_literal,
    hex_literal,
    puts,
)


def _collect():
    seen: list[str] = []
    return seen, seen.append


@pytest.mark.parametrize("bits, expect", [
    ("00000000", "00"),
    ("00001010", "0a"),
    ("00001111", "0f"),
    ("00010000", "10"),
    ("10100101", "a5"),
    ("11111111", "ff"),
])
def test_binary_to_hex(bits, expect):
    assert binary_to_hex(bits) == expect


def test_every_byte_is_two_lowercase_digits():
    for v in range(256):
        h = binary_to_hex(format(v, "08b"))
        assert len(h) == 2
        assert h == h.lower()
        assert int(h, 16) == v


def test_hex_literal_prefix():
    assert hex_literal("00000001") == "0x01"


@pytest.mark.parametrize("line, expect", [
    ("value = 0b00000000 end\n", "value = 0x00 end\n"),
    ("value = 0b00001010\n", "value = 0x0a\n"),
    ("value = 0b11111111\n", "value = 0xff\n"),
])
def test_convert_line_scenarios(line, expect):
    assert convert_line(line) == (expect, True)


def test_convert_line_no_match():
    assert convert_line("no binary here\n") == ("no binary here\n", False)
    assert convert_line("") == ("", False)


def test_short_literal_does_not_match():
    assert find_binary_literal("x = 0b0101;") is None


def test_uppercase_prefix_matches():
    assert convert_line("X = 0B10000000;\n") == ("X = 0x80;\n", True)


def test_only_first_literal_replaced():
    line = "a=0b00000001 b=0b00000010\n"
    assert convert_line(line) == ("a=0x01 b=0b00000010\n", True)


def test_crlf_terminator_kept():
    assert convert_line("v 0b00000011\r\n") == ("v 0x03\r\n", True)


def test_convert_echoes_converted_lines_only():
    seen, echo = _collect()
    src = ["// header\n", "DDRB = 0b11111111;\n", "no binary here\n"]

    out = convert(src, echo=echo)

    assert out == ["// header\n", "DDRB = 0xff;\n", "no binary here\n"]
    assert seen == ["DDRB = 0xff;\n"]


def test_convert_keeps_length_and_order():
    src = ["a\n", "0b00000001\n", "", "b 0b00000010\n", "c"]
    out = convert(src, echo=lambda s: None)
    assert len(out) == len(src)
    assert out == ["a\n", "0x01\n", "", "b 0x02\n", "c"]


def test_convert_twice_is_same_as_once():
    src = ["x 0b01010101\n", "plain\n", "0b00000000"]
    once = convert(src, echo=lambda s: None)
    assert convert(once, echo=lambda s: None) == once


def test_second_pass_converts_remaining_literal():
    once = convert(["0b00000001 0b00000010\n"], echo=lambda s: None)
    twice = convert(once, echo=lambda s: None)
    assert twice == ["0x01 0x02\n"]


def test_puts_does_not_double_newline(capsys):
    puts("with newline\n")
    puts("without newline")
    assert capsys.readouterr().out == "with newline\nwithout newline\n"
