import pytest

from binhexlib.ops_binhex import convert
from binhexlib.verify import verify_conversion


def test_verify_counts_changed_lines():
    src = ["a 0b00000001\n", "plain\n", "b 0b11110000\n"]
    out = convert(src, echo=lambda s: None)

    assert verify_conversion(src, out) == 2


def test_verify_length_mismatch():
    with pytest.raises(ValueError, match="line count mismatch"):
        verify_conversion(["a\n", "b\n"], ["a\n"])


def test_verify_rejects_foreign_edit():
    with pytest.raises(ValueError, match="line 2"):
        verify_conversion(["a\n", "plain\n"], ["a\n", "plain!\n"])


def test_verify_rejects_wrong_value():
    with pytest.raises(ValueError):
        verify_conversion(["0b00000001\n"], ["0x02\n"])
