from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from radixcodec.core.codec import IntegerCodec, IntegerFormatter
from radixcodec.core.widths import INT8, UINT8
from radixcodec.errors import InvalidSymbol, Malformed, NegativeNotAllowed, UsageError
from radixcodec.presets import get_preset


def _hex0x() -> IntegerCodec:
    return IntegerCodec(get_preset("hex"), prefix="0x")


def test_prefix_encode_layout() -> None:
    c = _hex0x()
    assert c.encode(255) == "0xFF"
    assert c.encode(-255) == "-0xFF"
    assert c.encode(0) == "0x0"
    assert c.encode(-128, INT8) == "-0x80"


def test_prefix_decode_case_follows_alphabet() -> None:
    c = _hex0x()
    assert c.decode("0xff") == 255
    assert c.decode("0XFF") == 255
    assert c.decode("-0xFF") == -255

    cs = IntegerCodec(get_preset("base62"), prefix="b62:")
    assert cs.decode("b62:z") == 61
    with pytest.raises(Malformed):
        cs.decode("B62:z")


def test_prefix_required() -> None:
    c = _hex0x()
    with pytest.raises(Malformed, match="formato non valido"):
        c.decode("FF")
    with pytest.raises(Malformed, match="nessuna cifra"):
        c.decode("0x")
    with pytest.raises(Malformed):
        c.decode("-0x")
    with pytest.raises(Malformed):
        c.decode("-")


def test_invalid_symbol_position_includes_prefix() -> None:
    c = _hex0x()
    with pytest.raises(InvalidSymbol) as ei:
        c.decode("0xFG")
    assert ei.value.position == 3
    with pytest.raises(InvalidSymbol) as ei:
        c.decode("-0xFG")
    assert ei.value.position == 4
    assert "-0xFG"[ei.value.position] == ei.value.symbol


def test_suffix() -> None:
    c = IntegerCodec(get_preset("binary"), suffix="b")
    assert c.encode(5) == "101b"
    assert c.encode(-5) == "-101b"
    assert c.decode("101b") == 5
    assert c.decode("-101b") == -5
    with pytest.raises(Malformed):
        c.decode("101")


def test_prefix_and_suffix_overlap_is_malformed() -> None:
    c = IntegerCodec(get_preset("decimal"), prefix="<", suffix=">")
    assert c.decode("<42>") == 42
    with pytest.raises(Malformed):
        c.decode("<>")
    with pytest.raises(Malformed):
        c.decode(">")


def test_width_and_sign_rules_still_apply() -> None:
    c = _hex0x()
    with pytest.raises(NegativeNotAllowed):
        c.decode("-0x1", UINT8)
    assert c.try_decode("-0x1", UINT8) == (None, False)
    assert c.try_decode("0x100", UINT8) == (None, False)
    assert c.try_decode("0xFF", UINT8) == (255, True)
    assert c.try_decode("", UINT8) == (None, False)


def test_roundtrip_with_decoration() -> None:
    c = IntegerCodec(get_preset("base32_crockford"), prefix="id_", suffix="!")
    for v in (0, 1, -1, 31, 32, 10**20, -(2**70)):
        assert c.decode(c.encode(v)) == v


def test_construction_checks() -> None:
    with pytest.raises(UsageError):
        IntegerCodec(get_preset("hex"), prefix="-x")
    with pytest.raises(UsageError):
        IntegerCodec("0123456789ABCDEF")  # type: ignore[arg-type]
    with pytest.raises(UsageError):
        IntegerCodec(get_preset("hex"), suffix=None)  # type: ignore[arg-type]


def test_formatter_encodes_only_integers() -> None:
    f = IntegerFormatter(get_preset("hex"))
    assert f.format("{0} {1} {2} {3}", 255, "ab", 1.5, True) == "FF ab 1.5 True"
    assert f.format("{0} {1}", Decimal("16"), Fraction(1, 2)) == "16 1/2"
    assert f.format("{n}/{m}", n=4095, m=-1) == "FFF/-1"


def test_formatter_spec_applies_to_encoded_text() -> None:
    f = IntegerFormatter(get_preset("hex"))
    assert f.format("[{0:>4}]|{1:.2f}", -255, 2.0) == "[ -FF]|2.00"
    assert f.format("[{0:*<5}]", 10) == "[A****]"
    # a conversion turns the int into a str first
    assert f.format("{0!s}", 255) == "255"


def test_formatter_with_decorated_codec_and_width() -> None:
    assert IntegerFormatter(_hex0x()).format("id={0}", -255) == "id=-0xFF"

    f = IntegerFormatter(get_preset("binary"), INT8)
    assert f.format("{0}", -128) == "-10000000"
    with pytest.raises(UsageError):
        f.format("{0}", 300)

    with pytest.raises(UsageError):
        IntegerFormatter("0123456789")  # type: ignore[arg-type]
