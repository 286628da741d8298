from __future__ import annotations

import pytest

from radixcodec.core.alphabet import SIGN
from radixcodec.errors import InvalidSymbol, UsageError
from radixcodec.presets import (
    CROCKFORD_DECODE_VARIANTS,
    CROCKFORD_SYMBOLS,
    ISO8859_15_SYMBOLS,
    PREFIXED,
    PRESETS,
    get_preset,
    prefix_for,
    preset_names,
)

# name -> radix (pinned: presets are configuration other systems depend on)
EXPECTED_RADIX: dict[str, int] = {
    "binary": 2,
    "octal": 8,
    "decimal": 10,
    "duodecimal": 12,
    "hex": 16,
    "vigesimal": 20,
    "base32hex": 32,
    "base32_rfc4648": 32,
    "base32_zrtp": 32,
    "base32_crockford": 32,
    "base36": 36,
    "base58_ipfs": 58,
    "base58_flickr": 58,
    "sexagesimal": 60,
    "base62": 62,
    "base63": 63,
    "base64": 64,
    "base64_bcrypt": 64,
    "base64_uuencoding": 64,
    "base64_unixb64": 64,
    "base91": 91,
    "base93_iso8859_15": 93,
    "base93_0_iso8859_15": 93,
    "base93_upper_iso8859_15": 93,
    "base93_lower_iso8859_15": 93,
    "base128_iso8859_15": 128,
    "base128_0_iso8859_15": 128,
    "base128_upper_iso8859_15": 128,
}


@pytest.mark.parametrize("name, radix", sorted(EXPECTED_RADIX.items()))
def test_preset_radix(name: str, radix: int) -> None:
    assert get_preset(name).radix == radix


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        PRESETS["mine"] = get_preset("hex")  # type: ignore[index]
    with pytest.raises(TypeError):
        PREFIXED["mine"] = ("", "")  # type: ignore[index]


def test_registry_shares_instances() -> None:
    assert get_preset("hex") is get_preset("HEX")
    assert get_preset(" hex ") is PRESETS["hex"]


def test_unknown_preset() -> None:
    with pytest.raises(UsageError, match="preset sconosciuto"):
        get_preset("base1000")


def test_no_preset_uses_the_sign() -> None:
    for name, a in PRESETS.items():
        assert SIGN not in a.symbols, name
        assert SIGN not in a.decode_map, name


def test_case_sensitivity_of_known_presets() -> None:
    assert get_preset("hex").case_sensitive is False
    assert get_preset("base36").case_sensitive is False
    assert get_preset("base58_ipfs").case_sensitive is True
    assert get_preset("base64").case_sensitive is True


def test_crockford_tables() -> None:
    a = get_preset("base32_crockford")
    assert a.symbols == CROCKFORD_SYMBOLS
    assert len(CROCKFORD_DECODE_VARIANTS) == 32
    for excluded in "IiLlOoUu":
        assert excluded not in a.symbols
    with pytest.raises(InvalidSymbol):
        a.digit_value("U")


def test_iso8859_windows() -> None:
    assert len(ISO8859_15_SYMBOLS) >= 147
    assert get_preset("base93_0_iso8859_15").symbol_for(0) == "0"
    assert get_preset("base93_upper_iso8859_15").symbol_for(0) == "A"
    assert get_preset("base93_lower_iso8859_15").symbol_for(0) == "a"
    assert get_preset("base128_iso8859_15").symbol_for(0) == "."


def test_prefix_table() -> None:
    assert prefix_for("hex") == ("0x", "")
    assert prefix_for("HEX") == ("0x", "")
    assert prefix_for("binary") == ("0b", "")
    assert prefix_for("base62") == ("", "")
    assert prefix_for("senary") == ("0s", "")
    assert prefix_for("septenary") == ("0sp", "")
    for name in PREFIXED:
        assert name in PRESETS
        prefix = PREFIXED[name][0]
        if PRESETS[name].radix <= 16:
            assert prefix.startswith("0"), name
        else:
            assert prefix == f"b{PRESETS[name].radix}:", name


def test_preset_names_order_is_stable() -> None:
    names = preset_names()
    assert names[0] == "binary"
    assert names == list(PRESETS.keys())
    assert len(set(names)) == len(names)
