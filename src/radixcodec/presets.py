"""Preset registry: named alphabets in common use.

Built once at import time and read-only afterwards (MappingProxyType), so any
number of threads may share the instances.

NOTA: alphabets that use '-' as a digit (xxencoding, radix64, binhex4, ascii85)
are not here: '-' is the sign marker and Alphabet refuses it.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from radixcodec.core.alphabet import Alphabet
from radixcodec.errors import UsageError

# Readable, non-whitespace subset of ISO-8859-15 in code point order
# ('-' and everything below it, DEL, NBSP, SHY and `¯°²³¹º· removed).
ISO8859_15_SYMBOLS = (
    "./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[]^_abcdefghijklmnopqrstuvwxyz{|}~"
    "¡¢£€¥Š§š©«¬®±Žµ¶ž»ŒœŸ¿"
    "ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖ×ØÙÚÛÜÝÞßàáâãäåæçèéêëìíîïðñòóôõö÷øùúûüýþÿ"
)

DIGITS36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS62 = DIGITS36 + "abcdefghijklmnopqrstuvwxyz"

CROCKFORD_SYMBOLS = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
CROCKFORD_DECODE_VARIANTS: tuple[str, ...] = (
    "0oO", "1iIlL", "2", "3", "4", "5", "6", "7", "8", "9",
    "aA", "bB", "cC", "dD", "eE", "fF", "gG", "hH", "jJ", "kK", "mM",
    "nN", "pP", "qQ", "rR", "sS", "tT", "vV", "wW", "xX", "yY", "zZ",
)


def _iso(start: str, n: int) -> str:
    i = ISO8859_15_SYMBOLS.index(start)
    return ISO8859_15_SYMBOLS[i: i + n]


def _cs(symbols: str) -> Alphabet:
    return Alphabet.symmetric(symbols, case_sensitive=True)


def _ci(symbols: str) -> Alphabet:
    return Alphabet.symmetric(symbols, case_sensitive=False)


def _build() -> dict[str, Alphabet]:
    p: dict[str, Alphabet] = {}

    # small radixes: digits only, case is irrelevant
    p["binary"] = _cs("01")
    p["ternary"] = _cs("012")
    p["quaternary"] = _cs("0123")
    p["quinary"] = _cs("01234")
    p["senary"] = _cs("012345")
    p["septenary"] = _cs("0123456")
    p["octal"] = _cs("01234567")
    p["nonary"] = _cs("012345678")
    p["decimal"] = _cs("0123456789")

    # 0-9 + letters, case-insensitive
    p["undecimal"] = _ci(DIGITS36[:11])
    p["duodecimal"] = _ci(DIGITS36[:12])
    p["tridecimal"] = _ci(DIGITS36[:13])
    p["tetradecimal"] = _ci(DIGITS36[:14])
    p["pentadecimal"] = _ci(DIGITS36[:15])
    p["hex"] = _ci(DIGITS36[:16])
    p["heptadecimal"] = _ci(DIGITS36[:17])
    p["vigesimal"] = _ci(DIGITS36[:20])
    p["base32hex"] = _ci(DIGITS36[:32])
    p["base36"] = _ci(DIGITS36)

    # base32 dialects
    p["base32_rfc4648"] = _cs("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
    p["base32_zrtp"] = _cs("ybndrfg8ejkmcpqxot1uwisza345h769")
    p["base32_crockford"] = Alphabet.with_decode_variants(
        CROCKFORD_SYMBOLS, CROCKFORD_DECODE_VARIANTS
    )

    # case-sensitive, larger radixes
    p["base58_ipfs"] = _cs("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")
    p["base58_flickr"] = _cs("123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ")
    p["sexagesimal"] = _cs(DIGITS62[:60])
    p["base62"] = _cs(DIGITS62)
    p["base63"] = _cs(DIGITS62 + "+")
    p["base64"] = _cs(DIGITS62 + "+/")
    p["base64_bcrypt"] = _cs("./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")
    p["base64_uuencoding"] = _cs(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    )
    p["base64_unixb64"] = _cs(DIGITS62 + "+/")
    p["base91"] = _cs(DIGITS36[10:] + DIGITS62[36:] + DIGITS36[:10] + "!#$%&()*+,./:;<=>?@[]^_`{|}~\"")

    # ISO-8859-15 windows
    p["base93_iso8859_15"] = _cs(ISO8859_15_SYMBOLS[:93])
    p["base93_0_iso8859_15"] = _cs(_iso("0", 93))
    p["base93_upper_iso8859_15"] = _cs(_iso("A", 93))
    p["base93_lower_iso8859_15"] = _cs(_iso("a", 93))
    p["base128_iso8859_15"] = _cs(ISO8859_15_SYMBOLS[:128])
    p["base128_0_iso8859_15"] = _cs(_iso("0", 128))
    p["base128_upper_iso8859_15"] = _cs(_iso("A", 128))

    return p


PRESETS: Mapping[str, Alphabet] = MappingProxyType(_build())

# Conventional decorations (prefix, suffix), used by codec specs with "prefix": "auto".
# Radixes up to 16 use the "0<letter>" form, larger ones "b<radix>:".
PREFIXED: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "binary": ("0b", ""),
        "ternary": ("0t", ""),
        "quaternary": ("0q", ""),
        "quinary": ("0p", ""),
        "senary": ("0s", ""),
        "septenary": ("0sp", ""),
        "octal": ("0o", ""),
        "hex": ("0x", ""),
        "heptadecimal": ("b17:", ""),
        "base32hex": ("b32:", ""),
        "base36": ("b36:", ""),
        "base63": ("b63:", ""),
    }
)


def preset_names() -> list[str]:
    return list(PRESETS.keys())


def get_preset(name: str) -> Alphabet:
    key = str(name).strip().lower()
    a = PRESETS.get(key)
    if a is None:
        raise UsageError(f"preset sconosciuto: {name!r}")
    return a


def prefix_for(name: str) -> tuple[str, str]:
    """Return the conventional (prefix, suffix) of a preset, ("", "") when it has none."""
    return PREFIXED.get(str(name).strip().lower(), ("", ""))
