from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from radixcodec.core.checks import require_sequence_of_str, require_str
from radixcodec.errors import (
    DecodeMapLengthMismatch,
    EmptyAlphabet,
    InvalidSymbol,
    RadixTooSmall,
    SymbolCollision,
    UsageError,
)

SIGN = "-"


def _fold_char(c: str) -> str:
    # per-character fold: a multi-char lowercase (e.g. U+0130) would shift positions
    f = c.lower()
    return f if len(f) == 1 else c


def fold_text(text: str) -> str:
    return "".join(_fold_char(c) for c in text)


def _check_radix(n: int) -> None:
    if n == 0:
        raise EmptyAlphabet("alphabet: nessun simbolo")
    if n < 2:
        raise RadixTooSmall(f"alphabet: radix {n} < 2")


def _claim(m: dict[str, int], key: str, digit: int) -> None:
    if key == SIGN:
        raise SymbolCollision(
            f"alphabet: {SIGN!r} è riservato al segno e non può essere una cifra (digit {digit})",
            symbol=key,
        )
    prev = m.get(key)
    if prev is not None and prev != digit:
        raise SymbolCollision(
            f"alphabet: simbolo {key!r} assegnato a due cifre ({prev} e {digit})", symbol=key
        )
    m[key] = digit


@dataclass(frozen=True, slots=True)
class Alphabet:
    """Symbol table between digit values [0, radix) and text symbols.

    Two tables, both built once:
      - encode: ``symbols[d]`` is the canonical symbol of digit ``d``
      - decode: ``decode_map[s]`` is the digit of symbol ``s`` (many-to-one allowed)

    Build with ``Alphabet.symmetric(...)`` or ``Alphabet.with_decode_variants(...)``.
    Instances are immutable and safe to share between threads.
    """

    symbols: str
    case_sensitive: bool
    decode_map: Mapping[str, int] = field(repr=False, compare=False)
    tolerant: bool = False
    # hashable view of decode_map: equality covers what an alphabet accepts
    decode_items: frozenset[tuple[str, int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_radix(len(self.symbols))
        if not isinstance(self.decode_map, Mapping):
            raise UsageError(
                f"decode_map: atteso Mapping, trovato {type(self.decode_map).__name__}"
            )
        m = dict(self.decode_map)
        radix = len(self.symbols)
        for key, d in m.items():
            if not isinstance(key, str) or len(key) != 1:
                raise SymbolCollision(
                    f"alphabet: chiave {key!r} non è un singolo carattere", symbol=str(key)
                )
            if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d < radix:
                raise SymbolCollision(
                    f"alphabet: il simbolo {key!r} decodifica a {d!r}, fuori da [0, {radix})",
                    symbol=key,
                )
        for d, s in enumerate(self.symbols):
            key = s if self.case_sensitive else _fold_char(s)
            if m.get(key) != d:
                raise SymbolCollision(
                    f"alphabet: il simbolo {s!r} non decodifica alla cifra {d}", symbol=s
                )
        if SIGN in m:
            raise SymbolCollision(f"alphabet: {SIGN!r} non può essere una cifra", symbol=SIGN)

        # private copy: the caller's dict cannot change the alphabet afterwards
        object.__setattr__(self, "decode_map", MappingProxyType(m))
        object.__setattr__(self, "decode_items", frozenset(m.items()))

    # -------------
    # Constructors
    # -------------

    @classmethod
    def symmetric(cls, symbols: str, case_sensitive: bool = False) -> "Alphabet":
        """Same string for encode and decode; digit value = index.

        Case-insensitive alphabets keep the canonical symbols for encoding and
        key the decode table by folded symbols.
        """
        s = require_str(symbols, "symbols")
        _check_radix(len(s))
        m: dict[str, int] = {}
        for d, c in enumerate(s):
            _claim(m, c if case_sensitive else _fold_char(c), d)
        return cls(s, bool(case_sensitive), MappingProxyType(m), tolerant=False)

    @classmethod
    def with_decode_variants(
        cls, encode_symbols: str, decode_variants: Sequence[str]
    ) -> "Alphabet":
        """Canonical encode string plus one string of accepted symbols per digit.

        Every character of ``decode_variants[i]`` decodes to ``i`` (Crockford: "0oO").
        Always case sensitive: case variants are listed explicitly.
        """
        enc = require_str(encode_symbols, "encode_symbols")
        variants = require_sequence_of_str(decode_variants, "decode_variants")
        _check_radix(len(enc))
        if len(variants) != len(enc):
            raise DecodeMapLengthMismatch(
                f"alphabet: {len(variants)} varianti per {len(enc)} simboli"
            )

        m: dict[str, int] = {}
        for d, variant in enumerate(variants):
            for c in variant:
                _claim(m, c, d)

        seen: set[str] = set()
        for d, c in enumerate(enc):
            if c in seen:
                raise SymbolCollision(f"alphabet: simbolo {c!r} ripetuto nell'encode", symbol=c)
            seen.add(c)
            if m.get(c) != d:
                raise SymbolCollision(
                    f"alphabet: il simbolo canonico {c!r} non è tra le varianti della cifra {d}",
                    symbol=c,
                )

        return cls(enc, True, MappingProxyType(m), tolerant=True)

    # -------
    # Queries
    # -------

    @property
    def radix(self) -> int:
        return len(self.symbols)

    @property
    def monotonic(self) -> bool:
        """True when code points grow with digit value (equal-length outputs sort like values)."""
        return all(a < b for a, b in zip(self.symbols, self.symbols[1:]))

    def fold(self, text: str) -> str:
        if self.case_sensitive:
            return text
        return fold_text(text)

    def digit_value(self, symbol: str, position: int | None = None) -> int:
        key = symbol if self.case_sensitive else _fold_char(symbol)
        d = self.decode_map.get(key)
        if d is None:
            raise InvalidSymbol(symbol, position)
        return d

    def symbol_for(self, digit: int) -> str:
        return self.symbols[digit]

    def variants(self) -> tuple[str, ...]:
        """Accepted decode symbols per digit, in table order."""
        out = [""] * self.radix
        for s, d in self.decode_map.items():
            out[d] += s
        return tuple(out)

    def describe(self) -> dict[str, Any]:
        info: dict[str, Any] = {
            "radix": self.radix,
            "symbols": self.symbols,
            "case_sensitive": self.case_sensitive,
            "tolerant": self.tolerant,
            "monotonic": self.monotonic,
        }
        if self.tolerant:
            info["decode_variants"] = list(self.variants())
        return info
