"""Arbitrary-radix integer codec.

One algorithm, parameterized by IntWidth:

  encode: repeated floored divmod by the radix, least significant digit first,
          then reversed; a leading '-' for negative values.
  decode: Horner's method (result = result * R + digit) with the sign stripped
          first and applied last; the accumulated magnitude is checked against
          the width bound after every digit (no silent wraparound).

Round-trip law: decode(encode(v, A, W), A, W) == v for every v representable in W.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Any

from radixcodec.core.alphabet import SIGN, Alphabet
from radixcodec.core.checks import require_in_width, require_non_empty_str, require_str
from radixcodec.core.widths import (
    BIGINT,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntWidth,
    is_integer_value,
)
from radixcodec.errors import (
    InvalidSymbol,
    Malformed,
    NegativeNotAllowed,
    Overflow,
    RadixCodecError,
    UsageError,
)


def _require_alphabet(alphabet: Any) -> Alphabet:
    if not isinstance(alphabet, Alphabet):
        raise UsageError(f"alphabet: atteso Alphabet, trovato {type(alphabet).__name__}")
    return alphabet


def _digits(value: int, alphabet: Alphabet) -> str:
    if value == 0:
        return alphabet.symbol_for(0)

    R = alphabet.radix
    out: list[str] = []
    cv = value
    if cv > 0:
        while cv:
            cv, r = divmod(cv, R)
            out.append(alphabet.symbol_for(r))
    else:
        # Work on the negative value itself: floored divmod keeps r in [0, R),
        # the magnitude digit is R - r (or 0) and the quotient moves one step
        # towards zero. The width minimum is never negated.
        while cv:
            q, r = divmod(cv, R)
            if r:
                out.append(alphabet.symbol_for(R - r))
                cv = q + 1
            else:
                out.append(alphabet.symbol_for(0))
                cv = q
        out.append(SIGN)

    out.reverse()
    return "".join(out)


def encode(value: int, alphabet: Alphabet, width: IntWidth = BIGINT) -> str:
    """Render ``value`` in ``alphabet``.

    Never fails for a value representable in ``width``; anything else is a
    caller bug and raises UsageError.
    """
    a = _require_alphabet(alphabet)
    v = require_in_width(value, width, "value")
    return _digits(v, a)


def decode(text: str, alphabet: Alphabet, width: IntWidth = BIGINT) -> int:
    """Parse ``text`` back into an int of ``width``.

    Raises:
      UsageError: text is not a non-empty str, alphabet is not an Alphabet
      Malformed: text is only the sign
      NegativeNotAllowed: '-' with an unsigned width
      InvalidSymbol: a symbol outside the alphabet (position = index in text)
      Overflow: the value does not fit ``width``
    """
    s = require_non_empty_str(text, "text")
    a = _require_alphabet(alphabet)

    folded = a.fold(s)
    negative = folded[0] == SIGN
    start = 1 if negative else 0
    if start >= len(folded):
        raise Malformed(f"decode: nessuna cifra dopo il segno: {s!r}")
    if negative and not width.signed:
        raise NegativeNotAllowed(f"decode: valore negativo non ammesso per {width.name}: {s!r}")

    limit = width.max_magnitude(negative)
    R = a.radix
    table = a.decode_map
    result = 0
    for pos in range(start, len(folded)):
        d = table.get(folded[pos])
        if d is None:
            raise InvalidSymbol(s[pos], pos)
        result = result * R + d
        if limit is not None and result > limit:
            raise Overflow(f"decode: {s!r} fuori range per {width.name}")

    return -result if negative else result


def try_decode(
    text: str, alphabet: Alphabet, width: IntWidth = BIGINT
) -> tuple[int | None, bool]:
    """Like decode(), but reports failure as ``(None, False)`` instead of raising."""
    try:
        return decode(text, alphabet, width), True
    except (RadixCodecError, ArithmeticError, ValueError, TypeError):
        return None, False


# -----------------------
# Per-width entry points
# -----------------------


def encode_int8(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, INT8)


def encode_int16(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, INT16)


def encode_int32(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, INT32)


def encode_int64(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, INT64)


def encode_uint8(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, UINT8)


def encode_uint16(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, UINT16)


def encode_uint32(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, UINT32)


def encode_uint64(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, UINT64)


def encode_bigint(value: int, alphabet: Alphabet) -> str:
    return encode(value, alphabet, BIGINT)


def decode_int8(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, INT8)


def decode_int16(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, INT16)


def decode_int32(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, INT32)


def decode_int64(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, INT64)


def decode_uint8(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, UINT8)


def decode_uint16(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, UINT16)


def decode_uint32(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, UINT32)


def decode_uint64(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, UINT64)


def decode_bigint(text: str, alphabet: Alphabet) -> int:
    return decode(text, alphabet, BIGINT)


def try_decode_int8(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, INT8)


def try_decode_int16(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, INT16)


def try_decode_int32(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, INT32)


def try_decode_int64(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, INT64)


def try_decode_uint8(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, UINT8)


def try_decode_uint16(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, UINT16)


def try_decode_uint32(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, UINT32)


def try_decode_uint64(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, UINT64)


def try_decode_bigint(text: str, alphabet: Alphabet) -> tuple[int | None, bool]:
    return try_decode(text, alphabet, BIGINT)


# ----------------------
# Prefixed/suffixed form
# ----------------------


@dataclass(frozen=True)
class IntegerCodec:
    """Alphabet plus an optional decoration around the digits.

    Layout: ``[-]<prefix><digits><suffix>`` (e.g. ``-0xFF``).
    Prefix/suffix match is case-insensitive when the alphabet is.
    """

    alphabet: Alphabet
    prefix: str = ""
    suffix: str = ""
    codec_id: str = "radix"

    def __post_init__(self) -> None:
        _require_alphabet(self.alphabet)
        require_str(self.prefix, "prefix")
        require_str(self.suffix, "suffix")
        if self.prefix.startswith(SIGN):
            raise UsageError(f"prefix: non può iniziare con {SIGN!r}")

    def encode(self, value: int, width: IntWidth = BIGINT) -> str:
        body = encode(value, self.alphabet, width)
        if body[0] == SIGN:
            return SIGN + self.prefix + body[1:] + self.suffix
        return self.prefix + body + self.suffix

    def _strip(self, s: str) -> str:
        sign = SIGN if s[0] == SIGN else ""
        rest = s[len(sign):]
        a = self.alphabet
        folded, pre, suf = a.fold(rest), a.fold(self.prefix), a.fold(self.suffix)
        if len(folded) < len(pre) + len(suf) or not folded.startswith(pre) or not folded.endswith(suf):
            raise Malformed(f"{self.codec_id}: formato non valido (atteso {self.prefix}...{self.suffix}): {s!r}")
        core = rest[len(pre): len(rest) - len(suf)]
        if not core:
            raise Malformed(f"{self.codec_id}: nessuna cifra: {s!r}")
        return sign + core

    def decode(self, text: str, width: IntWidth = BIGINT) -> int:
        s = require_non_empty_str(text, "text")
        try:
            return decode(self._strip(s), self.alphabet, width)
        except InvalidSymbol as e:
            # report the position in the decorated text
            pos = None if e.position is None else e.position + len(self.prefix)
            raise InvalidSymbol(e.symbol, pos) from None

    def try_decode(self, text: str, width: IntWidth = BIGINT) -> tuple[int | None, bool]:
        try:
            return self.decode(text, width), True
        except (RadixCodecError, ArithmeticError, ValueError, TypeError):
            return None, False


class IntegerFormatter(string.Formatter):
    """``str.format`` with integer arguments rendered by a codec.

    Integer arguments are encoded and the format spec then applies to the
    encoded text (``{0:>8}`` pads it). Any other argument, bool included, is
    formatted as usual.

        IntegerFormatter(get_preset("hex")).format("{0} {1:.1f}", 255, 2.0)  # 'FF 2.0'
    """

    def __init__(self, codec: IntegerCodec | Alphabet, width: IntWidth = BIGINT) -> None:
        super().__init__()
        if isinstance(codec, Alphabet):
            codec = IntegerCodec(codec)
        if not isinstance(codec, IntegerCodec):
            raise UsageError(
                f"codec: atteso IntegerCodec o Alphabet, trovato {type(codec).__name__}"
            )
        if not isinstance(width, IntWidth):
            raise UsageError(f"width: atteso IntWidth, trovato {type(width).__name__}")
        self.codec = codec
        self.width = width

    def format_field(self, value: Any, format_spec: str) -> str:
        if is_integer_value(value):
            return format(self.codec.encode(value, self.width), format_spec)
        return super().format_field(value, format_spec)
