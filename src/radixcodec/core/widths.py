from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from radixcodec.errors import UsageError


@dataclass(frozen=True, slots=True)
class IntWidth:
    """Integer width descriptor.

    Python ints never overflow, so machine widths live here as data and the
    codec checks bounds against them:
      - bits=None: arbitrary precision (no bounds)
      - signed: two's complement range [-2**(bits-1), 2**(bits-1) - 1]
      - unsigned: [0, 2**bits - 1]
    """

    name: str
    bits: int | None
    signed: bool

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def min_value(self) -> int | None:
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int | None:
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value  # type: ignore[operator]

    def max_magnitude(self, negative: bool) -> int | None:
        """Largest magnitude a decode may accumulate before the sign is applied."""
        if self.bits is None:
            return None
        if negative:
            # |min| is one more than max: the width minimum must decode cleanly
            return (1 << (self.bits - 1)) if self.signed else 0
        return self.max_value


INT8 = IntWidth("int8", 8, True)
INT16 = IntWidth("int16", 16, True)
INT32 = IntWidth("int32", 32, True)
INT64 = IntWidth("int64", 64, True)
UINT8 = IntWidth("uint8", 8, False)
UINT16 = IntWidth("uint16", 16, False)
UINT32 = IntWidth("uint32", 32, False)
UINT64 = IntWidth("uint64", 64, False)
BIGINT = IntWidth("bigint", None, True)

WIDTHS: dict[str, IntWidth] = {
    w.name: w for w in (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64, BIGINT)
}

# aliases accepted on the CLI / in codec specs
_ALIASES: dict[str, str] = {
    "sbyte": "int8",
    "byte": "uint8",
    "short": "int16",
    "ushort": "uint16",
    "int": "int32",
    "uint": "uint32",
    "long": "int64",
    "ulong": "uint64",
    "big": "bigint",
}


def get_width(name: str) -> IntWidth:
    key = str(name).strip().lower()
    key = _ALIASES.get(key, key)
    w = WIDTHS.get(key)
    if w is None:
        raise UsageError(f"width sconosciuta: {name!r} (ammesse: {', '.join(WIDTHS)})")
    return w


# ------------------
# Numeric predicates
# ------------------


def is_integer_value(obj: Any) -> bool:
    # bool is an int subclass but never a digit source
    return isinstance(obj, int) and not isinstance(obj, bool)
