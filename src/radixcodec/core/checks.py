"""Guard clauses shared by the codec and its callers.

Every check raises UsageError with the argument name in the message, so the
CLI can report it as a usage/config error.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from radixcodec.core.widths import IntWidth, is_integer_value
from radixcodec.errors import UsageError


def require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise UsageError(f"{name}: atteso str, trovato {type(value).__name__}")
    return value


def require_non_empty_str(value: Any, name: str) -> str:
    s = require_str(value, name)
    if not s:
        raise UsageError(f"{name}: stringa vuota")
    return s


def require_int(value: Any, name: str) -> int:
    if not is_integer_value(value):
        raise UsageError(f"{name}: atteso int, trovato {type(value).__name__}")
    return value


def require_in_width(value: Any, width: IntWidth, name: str) -> int:
    v = require_int(value, name)
    if not width.contains(v):
        raise UsageError(
            f"{name}: {v} fuori range per {width.name} [{width.min_value}, {width.max_value}]"
        )
    return v


def require_sequence_of_str(value: Any, name: str) -> list[str]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise UsageError(f"{name}: attesa una lista di stringhe")
    out: list[str] = []
    for i, item in enumerate(value):
        out.append(require_str(item, f"{name}[{i}]"))
    return out
