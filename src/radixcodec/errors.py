"""Typed errors for radixcodec.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Two independent families: ConstructionError (building an Alphabet, fail fast)
  and DecodeError (parsing text, expected and recoverable).
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_CONSTRUCTION = 20
EXIT_DECODE = 21


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid codec spec, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_CONSTRUCTION, "CONSTRUCTION", "Invalid alphabet (empty, radix < 2, collisions)"),
    ExitCodeInfo(EXIT_DECODE, "DECODE", "Text could not be decoded (malformed, bad symbol, sign, overflow)"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE - do not edit manually.\n")
    lines.append("> Source of truth: `src/radixcodec/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every library error extends `RadixCodecError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append("- `decode --try` never fails on bad input: it prints `ERR` and returns 0.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class RadixCodecError(Exception):
    """Base error for radixcodec."""

    exit_code: int = EXIT_GENERIC


class UsageError(RadixCodecError):
    """Precondition violated by the caller (wrong type, empty text, value out of width)."""

    exit_code = EXIT_USAGE


# Construction ------------------------------------------------------------


class ConstructionError(RadixCodecError):
    """An Alphabet could not be built. Never recoverable at the call site."""

    exit_code = EXIT_CONSTRUCTION


class EmptyAlphabet(ConstructionError):
    pass


class RadixTooSmall(ConstructionError):
    pass


class DecodeMapLengthMismatch(ConstructionError):
    pass


class SymbolCollision(ConstructionError):
    def __init__(self, message: str, symbol: str = "") -> None:
        super().__init__(message)
        self.symbol = symbol


# Decode ------------------------------------------------------------------


class DecodeError(RadixCodecError):
    """Text could not be turned back into an integer."""

    exit_code = EXIT_DECODE


class Malformed(DecodeError):
    pass


class InvalidSymbol(DecodeError):
    def __init__(self, symbol: str, position: int | None = None) -> None:
        where = "" if position is None else f" at position {position}"
        super().__init__(f"invalid symbol {symbol!r}{where}")
        self.symbol = symbol
        self.position = position


class NegativeNotAllowed(DecodeError):
    pass


class Overflow(DecodeError):
    pass
