"""radixcodec CLI.

This is the stable CLI entrypoint (console-script: ``radixcodec``).

UX policy:
  - results go to stdout, one per line, in the order given
  - errors go to stderr as ``[radixcodec] ...`` with a stable exit code
  - ``--debug`` re-raises to show the full stack trace
  - text starting with '-' must follow ``--`` (e.g. ``decode --alphabet hex -- -ff``)
"""

from __future__ import annotations

import argparse
import json
import sys

from radixcodec.codec_spec import CodecSpecError, load_codec_spec
from radixcodec.core.alphabet import Alphabet
from radixcodec.core.codec import IntegerCodec
from radixcodec.core.widths import WIDTHS, IntWidth, get_width
from radixcodec.errors import EXIT_GENERIC, EXIT_OK, EXIT_USAGE, RadixCodecError, UsageError
from radixcodec.presets import PRESETS, get_preset

__version__ = "0.1.0"


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _add_codec_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--spec",
        default=None,
        help=(
            "Codec spec (JSON). Use '@file.json' to load from file, or pass JSON inline. "
            "Excludes --alphabet/--symbols/--width."
        ),
    )
    p.add_argument("--alphabet", default=None, help="Preset name (default: decimal)")
    p.add_argument("--symbols", default=None, help="Ad-hoc alphabet string (instead of --alphabet)")
    p.add_argument(
        "--case-sensitive",
        action="store_true",
        help="With --symbols: do not fold case on decode",
    )
    p.add_argument(
        "--width",
        default=None,
        help=f"Integer width ({', '.join(WIDTHS)}; default: bigint)",
    )


def _resolve_codec(ns: argparse.Namespace) -> tuple[IntegerCodec, IntWidth]:
    if ns.spec is not None:
        if ns.alphabet is not None or ns.symbols is not None or ns.width is not None:
            raise UsageError("--spec esclude --alphabet/--symbols/--width")
        spec = load_codec_spec(str(ns.spec))
        return spec.build(), spec.width_obj()

    if ns.alphabet is not None and ns.symbols is not None:
        raise UsageError("--alphabet e --symbols sono alternativi")
    if ns.symbols is not None:
        alphabet = Alphabet.symmetric(ns.symbols, case_sensitive=bool(ns.case_sensitive))
    else:
        alphabet = get_preset(ns.alphabet or "decimal")
    return IntegerCodec(alphabet), get_width(ns.width or "bigint")


def _parse_decimal(s: str) -> int:
    try:
        return int(s.strip(), 10)
    except ValueError:
        raise UsageError(f"valore non intero: {s!r}") from None


def _cmd_encode(ns: argparse.Namespace) -> int:
    codec, width = _resolve_codec(ns)
    values = [_parse_decimal(v) for v in ns.values]
    for v in values:
        print(codec.encode(v, width))
    return EXIT_OK


def _cmd_decode(ns: argparse.Namespace) -> int:
    codec, width = _resolve_codec(ns)
    if ns.try_:
        for t in ns.texts:
            value, ok = codec.try_decode(t, width)
            print(value if ok else "ERR")
        return EXIT_OK
    for t in ns.texts:
        print(codec.decode(t, width))
    return EXIT_OK


def _cmd_presets_list() -> int:
    for name, a in PRESETS.items():
        print(f"{name}\t{a.radix}\t{a.symbols}")
    return EXIT_OK


def _cmd_presets_show(name: str) -> int:
    info = {"name": name.strip().lower(), **get_preset(name).describe()}
    print(json.dumps(info, ensure_ascii=False, indent=2))
    return EXIT_OK


def _cmd_spec_validate(spec_arg: str) -> int:
    # load is the validation
    load_codec_spec(spec_arg)
    print("OK")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="radixcodec", description="Arbitrary-radix integer <-> text codec"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_enc = sub.add_parser("encode", help="Encode decimal integers")
    p_enc.add_argument("values", nargs="+", help="Decimal integers (negative values after --)")
    _add_codec_args(p_enc)
    _add_common_args(p_enc)

    p_dec = sub.add_parser("decode", help="Decode text into decimal integers")
    p_dec.add_argument("texts", nargs="+", help="Encoded texts (negative values after --)")
    p_dec.add_argument(
        "--try",
        dest="try_",
        action="store_true",
        help="Never fail on bad input: print ERR for texts that do not decode",
    )
    _add_codec_args(p_dec)
    _add_common_args(p_dec)

    p_pre = sub.add_parser("presets", help="Preset alphabets")
    sub_pre = p_pre.add_subparsers(dest="presets_cmd", required=True)
    p_pl = sub_pre.add_parser("list", help="List presets (name, radix, symbols)")
    _add_common_args(p_pl)
    p_ps = sub_pre.add_parser("show", help="Show one preset as JSON")
    p_ps.add_argument("name")
    _add_common_args(p_ps)

    p_sv = sub.add_parser("spec-validate", help="Validate a codec spec (v1)")
    p_sv.add_argument("spec", help="Codec spec JSON (@file.json or inline JSON)")
    _add_common_args(p_sv)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "encode":
            return _cmd_encode(ns)
        if ns.cmd == "decode":
            return _cmd_decode(ns)
        if ns.cmd == "presets":
            if ns.presets_cmd == "list":
                return _cmd_presets_list()
            if ns.presets_cmd == "show":
                return _cmd_presets_show(ns.name)
            raise AssertionError("unreachable")
        if ns.cmd == "spec-validate":
            return _cmd_spec_validate(str(ns.spec))

        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except CodecSpecError as e:
        # Treat as usage/config error.
        if getattr(ns, "debug", False):
            raise
        print(f"[radixcodec] {e}", file=sys.stderr)
        return EXIT_USAGE
    except RadixCodecError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[radixcodec] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[radixcodec] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
