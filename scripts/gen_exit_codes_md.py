#!/usr/bin/env python3
"""Generate docs/exit_codes.md from src/radixcodec/errors.py (single source of truth).

  python scripts/gen_exit_codes_md.py            # rewrite the doc
  python scripts/gen_exit_codes_md.py --check    # CI: exit 1 if the doc is stale
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    repo = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo / "src"))

    from radixcodec import errors  # noqa: E402

    ap = argparse.ArgumentParser(description="Render the radixcodec exit-code table")
    ap.add_argument("--out", default=None, help="Output path (default: docs/exit_codes.md)")
    ap.add_argument("--check", action="store_true", help="Do not write; fail if out of date")
    ns = ap.parse_args(argv)

    out = Path(ns.out) if ns.out else repo / "docs" / "exit_codes.md"
    text = errors.render_exit_codes_markdown()

    if ns.check:
        current = out.read_text(encoding="utf-8") if out.is_file() else None
        if current != text:
            print(f"[radixcodec] {out} non aggiornato: rigenera con scripts/gen_exit_codes_md.py", file=sys.stderr)
            return 1
        print(f"[radixcodec] {out} OK")
        return 0

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    print(f"[radixcodec] wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
