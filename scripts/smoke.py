# scripts/smoke.py
"""
Smoke Test Script for maybekit.

Usage
-----
1. Scan the built-in sample log:
    $ uv run python scripts/smoke.py

2. Scan a local text file:
    $ uv run python scripts/smoke.py --file logs/server.log --contains ERROR
"""

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from dotenv import load_dotenv

from maybekit import NOTHING, TooManyElements, compact, first, get_at, maybe, single
from maybekit.laws import run_law_suite

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_LINES = [
    "INFO  boot complete",
    "WARN  cache miss for key=settings",
    "ERROR upstream timed out after 30s",
    "INFO  retry scheduled",
]


def _read(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8") as f:
        for raw in f:
            yield raw.rstrip("\r\n")


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run maybekit Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a text file")
    parser.add_argument("--contains", "-c", type=str, default="ERROR", help="Text to search for")
    args = parser.parse_args()

    # 1. Prepare Input Data
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            return
        print(f"\n📂 Using input file: {input_path}")
        lines = list(_read(input_path))
    else:
        print("\n📝 Using default sample log (No --file provided)")
        lines = DEFAULT_LINES

    needle = args.contains

    # 2. Scanners
    print("\n" + "=" * 60)
    print(f"first line           : {first(lines).or_('<empty file>')}")
    print(f"first with {needle!r:<10}: {first(lines, lambda s: needle in s).or_('-')}")
    print(f"line #2              : {get_at(lines, 2).or_('-')}")
    try:
        hit = single(lines, lambda s: needle in s)
        print(f"single with {needle!r:<9}: {hit.or_('-')}")
    except TooManyElements as exc:
        print(f"single with {needle!r:<9}: ⚠️  {exc}")

    # 3. Compact & chaining
    lengths = [maybe(s).filter(lambda s: needle in s).map(len) for s in lines]
    print(f"matching line lengths: {list(compact(lengths))}")
    print(f"absent renders as    : {NOTHING!r}")

    # 4. Laws
    results = run_law_suite()
    failed = [r for r in results if not r.passed]
    print("=" * 60)
    if failed:
        print(f"❌ {len(failed)} of {len(results)} law checks failed")
        for r in failed:
            print(f"  - {r.name}: {r.sample}")
        sys.exit(1)
    print(f"✅ All {len(results)} law checks passed")


if __name__ == "__main__":
    main()
