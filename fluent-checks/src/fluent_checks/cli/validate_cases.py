from __future__ import annotations

import argparse
import logging
from pathlib import Path

import yaml

from fluent_checks.errors import CaseFileError
from fluent_checks.testing.case_loader import load_case_table


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Validate a YAML/JSON parameter table used for table-driven tests."
    )
    parser.add_argument(
        "--cases",
        type=Path,
        required=True,
        help="Path to the case file (.yaml, .yml or .json).",
    )
    parser.add_argument(
        "--print",
        dest="print_table",
        action="store_true",
        help="Print the loaded table as YAML.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        collector = load_case_table(args.cases)
    except FileNotFoundError:
        print(f"ERROR: case file not found: {args.cases}")
        return 1
    except CaseFileError as e:
        print(f"ERROR: {e}")
        return 1
    except OSError as e:
        print(f"ERROR: cannot read case file: {args.cases} ({e})")
        return 1

    table = collector.build()
    if args.print_table:
        rows = [list(row) for row in table]
        print(yaml.safe_dump({"cases": rows}, sort_keys=False, allow_unicode=True).rstrip())

    print(f"OK: {len(table)} case(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
