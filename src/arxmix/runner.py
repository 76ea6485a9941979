"""
Mix Entry Runner

Read mix records from a JSON file, decode and render each one, and emit the
display payloads (optionally with receipts).

Usage:
  python -m arxmix.runner entries.json
  python -m arxmix.runner entries.json --receipts --determinism-check
"""

import argparse
import json
import sys
from typing import Any

from .core import Receipts, assert_double_run_equal, DeterminismError, ReceiptError
from .entry import MixEntry, parse_mix_entry, render_entry
from .kernel import codec_receipts, to_unsigned64
from .kernel.shard import IMAGE_PATH_PREFIX


def load_entries(data: Any) -> list[MixEntry]:
    """
    Parse a single record or a list of records.

    Raises:
        EntryError / UnknownTypeError: On the first bad record.
    """
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"Expected a record or list of records, got {type(data).__name__}")
    return [parse_mix_entry(obj) for obj in data]


# Fields of a rendered entry that are derived from the definition and image
# refs alone. Avalanche scores are backend float measurements and never
# enter a receipt.
RECEIPT_FIELDS = ("type_id", "definition", "terse", "code", "image_paths")


def entry_receipt(payload: dict) -> dict:
    """
    Select the receipted fields of a rendered entry.

    Raises:
        ReceiptError: If a receipted field holds a float.
    """
    record = {field: payload[field] for field in RECEIPT_FIELDS}
    record["definition"] = to_unsigned64(record["definition"])
    for field, value in record.items():
        if isinstance(value, float):
            raise ReceiptError(f"Float in receipted entry field '{field}'")
    return record


def build_receipts(entries: list[MixEntry], prefix: str = IMAGE_PATH_PREFIX) -> Receipts:
    """Record decoded output for each entry in input order."""
    receipts = Receipts("runner")
    receipts.put("prefix", prefix)
    receipts.put("entry_count", len(entries))
    receipts.put("entries", [entry_receipt(render_entry(e, prefix)) for e in entries])
    return receipts


def run(
    entries: list[MixEntry],
    prefix: str = IMAGE_PATH_PREFIX,
    with_receipts: bool = False,
    determinism_check: bool = False
) -> dict:
    """
    Render entries and optionally attach receipts.

    Returns:
        dict: {"entries": [...]} plus "receipts" when requested.

    Raises:
        DeterminismError: If determinism_check is set and two runs disagree.
    """
    result = {"entries": [render_entry(e, prefix) for e in entries]}

    if determinism_check:
        assert_double_run_equal(lambda: build_receipts(entries, prefix))

    if with_receipts or determinism_check:
        fixtures = [
            {"type_id": e["type_id"], "definition": e["definition"], "label": f"entry[{i}]"}
            for i, e in enumerate(entries)
        ]
        refs = [ref for e in entries for ref in e["avalanche_image_refs"]]
        result["receipts"] = {
            "runner": build_receipts(entries, prefix).digest(),
            "codec": codec_receipts("codec", fixtures, refs),
        }
        if determinism_check:
            result["receipts"]["determinism.double_run_ok"] = True

    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="arxmix",
        description="Decode and describe ARX mix records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Describe every record in a file
  python -m arxmix.runner entries.json

  # Serve assets from a different root
  python -m arxmix.runner entries.json --prefix=/static/images

  # Attach receipts and verify determinism
  python -m arxmix.runner entries.json --receipts --determinism-check
        """
    )

    parser.add_argument(
        "entries_file",
        type=str,
        help="Path to JSON file holding one mix record or a list of records"
    )

    parser.add_argument(
        "--prefix",
        type=str,
        default=IMAGE_PATH_PREFIX,
        help=f"Image path prefix. Default: {IMAGE_PATH_PREFIX}"
    )

    parser.add_argument(
        "--receipts",
        action="store_true",
        help="Attach codec and runner receipts. Default: False."
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Build runner receipts twice and compare hashes. Default: False."
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for results JSON. Default: print to stdout."
    )

    args = parser.parse_args(argv)

    try:
        with open(args.entries_file, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Error: Entries file not found: {args.entries_file}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in entries file: {e}", file=sys.stderr)
        return 1

    try:
        entries = load_entries(data)
        result = run(
            entries,
            prefix=args.prefix,
            with_receipts=args.receipts,
            determinism_check=args.determinism_check
        )
    except (ValueError, RuntimeError, DeterminismError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(result, f, indent=2)
        print(f"Results written to: {args.output}", file=sys.stderr)
    else:
        print(json.dumps(result, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
