# interface/cli.py
"""
GST Import Tool - command line entry point.

    gst-import import stock.xlsx --type tally --xlsx out.xlsx
    gst-import sample --type products > products.csv
    gst-import gst 1000 --rate 18 --from 27 --to 29
"""

from __future__ import annotations

import argparse
import logging
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

from config import LOG_LEVEL
from domain.schemas import RecordType
from extraction import import_file
from input_readers import UnreadableFileError, describe_format
from tax import GSTConfig, GSTInputError, breakdown_for, inclusive_breakdown
from writers import generate_sample_csv, write_result_xlsx, write_template_xlsx

logger = logging.getLogger(__name__)

TYPE_CHOICES = [t.value for t in RecordType]


def _print_issues(label: str, issues) -> None:
    for issue in issues:
        print(f"  {label} row {issue.row}: {issue.message}")


def cmd_import(args: argparse.Namespace) -> int:
    path = Path(args.file).expanduser().resolve()
    if not path.exists():
        print(f"File not found: {path}", file=sys.stderr)
        return 1

    content_type, _ = mimetypes.guess_type(path.name)
    print(f"Reading {path.name} as {describe_format(path.name, content_type)}")

    try:
        result = import_file(path.read_bytes(), path.name, content_type, args.type)
    except UnreadableFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    s = result.summary
    print(f"Rows: {s.total_rows}  processed: {s.processed}  skipped: {s.skipped}")
    _print_issues("ERROR", result.errors)
    _print_issues("WARN ", result.warnings)

    if args.xlsx:
        out = write_result_xlsx(Path(args.xlsx), result)
        print(f"Results written to {out}")

    return 0 if result.success else 1


def cmd_sample(args: argparse.Namespace) -> int:
    if args.xlsx:
        out = write_template_xlsx(Path(args.xlsx), args.type)
        print(f"Template written to {out}")
    else:
        print(generate_sample_csv(args.type))
    return 0


def cmd_gst(args: argparse.Namespace) -> int:
    config = GSTConfig(args.from_state or "", args.to_state or "", args.force_igst)
    try:
        if args.inclusive:
            b = inclusive_breakdown(args.amount, args.rate, config, args.cess)
        else:
            b = breakdown_for(config, args.amount, args.rate, args.cess)
    except GSTInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Taxable amount: {b.taxable_amount:.2f}")
    if b.inter_state:
        print(f"IGST ({args.rate:g}%): {b.igst:.2f}")
    else:
        print(f"CGST ({args.rate / 2:g}%): {b.cgst:.2f}")
        print(f"SGST ({args.rate / 2:g}%): {b.sgst:.2f}")
    if b.cess:
        print(f"Cess ({args.cess:g}%): {b.cess:.2f}")
    print(f"Total GST: {b.total_gst:.2f}")
    print(f"Total amount: {b.total_amount:.2f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gst-import", description="Import ERP/Tally exports and compute GST.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_import = sub.add_parser("import", help="Import a CSV/JSON/Excel file")
    p_import.add_argument("file", help="Input file path")
    p_import.add_argument("--type", choices=TYPE_CHOICES, default=RecordType.PRODUCTS.value)
    p_import.add_argument("--xlsx", help="Write records and issues to this .xlsx file")
    p_import.set_defaults(func=cmd_import)

    p_sample = sub.add_parser("sample", help="Print a sample CSV or write an .xlsx template")
    p_sample.add_argument("--type", choices=TYPE_CHOICES, default=RecordType.PRODUCTS.value)
    p_sample.add_argument("--xlsx", help="Write the template to this .xlsx file instead")
    p_sample.set_defaults(func=cmd_sample)

    p_gst = sub.add_parser("gst", help="GST breakdown for an amount")
    p_gst.add_argument("amount", type=float)
    p_gst.add_argument("--rate", type=float, default=18.0)
    p_gst.add_argument("--cess", type=float, default=0.0)
    p_gst.add_argument("--from", dest="from_state", help="Origin state (code, abbreviation or name)")
    p_gst.add_argument("--to", dest="to_state", help="Destination state")
    group = p_gst.add_mutually_exclusive_group()
    group.add_argument("--igst", dest="force_igst", action="store_const", const=True, default=None)
    group.add_argument("--no-igst", dest="force_igst", action="store_const", const=False)
    p_gst.add_argument("--inclusive", action="store_true", help="Amount already includes GST")
    p_gst.set_defaults(func=cmd_gst)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
