"""Main CLI entry point for bele."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..cli.convert import PACKERS, decode_hex, encode_value
from ..exceptions import BeleError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bele",
        description="bele: Byte-Order Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bele decode --type uint24 0c2238               Decode big-endian uint24
  bele decode --type uint32 --order le 0c22384e  Decode little-endian uint32
  bele encode --type float64 255                 Encode a double
  bele --version                                 Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bele {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    for name, help_text, operand in (
        ("decode", "Decode hex bytes to a value", "HEX"),
        ("encode", "Encode a value to hex bytes", "VALUE"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--type",
            "-t",
            dest="type_name",
            choices=sorted(PACKERS),
            default="uint32",
            help="Value type (default: uint32)",
        )
        sub.add_argument(
            "--order",
            "-o",
            choices=["big", "little", "be", "le"],
            default="big",
            help="Byte order (default: big)",
        )
        sub.add_argument(operand.lower(), metavar=operand)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the bele CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "decode":
            print(decode_hex(args.hex, args.type_name, args.order))
            return 0
        if args.command == "encode":
            print(encode_value(args.value, args.type_name, args.order))
            return 0
    except BeleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
