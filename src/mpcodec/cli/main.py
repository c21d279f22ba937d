"""Main CLI entry point for mpcodec."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .. import __version__
from ..codec import decode, encode
from ..exceptions import MpcodecError
from ..models.options import DecodeOptions, EncodeOptions
from ..utils.dump import format_value, to_hex
from .selftest import run_selftest, same

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mpcodec CLI."""
    parser = argparse.ArgumentParser(
        prog="mpcodec",
        description="mpcodec: MessagePack-compatible binary codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mpcodec --encode '{"a": 1}'            Encode a JSON literal, print hex
  mpcodec --decode '93 01 02 03'         Decode hex, print a structural dump
  mpcodec --roundtrip '[1, -129, 1.5]'   Encode then decode, report PASS/FAIL
  mpcodec --selftest                     Run the built-in round-trip table
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="JSON", help="Encode a JSON literal")
    action.add_argument("--decode", metavar="HEX", help="Decode hex-encoded bytes")
    action.add_argument("--roundtrip", metavar="JSON", help="Encode and decode a JSON literal")
    action.add_argument("--selftest", action="store_true", help="Run the built-in self test")

    parser.add_argument(
        "--bin-type",
        action="store_true",
        help="Use bin tags for payloads that are not valid UTF-8",
    )
    parser.add_argument(
        "--force-bin",
        action="store_true",
        help="With --bin-type, tag every string as binary",
    )
    parser.add_argument(
        "--require-utf8",
        action="store_true",
        help="Reject decoded strings that are not valid UTF-8",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"mpcodec {__version__}")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the mpcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    encode_options = EncodeOptions(
        tag_binary_distinctly=args.bin_type, force_binary_tag=args.force_bin
    )
    decode_options = DecodeOptions(require_utf8=args.require_utf8)

    try:
        if args.encode is not None:
            print(to_hex(encode(json.loads(args.encode), encode_options)))
            return 0

        if args.decode is not None:
            data = bytes.fromhex(args.decode)
            print(format_value(decode(data, decode_options)))
            return 0

        if args.roundtrip is not None:
            literal = json.loads(args.roundtrip)
            encoded = encode(literal, encode_options)
            decoded = decode(encoded, decode_options)
            print(to_hex(encoded))
            print(format_value(decoded))
            if same(literal, decoded.to_native()):
                print("PASS")
                return 0
            print("FAIL")
            return 1

        if args.selftest:
            return 1 if run_selftest(encode_options, decode_options) else 0

    except (MpcodecError, ValidationError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
