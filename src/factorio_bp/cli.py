"""
Command-line interface for decoding, encoding and validating blueprints.

Usage:
    factorio-bp decode -i bp.txt -o bp.json --outform json
    factorio-bp decode -i bp.txt -o bp.txt.debug --outform debug --validate
    factorio-bp encode -i bp.json -o bp.txt
    factorio-bp validate -i bp.txt
"""
import argparse
import logging
import sys

from .codec import decode, encode, parse_document, render_document
from .config import settings, validate_config
from .errors import BlueprintError
from .io import read_text, write_text_atomic
from .render import OutputFormat, render_output
from .validate import format_validation, validate_document

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="factorio-bp",
        description="A utility tool for decoding and encoding Factorio blueprint strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a blueprint string into JSON or its typed debug form",
    )
    decode_parser.add_argument(
        "-i", "--infile",
        required=True,
        help="Path to the file containing the blueprint string"
    )
    decode_parser.add_argument(
        "-o", "--outfile",
        required=True,
        help="Path that the decoded blueprint is written to"
    )
    decode_parser.add_argument(
        "--outform",
        required=True,
        choices=[f.value for f in OutputFormat],
        help="Output file format"
    )
    decode_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output"
    )
    decode_parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Fail when the document breaks book/entity invariants"
    )

    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a JSON blueprint document into a blueprint string",
    )
    encode_parser.add_argument(
        "-i", "--infile",
        required=True,
        help="Path to the JSON document"
    )
    encode_parser.add_argument(
        "-o", "--outfile",
        required=True,
        help="Path that the blueprint string is written to"
    )
    encode_parser.add_argument(
        "--marker",
        default=None,
        help=f"Version marker character (default: {settings.VERSION_MARKER})"
    )
    encode_parser.add_argument(
        "--line-width",
        type=int,
        default=None,
        help="Wrap the blueprint string at this width (default: no wrapping)"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a blueprint string against book/entity invariants",
    )
    validate_parser.add_argument(
        "-i", "--infile",
        required=True,
        help="Path to the file containing the blueprint string"
    )

    for sub in (decode_parser, encode_parser, validate_parser):
        sub.add_argument(
            "-v", "--verbose",
            action="store_true",
            default=settings.VERBOSE,
            help="Verbose output"
        )

    return parser


def run_decode(args: argparse.Namespace) -> int:
    text = read_text(args.infile)
    raw_json = decode(text)
    output = render_output(raw_json, OutputFormat(args.outform), pretty=args.pretty, validate=args.validate)

    write_text_atomic(args.outfile, output)
    if args.verbose:
        print(f"✓ Decoded {args.infile} -> {args.outfile} ({args.outform})")
    return 0


def run_encode(args: argparse.Namespace) -> int:
    doc = parse_document(read_text(args.infile))
    output = encode(render_document(doc), marker=args.marker, line_width=args.line_width)

    write_text_atomic(args.outfile, output + "\n")
    if args.verbose:
        print(f"✓ Encoded {args.infile} -> {args.outfile}")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    doc = parse_document(decode(read_text(args.infile)), validate=False)
    result = validate_document(doc)

    print(format_validation(result))
    return 0 if result.ok else 1


COMMANDS = {
    "decode": run_decode,
    "encode": run_encode,
    "validate": run_validate,
}


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        validate_config()
        return COMMANDS[args.command](args)

    except BlueprintError as e:
        print(f"\n✗ {args.command} failed:\n{e}", file=sys.stderr)
        return 1

    except OSError as e:
        print(f"\n✗ File error: {e}", file=sys.stderr)
        return 1

    except RuntimeError as e:
        # Configuration errors
        print(f"\n✗ {e}", file=sys.stderr)
        return 1

    except Exception as e:
        print(f"\n✗ Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
