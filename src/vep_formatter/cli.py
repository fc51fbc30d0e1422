"""Command-line interface for vep-formatter."""

import argparse
import logging
import sys
from typing import List, Optional

from vep_formatter import __version__
from vep_formatter.config import EVERYTHING, KNOWN_FLAGS, OutputConfig
from vep_formatter.formatter import LineFormatter
from vep_formatter.headers import CustomTrack, PluginHeaders
from vep_formatter.models import InvalidFieldValueError
from vep_formatter.output import read_bags, write_vep

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vep-formatter",
        description="Render annotated variant records (JSON Lines) as VEP-format text.",
    )
    parser.add_argument(
        "input",
        help="JSON Lines file with one attribute object per variant allele/feature",
    )
    parser.add_argument(
        "-o", "--output", type=str, default="variant_effect_output.txt",
        help="Output file path (default: variant_effect_output.txt)",
    )
    parser.add_argument(
        "--custom", action="append", default=[], metavar="SPEC",
        help="Custom annotation as file,short_name,format,type[,force_report_coordinates[,field...]] (repeatable)",
    )
    parser.add_argument(
        "--plugin-header", action="append", default=[], metavar="NAME=DESCRIPTION",
        help="Extra field declared by a plugin (repeatable)",
    )
    parser.add_argument(
        "--no-headers", action="store_true",
        help="Do not write the header block",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose/debug logging",
    )

    flags = parser.add_argument_group("output fields")
    flags.add_argument(
        f"--{EVERYTHING}", action="store_true",
        help="Enable every optional output field",
    )
    for flag in KNOWN_FLAGS:
        flags.add_argument(f"--{flag}", action="store_true")
    return parser


def _parse_plugin_headers(values: List[str]) -> List[PluginHeaders]:
    header_info = {}
    for value in values:
        name, sep, description = value.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Invalid plugin header (expected NAME=DESCRIPTION): {value!r}")
        header_info[name.strip()] = description.strip()
    return [PluginHeaders("cli", header_info)] if header_info else []


def config_from_args(args: argparse.Namespace) -> OutputConfig:
    flags = {flag for flag in KNOWN_FLAGS + [EVERYTHING] if getattr(args, flag, False)}
    return OutputConfig(
        flags=flags,
        plugins=_parse_plugin_headers(args.plugin_header),
        custom=[CustomTrack.from_spec(spec) for spec in args.custom],
        no_headers=args.no_headers,
        tool_version=__version__,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    try:
        bags = read_bags(args.input)
    except FileNotFoundError:
        print(f"Error: file not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    formatter = LineFormatter(config)
    try:
        count = write_vep(bags, args.output, formatter)
    except InvalidFieldValueError as exc:
        logger.error("Cannot render record: %s", exc)
        sys.exit(1)

    print(f"Done. {count} line(s) written.")
    print(f"Output: {args.output}")


if __name__ == "__main__":
    main()
