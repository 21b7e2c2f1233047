"""
Command line entry point.

Reads a source file (or standard input), updates the AssemblyVersion or
AssemblyFileVersion attribute it contains and writes the result to a file (or
standard output).

Exit codes:
    0  success, including "version not found" (a warning is logged)
    1  invalid options
    2  input could not be read
    3  version could not be updated
    4  output could not be written
"""
from __future__ import annotations

import argparse
import codecs
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import InvalidConfiguration, UpdateVersionError
from .schemas import CalculationConfig
from .services import VersionUpdater
from .utils.clock import Clock
from .version import read_version

EXIT_OK = 0
EXIT_OPTIONS = 1
EXIT_INPUT = 2
EXIT_UPDATE = 3
EXIT_OUTPUT = 4

logger = logging.getLogger("update_version")


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, so main() picks the exit code."""

    def error(self, message: str):
        raise InvalidConfiguration(message)


def _start_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def _encoding(value: str) -> str:
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"unknown encoding '{value}'")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = _OptionParser(
        prog="update-version",
        description="Update the AssemblyVersion or AssemblyFileVersion attribute in a source file.",
    )
    parser.add_argument(
        "-s", "--startdate", dest="start_date", type=_start_date, default=settings.start_date,
        metavar="DATE", help="Project start date, required by the MonthDay build type",
    )
    parser.add_argument(
        "-b", "--build", default=settings.build,
        metavar="{Fixed,MonthDay,Increment,BuildDay}", help="Build number algorithm",
    )
    parser.add_argument(
        "-p", "--pin", default=None, metavar="x.x.x.x",
        help="Use this version instead of calculating one",
    )
    parser.add_argument(
        "-r", "--revision", default=settings.revision,
        metavar="{Fixed,Automatic,Increment}", help="Revision number algorithm",
    )
    parser.add_argument(
        "-i", "--inputfile", default=None, metavar="FILE",
        help="File to read (default: standard input)",
    )
    parser.add_argument(
        "-o", "--outputfile", default=None, metavar="FILE",
        help="File to write (default: standard output)",
    )
    parser.add_argument(
        "-v", "--version", dest="version_type", default=settings.version_type,
        metavar="{Assembly,File}", help="Attribute to update",
    )
    parser.add_argument(
        "-e", "--encoding", type=_encoding, default=settings.encoding,
        help="Text encoding of the input and output",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def read_input(path: Optional[str], encoding: str) -> str:
    """Read and decode the whole input. Line endings are left untouched."""
    if path is None:
        data = sys.stdin.buffer.read()
    else:
        input_file = Path(path)
        if not input_file.is_file():
            raise FileNotFoundError(f"File does not exist: {path}")
        data = input_file.read_bytes()
    return data.decode(encoding)


def write_output(output: str, path: Optional[str], encoding: str) -> None:
    # Encode before opening the target so a failure leaves no partial file
    data = output.encode(encoding)
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        Path(path).write_bytes(data)


def resolve_config(args: argparse.Namespace, clock: Optional[Clock] = None) -> CalculationConfig:
    return CalculationConfig.resolve(
        clock=clock,
        start_date=args.start_date,
        build_type=args.build,
        revision_type=args.revision,
        pin_version=args.pin,
        version_type=args.version_type,
    )


def main(argv: Optional[Sequence[str]] = None, clock: Optional[Clock] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging("WARNING")
        logger.error("Error reading settings: %s", exc)
        return EXIT_OPTIONS

    configure_logging(settings.log_level)
    logger.debug("update-version %s", read_version())

    parser = build_parser(settings)
    try:
        args = parser.parse_args(argv)
        config = resolve_config(args, clock)
    except InvalidConfiguration as exc:
        logger.error("Error parsing command line options: %s", exc)
        parser.print_usage(sys.stderr)
        return EXIT_OPTIONS

    try:
        text = read_input(args.inputfile, args.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading input: %s", exc)
        return EXIT_INPUT

    try:
        result = VersionUpdater(config, clock).update(text)
    except UpdateVersionError as exc:
        logger.error("Error updating version: %s", exc)
        return EXIT_UPDATE

    try:
        write_output(result.output, args.outputfile, args.encoding)
    except (OSError, UnicodeEncodeError) as exc:
        logger.error("Error writing output: %s", exc)
        return EXIT_OUTPUT

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
