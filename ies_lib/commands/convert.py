# -*- coding: utf-8 -*-
"""Command line converter for photometric files.

Converts IES files to CSV and CSV files back to IES. The direction is
picked from the input file extension: ``.ies`` (any case) is read as IES
and written as CSV, every other extension is read as CSV and written as
IES.
"""

import argparse
import logging
import sys
from pathlib import Path

from ies_lib import __version__
from ies_lib.constants import CSV_ENCODING
from ies_lib.constants import IES_ENCODING
from ies_lib.constants import JSON_ENCODING
from ies_lib.csv.format import format_csv_file
from ies_lib.enums import ConversionDirection
from ies_lib.enums import FileFormat
from ies_lib.errors import IesParseException
from ies_lib.ies.format import format_ies_file
from ies_lib.interface import IesInterface

logger = logging.getLogger(__name__)

_OUTPUT_ENCODINGS: dict[FileFormat, str] = {
    FileFormat.IES: IES_ENCODING,
    FileFormat.CSV: CSV_ENCODING,
    FileFormat.JSON: JSON_ENCODING,
}


class ConversionError(Exception):
    """Error raised for invalid conversion operations."""


def detect_direction(path: Path) -> ConversionDirection:
    """Pick the conversion direction from the input file extension.

    Args:
        path: Input file path

    Returns:
        IES_TO_CSV for ``.ies`` files, CSV_TO_IES otherwise
    """
    return ConversionDirection.from_extension(path.suffix)


def _convert(
    input_path: Path,
    output_path: Path | None = None,
    target_format: FileFormat | str | None = None,
    *,
    strict: bool = False,
) -> str | None:
    """Convert a file between formats.

    The input is parsed completely before anything is written, so a fatal
    parse error never leaves partial output behind.

    Args:
        input_path: Input file path
        output_path: Output file path (None = return as string)
        target_format: Target format (FileFormat or 'ies'/'csv'/'json').
            Defaults to the opposite of the source grammar.
        strict: Abort on documents whose arrays do not match their counts

    Returns:
        Converted content as string if output_path is None,
        otherwise None (writes to file)

    Raises:
        ConversionError: If conversion is not valid
        FileNotFoundError: If input file doesn't exist
        IesParseException: On a fatal parse error
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    direction = detect_direction(input_path)
    source_format = direction.source_format

    # Normalize target format to enum
    if isinstance(target_format, str):
        target_format = FileFormat(target_format)
    elif target_format is None:
        target_format = direction.target_format

    # Validate: no same-format conversion
    if source_format == target_format:
        raise ConversionError(
            f"Invalid conversion: {source_format.value} => {target_format.value}. "
            f"Source and target formats must be different."
        )

    document, errors = IesInterface.load(input_path, strict=strict)
    logger.debug("Parsed %s with %d diagnostics", input_path, len(errors))

    match target_format:
        case FileFormat.CSV:
            result = format_csv_file(document) or ""
        case FileFormat.IES:
            result = format_ies_file(document) or ""
        case FileFormat.JSON:
            result = document.model_dump_json(indent=2, by_alias=True)
        case _:
            raise ConversionError(
                f"Unsupported conversion: {source_format.value} => {target_format.value}"
            )

    # Output handling
    if output_path is None:
        return result

    with output_path.open(
        mode="w",
        encoding=_OUTPUT_ENCODINGS[target_format],
        errors="replace",
        newline="",
    ) as f:
        f.write(result)

    return None


def convert(args: list[str]) -> int:
    """Run a conversion from command line arguments.

    Args:
        args: Arguments without the program name

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        prog="ies_lib",
        description="Convert photometric files between IES and CSV formats",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ies_lib luminaire.ies                   # IES -> CSV (stdout)
  ies_lib luminaire.ies -o luminaire.csv  # IES -> CSV file
  ies_lib luminaire.csv                   # CSV -> IES (stdout)
  ies_lib luminaire.ies -f json           # Document as JSON

Notes:
  - .ies files (any case) are read as IES, everything else as CSV
  - Diagnostics are written to stderr
  - Exit code 1 on fatal errors (e.g. TILT=<filename>)
""",
    )

    parser.add_argument(
        "input_file",
        type=Path,
        help="Input file path (.ies or .csv)",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in FileFormat],
        default=None,
        dest="target_format",
        help="Target format (default: the opposite of the input format)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort when the arrays do not match the declared counts",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Trace every input line on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version: {__version__}",
    )

    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Processing file: %s", parsed_args.input_file)

    try:
        result = _convert(
            input_path=parsed_args.input_file,
            output_path=parsed_args.output_file,
            target_format=parsed_args.target_format,
            strict=parsed_args.strict,
        )

    except IesParseException as e:
        logger.error("%s", e)  # noqa: TRY400
        logger.error("Aborting...")
        return 1
    except (ConversionError, FileNotFoundError) as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1

    if result is not None:
        sys.stdout.write(result)
    else:
        logger.info("Wrote %s", parsed_args.output_file)

    return 0


def main() -> int:
    """Console script entry point."""
    return convert(sys.argv[1:])
