"""Command-line interface for canvasmatrix."""

import argparse
import sys
from pathlib import Path

from canvasmatrix import __version__
from canvasmatrix.logging_config import get_logger

logger = get_logger(__name__)


def format_matrix(matrix, precision: int = 6) -> str:
    """Format a matrix as ``[a, b, c, d, e, f]`` with trailing zeros trimmed."""
    parts = []
    for value in matrix:
        text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
        # Avoid printing "-0"
        parts.append("0" if text in ("-0", "") else text)
    return "[" + ", ".join(parts) + "]"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cmx",
        description="Replay drawing context transform calls and report the resulting matrix.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cmx steps.yaml                                Print the final matrix
  cmx steps.yaml --validate                     Check the script only
  cmx steps.yaml --point 10 20                  Map a point through the matrix
  cmx steps.yaml --pdf in.pdf -o out.pdf        Apply the matrix to PDF pages
""",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version information and exit",
    )

    parser.add_argument(
        "script",
        nargs="?",
        type=Path,
        help="Path to YAML replay script",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the script and exit",
    )

    parser.add_argument(
        "--point",
        nargs=2,
        type=float,
        metavar=("X", "Y"),
        help="Also print where the point (X, Y) lands",
    )

    parser.add_argument(
        "--pdf",
        type=Path,
        help="Input PDF whose pages are transformed by the final matrix",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output PDF path (required with --pdf)",
    )

    # Logging options
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show debug output: replay steps and augmentation decisions",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file (includes all levels)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    from canvasmatrix.logging_config import setup_logging

    setup_logging(
        verbosity=parsed.verbose,
        quiet=parsed.quiet,
        log_file=parsed.log_file,
    )

    if parsed.version:
        logger.info("canvasmatrix %s", __version__)
        return 0

    if not parsed.script:
        parser.print_help()
        return 1

    if parsed.pdf and not parsed.output:
        logger.error("--output is required with --pdf")
        return 1

    from canvasmatrix.exceptions import CanvasMatrixError
    from canvasmatrix.script import load_script, replay

    try:
        script = load_script(parsed.script)

        if parsed.validate:
            logger.info("Script is valid: %s", parsed.script)
            logger.info("  Steps defined: %d", len(script.steps))
            return 0

        state = replay(script.steps)
        if state.depth:
            logger.warning("%d save() call(s) without a matching restore()", state.depth)
        logger.info("%s", format_matrix(state.current))

        if parsed.point:
            from canvasmatrix.matrix import apply_to_point

            x, y = apply_to_point(state.current, *parsed.point)
            logger.info("(%g, %g) -> (%g, %g)", parsed.point[0], parsed.point[1], x, y)

        if parsed.pdf:
            from canvasmatrix.pdf import apply_to_pdf

            count = apply_to_pdf(parsed.pdf, parsed.output, state.current)
            logger.info("Transformed %d page(s): %s", count, parsed.output)

        return 0
    except CanvasMatrixError as e:
        logger.error("Script error: %s", e)
        return 1
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        return 1
    except Exception as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
