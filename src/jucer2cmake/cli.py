"""
Command-line interface for jucer2cmake.

Usage:
    jucer2cmake <jucer_project_file> <Reprojucer.cmake_file> [-o <output-dir>]
    jucer2cmake --juce6 <jucer_project_file> [-o <output-dir>]
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional

from jucer2cmake import __version__
from jucer2cmake.core.config import ConversionConfig, convert
from jucer2cmake.errors import Jucer2CMakeError


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser reporting usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = _ArgumentParser(
        prog="jucer2cmake",
        description="Generate a CMakeLists.txt from a Projucer (.jucer) project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate CMakeLists.txt (Reprojucer) in the current directory
  jucer2cmake ../MyApp.jucer ../../cmake/Reprojucer.cmake

  # Generate CMakeLists.txt for JUCE 6's CMake API
  jucer2cmake --juce6 ../MyApp.jucer

  # Write CMakeLists.txt next to the project
  jucer2cmake MyApp.jucer cmake/Reprojucer.cmake -o .
""",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"jucer2cmake {__version__}",
    )
    parser.add_argument(
        "jucer_file",
        type=Path,
        help="Path to the .jucer project file",
    )
    parser.add_argument(
        "reprojucer_file",
        type=Path,
        nargs="?",
        help="Path to Reprojucer.cmake (not used with --juce6)",
    )
    parser.add_argument(
        "--juce6",
        action="store_true",
        help="Generate against JUCE 6's CMake API instead of Reprojucer",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        help="Directory to write CMakeLists.txt to (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a summary of the generated script",
    )

    return parser


def print_error(error: str) -> None:
    print(f"error: {error}", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.juce6 and args.reprojucer_file is not None:
        parser.print_usage(sys.stderr)
        print_error("a Reprojucer.cmake file cannot be used with --juce6")
        return 1
    if not args.juce6 and args.reprojucer_file is None:
        parser.print_usage(sys.stderr)
        print_error("the following arguments are required: reprojucer_file")
        return 1

    config = ConversionConfig(
        jucer_file=args.jucer_file,
        reprojucer_file=args.reprojucer_file,
        output_dir=args.output_dir,
        juce6=args.juce6,
    )

    try:
        result = convert(config)
    except Jucer2CMakeError as e:
        print_error(str(e))
        return 1

    if args.verbose:
        print(f"Generated {result.output_path} from {args.jucer_file}")
        if not args.juce6:
            print(f"  File groups: {len(result.file_groups)}")
            print(f"  Modules: {', '.join(result.modules) or '(none)'}")
            print(f"  Exporters: {', '.join(result.exporters) or '(none)'}")
            if result.skipped_exporters:
                skipped = ", ".join(result.skipped_exporters)
                print(f"  Skipped exporters: {skipped}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
