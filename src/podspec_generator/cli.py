"""Command-line interface for the podspec generator.

This module provides the CLI entry point for writing a CocoaPods podspec
from a JSON build configuration.
"""

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .core.paths import PodspecPathError
from .logging_setup import setup_logging
from .pipeline import PodspecPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podspec-gen",
        description="Generate a CocoaPods podspec for J2ObjC-translated code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write build/j2objcOutputs/<pod_name>.podspec
  podspec-gen --config podspec.json

  # Print the podspec instead of writing it
  podspec-gen --config podspec.json --stdout
        """,
    )

    parser.add_argument("--config", required=True, help="Path to the JSON build configuration")

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the podspec to stdout instead of writing the file",
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the podspec generator."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        pipeline = PodspecPipeline(load_config(Path(args.config)))

        if args.stdout:
            sys.stdout.write(pipeline.render())
            return

        podspec = pipeline.write()
        print(f"Podspec written to {podspec}", file=sys.stderr)

    except (ConfigError, PodspecPathError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except OSError as e:
        print(f"Error: Failed to write podspec: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
