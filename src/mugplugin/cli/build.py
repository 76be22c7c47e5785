"""
Command-line interface for mug parameter validation and model generation.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..enums import ParameterKind
from ..io.loaders import ConstraintPolicy, load_policy_json
from ..logging_config import setup_logging
from ..parameters.presets import PRESETS, get_preset
from ..parameters.store import ParameterStore
from ..parameters.output import to_json, to_summary
from ..core.builder import BuildRejected, StepFileBuilder, request_build
from ..constants import DEFAULT_PRESET_NAME

# Command-line option -> parameter, in the order values are applied
FIELD_OPTIONS = (
    ("diameter", ParameterKind.DIAMETER),
    ("height", ParameterKind.HEIGHT),
    ("thickness", ParameterKind.THICKNESS),
    ("handle_length", ParameterKind.HANDLE_LENGTH),
    ("handle_diameter", ParameterKind.HANDLE_DIAMETER),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mugplugin",
        description="Validate mug parameters and generate a STEP model.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build the default (average) mug
  mugplugin -o mug.step

  # Start from the minimum preset and widen it
  mugplugin --preset minimum --diameter 80 -o mug.step

  # Only check values, print JSON
  mugplugin --thickness 50 --no-build --json

  # Debug log written to a file
  mugplugin -v --log-file mug.log --no-build
        """
    )

    parser.add_argument(
        '--preset',
        choices=sorted(PRESETS),
        default=DEFAULT_PRESET_NAME,
        help=f'Starting values (default: {DEFAULT_PRESET_NAME})'
    )

    for option, kind in FIELD_OPTIONS:
        parser.add_argument(
            f"--{option.replace('_', '-')}",
            dest=option,
            metavar='MM',
            help=f'Mug {kind.label} in mm'
        )

    parser.add_argument(
        '--policy',
        type=Path,
        help='JSON file overriding validation bounds'
    )

    parser.add_argument(
        '-o', '--output',
        type=Path,
        help='STEP file to write (default: build without export)'
    )

    parser.add_argument(
        '--no-build',
        action='store_true',
        help='Validate only, do not generate geometry'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print parameters and errors as JSON'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        help='Also write log records to this file'
    )

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        policy = load_policy_json(args.policy) if args.policy else ConstraintPolicy()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading policy: {e}", file=sys.stderr)
        return 1

    store = ParameterStore.from_preset(get_preset(args.preset), policy=policy)

    for option, kind in FIELD_OPTIONS:
        raw = getattr(args, option)
        if raw is None:
            continue
        error = store.set_parameter_value(kind, raw)
        if error is not None:
            print(f"  ✗ {kind.label.capitalize()}: {error.message}", file=sys.stderr)

    if args.json:
        print(to_json(store))
    else:
        print(to_summary(store))

    if args.no_build:
        return 0 if store.is_fully_valid() else 1

    try:
        request_build(store, StepFileBuilder(args.output))
    except BuildRejected as e:
        print(f"\n{e}", file=sys.stderr)
        return 1

    if args.output is not None and not args.json:
        print(f"\nSaved STEP: {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
