"""CLI interface for data-classifier — decode and build classification values.

Usage:
    # Decode raw values found in logs (decimal or hex)
    python -m data_classifier.cli describe 6 0x21

    # Build a value from label names
    python -m data_classifier.cli combine ugc pii

    # List every declared flag
    python -m data_classifier.cli flags

    # Show how a policy treats field names
    python -m data_classifier.cli check --config policy.yaml message.body user.name

All output is JSON on stdout.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .classification import Classification, combine
from .config import classify, create_filter, load_from_yaml
from .types import Attribute


def _describe(value: Classification) -> dict:
    return {"value": int(value), "labels": str(value)}


def cmd_describe(args: argparse.Namespace) -> None:
    """Render raw integer values as label strings."""
    json.dump([_describe(Classification(v)) for v in args.values], sys.stdout)
    sys.stdout.write("\n")


def cmd_combine(args: argparse.Namespace) -> None:
    """Combine label names into one value."""
    value = combine(*(Classification.from_labels(label) for label in args.labels))
    json.dump(_describe(value), sys.stdout)
    sys.stdout.write("\n")


def cmd_flags(args: argparse.Namespace) -> None:
    """List declared flags (aliases excluded)."""
    flags = [Classification.NO_VALUE, *(flag for flag in Classification if flag)]
    json.dump([_describe(flag) for flag in flags], sys.stdout, indent=2)
    sys.stdout.write("\n")


def cmd_check(args: argparse.Namespace) -> None:
    """Classify field names with a policy file and report what it keeps."""
    import yaml  # optional dependency
    try:
        config = load_from_yaml(args.config)
    except yaml.YAMLError as e:
        raise ValueError(f"invalid policy file {args.config}: {e}") from e
    keep = create_filter(config)
    output = []
    for name in args.fields:
        hint = classify(config, name)
        output.append({
            "field": name,
            **_describe(hint),
            "keep": keep(Attribute(name=name, value=None, classification=hint)),
        })
    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _int_value(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="data-classifier",
        description="Classification labels for telemetry data",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    p = sub.add_parser("describe", help="Render integer values as labels")
    p.add_argument("values", nargs="+", type=_int_value)
    p = sub.add_parser("combine", help="Combine label names into a value")
    p.add_argument("labels", nargs="+")
    sub.add_parser("flags", help="List declared flags")
    p = sub.add_parser("check", help="Apply a policy file to field names")
    p.add_argument("--config", required=True, help="YAML policy path")
    p.add_argument("fields", nargs="+")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    cmds = {
        "describe": cmd_describe,
        "combine": cmd_combine,
        "flags": cmd_flags,
        "check": cmd_check,
    }
    try:
        cmds[args.command](args)
    except (ValueError, OSError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
