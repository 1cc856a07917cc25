"""CLI entrypoint for humaninput."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from importlib import metadata
from pathlib import Path

from .config import load_config
from .events import EventRegistry
from .logging_utils import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="humaninput",
        description="Show how event expressions are normalized by the event registry",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.toml (default: ~/.config/humaninput/config.toml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured logging level",
    )
    parser.add_argument(
        "events",
        nargs="*",
        help="Event expressions to normalize, e.g. 'alt-ctrl->a' or 'konami'",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Load configuration, then print each event expression with its stored key."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.version:
        try:
            version = metadata.version("humaninput")
        except metadata.PackageNotFoundError:
            version = "0.0.0"
        print(f"humaninput {version}")
        return

    config = load_config(args.config)
    logging_config = dict(config["logging"])
    if args.log_level:
        logging_config["level"] = args.log_level
    configure_logging(logging_config)

    registry = EventRegistry.from_config(config)
    for expression in args.events:
        print(f"{expression} -> {registry.normalize_event_name(expression)}")


if __name__ == "__main__":
    main()
