#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
from typing import Any

from .commands.factory import CommandFactory
from .core.units import ByteUnit

_OVERRIDE_FIELDS = (
    "decimal_places",
    "fixed_decimals",
    "thousands_separator",
    "unit",
    "unit_separator",
)


def _unit_arg(value: str) -> ByteUnit:
    unit = ByteUnit.from_label(value)
    if unit is None:
        choices = ", ".join(member.label for member in ByteUnit)
        raise argparse.ArgumentTypeError(f"unknown unit {value!r} (choose from {choices})")
    return unit


def _decimal_places_arg(value: str) -> int:
    try:
        places = int(value)
    except ValueError:
        places = -1
    if places < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    return places


class CliApplication:
    def __init__(self, factory: CommandFactory | None = None) -> None:
        self._factory = factory or CommandFactory()

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="bytesize",
            description="Convert between byte counts and human-readable sizes",
            epilog="Use -- before the action to pass negative sizes: bytesize -- parse -5MB",
        )
        parser.add_argument(
            "action",
            choices=["parse", "format", "convert"],
        )
        parser.add_argument("values", nargs="+", help="Sizes or byte counts")
        parser.add_argument(
            "--env-file",
            default=None,
            help="Optional env file with BYTESIZE_* format defaults",
        )
        parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

        formatting = parser.add_argument_group("format options")
        formatting.add_argument("--decimal-places", type=_decimal_places_arg, default=None)
        formatting.add_argument(
            "--fixed-decimals",
            action=argparse.BooleanOptionalAction,
            default=None,
        )
        formatting.add_argument("--thousands-separator", default=None)
        formatting.add_argument("--unit", type=_unit_arg, default=None)
        formatting.add_argument("--unit-separator", default=None)
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        if args.verbose:
            logging.basicConfig(level=logging.DEBUG)
        overrides: dict[str, Any] = {
            name: getattr(args, name)
            for name in _OVERRIDE_FIELDS
            if getattr(args, name) is not None
        }
        command = self._factory.create(args.action, args.values, args.env_file, overrides)
        return command.run()


def main() -> int:
    app = CliApplication()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
