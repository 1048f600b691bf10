"""Command-line entry point.

Usage::

    vgen Product title:string price:int inStock:bool
    python -m vaporgen Product title price:double -C path/to/project
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from vaporgen import __version__
from vaporgen.config import GeneratorConfig
from vaporgen.errors import ScaffoldError
from vaporgen.scaffolder import ResourceGenerator
from vaporgen.utils import print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vgen",
        description="Generate Vapor boilerplate (model, migration, controller) for a resource",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Field types: int, double, bool, date, uuid; anything else is a String.\n\n"
            "Examples:\n"
            "  vgen Product title:string price:int inStock:bool\n"
            "  vgen Tag name -C ./MyVaporApp\n"
        ),
    )
    parser.add_argument("name", help="The name of the resource (e.g. Product)")
    parser.add_argument(
        "fields",
        nargs="*",
        metavar="FIELD",
        help="Fields in format name:type (e.g. title:string price:int)",
    )
    parser.add_argument(
        "--path", "-C",
        type=Path,
        default=None,
        help="Project root containing Sources/ (default: current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``vgen`` and ``python -m vaporgen``."""
    args = build_parser().parse_args(argv)

    config = GeneratorConfig(**({"start_dir": args.path} if args.path is not None else {}))

    generator = ResourceGenerator(config)
    try:
        result = generator.generate(args.name, args.fields)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_summary_table(
        {
            "Resource": result.resource_name,
            "Target": str(result.target_dir),
            "Files": str(len(result.written)),
        },
        title="Generated",
    )
    print_success(
        f"Done! Don't forget to register the migration and controller in "
        f"{config.marker_filename}."
    )


if __name__ == "__main__":
    main()
