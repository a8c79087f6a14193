"""Command-line interface for inspecting and converting dipole projects."""

import argparse
import logging
import sys
from typing import List, Optional

from ...core.domain.models.atom import format_atoms
from ...core.domain.models.results import ProjectSnapshot, format_value
from ...core.exceptions import DipolarError
from ...core.services.project_service import ProjectService
from ...core.validation import parse_number
from ...infrastructure.config.electronegativity_loader import (
    DEFAULT_CONFIG_PATH,
    load_electronegativity_table,
    render_table,
)
from ...infrastructure.repositories.project_repository import ProjectRepository


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add options accepted before or after the subcommand."""
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable informational logging",
    )
    parser.add_argument(
        "--config",
        default=argparse.SUPPRESS,
        help=f"Electronegativity table (default: {DEFAULT_CONFIG_PATH}, "
        "created with defaults if missing)",
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="dipolar",
        description="Estimate molecular dipole moments from bonds and angles",
    )
    add_common_arguments(parser)
    parser.set_defaults(verbose=False, config=str(DEFAULT_CONFIG_PATH))

    # subcommands accept the same options after their name
    common = argparse.ArgumentParser(add_help=False)
    add_common_arguments(common)
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser(
        "show", parents=[common], help="Print the tables and derived values"
    )
    show.add_argument("path", help="Project (.txt) or geometry (.cml) file")
    show.add_argument(
        "--radius", help="Molecular radius in angstrom (overrides the file)"
    )

    convert = subparsers.add_parser(
        "convert", parents=[common], help="Save a file in the text format"
    )
    convert.add_argument("source", help="Project (.txt) or geometry (.cml) file")
    convert.add_argument("dest", help="Output project file")

    subparsers.add_parser(
        "init-config", parents=[common], help="Create and print the config file"
    )
    return parser


def render_snapshot(snapshot: ProjectSnapshot) -> str:
    """Render the bond, angle and group tables as plain text."""
    lines = ["Bonds", f"{'#':>3}  {'bond':<20}{'d':>10}{'mu':>10}"]
    for index, name, length, dipole in snapshot.bond_rows():
        lines.append(f"{index:>3}  {name:<20}{length:>10g}{format_value(dipole):>10}")
    lines += ["", "Angles", f"{'#':>3}  {'angle':<20}{'alpha':>10}{'mu':>10}"]
    for index, name, angle, dipole in snapshot.angle_rows():
        lines.append(f"{index:>3}  {name:<20}{angle:>10g}{format_value(dipole):>10}")
    lines += ["", "Molecule"]
    for index, triple in enumerate(snapshot.groups):
        lines.append(f"{index:>3}  {format_atoms(triple)}")
    lines += [
        "",
        f"Radius: {format_value(snapshot.radius)}",
        f"mu: {format_value(snapshot.summary.aggregate_dipole)}",
        f"P: {format_value(snapshot.summary.polarization)}",
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the dipolar CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        table = load_electronegativity_table(args.config)
        if args.command == "init-config":
            print(f"# {args.config}")
            print(render_table(table.values), end="")
            return 0

        project = ProjectService(table, ProjectRepository())
        if args.command == "show":
            project.open_project(args.path)
            if args.radius is not None:
                project.set_radius(parse_number(args.radius, "radius"))
            print(render_snapshot(project.snapshot()))
        elif args.command == "convert":
            project.open_project(args.source)
            project.save_project(args.dest)
    except (DipolarError, OSError, ValueError) as exc:
        print(f"dipolar: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
