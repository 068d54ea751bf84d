"""CLI entry point for updating a project's pom.xml.

Wires together the project-model loader, settings, and the POM updater.
"""

import argparse
import logging
import sys
from pathlib import Path

from .errors import PomSyncError
from .mapping import parse_scope_option
from .pom_updater import POMUpdater
from .project_loader import load_project_model
from .settings import POMSettings, SerializationPolicy

DEFAULT_MODEL_FILE = "project.json"


def _scope_option(value: str) -> tuple:
    try:
        return parse_scope_option(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Update a project's pom.xml from its dependencies and licenses"
    )
    parser.add_argument("project", type=Path, help="Project directory containing (or to contain) pom.xml")
    parser.add_argument(
        "--model", type=Path, default=None,
        help=f"Project model JSON file (default: <project>/{DEFAULT_MODEL_FILE})",
    )
    parser.add_argument(
        "--scope", "-s", type=_scope_option, action="append", default=[],
        metavar="GROUP=SCOPE[:optional]",
        help="Map a dependency group to a Maven scope (repeatable)",
    )
    parser.add_argument(
        "--xml-declaration", action="store_true",
        help="Start the file with an <?xml ...?> declaration",
    )
    parser.add_argument(
        "--reformat", action="store_true",
        help="Re-indent the whole file instead of keeping its existing layout",
    )
    parser.add_argument("--dry-run", "-n", action="store_true", help="Print the pom.xml without writing it")
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> POMSettings:
    """Create POMSettings from parsed arguments."""
    settings = POMSettings(
        serialization=SerializationPolicy(
            include_xml_declaration=args.xml_declaration,
            preserve_existing_whitespace=not args.reformat,
        )
    )
    for group_name, options in args.scope:
        settings.map_group(group_name, options.scope, options.optional)
    return settings


def main(argv=None) -> int:
    """CLI entry point. Parses arguments and delegates to ``POMUpdater``."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    model_path = args.model or args.project / DEFAULT_MODEL_FILE
    try:
        model = load_project_model(model_path)
        updater = POMUpdater(args.project, model, build_settings(args))
        if args.dry_run:
            print(updater.render(), end="")
        else:
            path = updater.update()
            print(f"  ✓ {path}")
    except PomSyncError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0
