"""CLI interface for the permission catalog."""

import argparse
import sys
from typing import List, Optional, Sequence

from .catalog import (
    ExportFormat,
    PermissionDefinition,
    ScopeValidator,
    export_permissions,
    get_catalog,
)
from .catalog.errors import CatalogError
from .common.config import EXPORT_FORMATS, LOG_LEVELS, DEFAULT_CONFIG_PATH, GraphPermissionsConfig, load_typed_config
from .common.logger import setup_logger


def _load_settings(config_path: Optional[str]) -> GraphPermissionsConfig:
    """Load configuration, falling back to defaults when no file exists."""
    try:
        return load_typed_config(config_path or DEFAULT_CONFIG_PATH)
    except FileNotFoundError:
        if config_path:
            raise
        return GraphPermissionsConfig()


def format_table(definitions: Sequence[PermissionDefinition]) -> str:
    """Render definitions as a fixed-width text table."""
    headers = ("PERMISSION", "CATEGORY", "SINCE", "REVIEW")
    rows = [
        (d.identifier, d.category.value, d.introduced_in_version or "-", d.review.value)
        for d in definitions
    ]
    widths = [max(len(row[i]) for row in [headers] + rows) for i in range(len(headers))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
             for row in [headers] + rows]
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-permissions",
        description="Browse and validate Facebook Graph API permissions",
    )
    parser.add_argument("--config", help=f"Configuration file (default: {DEFAULT_CONFIG_PATH})")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List permissions")
    list_parser.add_argument("--category", help="Only list permissions of this category")
    list_parser.add_argument("--format", choices=EXPORT_FORMATS, help="Output format")

    show_parser = subparsers.add_parser("show", help="Show one permission")
    show_parser.add_argument("identifier", help="Wire identifier, e.g. 'email'")

    validate_parser = subparsers.add_parser("validate", help="Validate a requested scope")
    validate_parser.add_argument("scope", help="Comma separated scope, e.g. 'email,user_posts'")
    validate_parser.add_argument("--strict", action="store_true", default=None,
                                 help="Fail when any permission is unknown")

    subparsers.add_parser("categories", help="List permission categories")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    settings = _load_settings(args.config)

    try:
        setup_logger(
            log_dir=settings.logging.log_dir,
            level=args.log_level or settings.logging.level,
            file_logging=settings.logging.file_logging,
            console_logging=settings.logging.console_logging,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    catalog = get_catalog()

    try:
        if args.command == "list":
            definitions = catalog.by_category(args.category) if args.category else catalog.all()
            fmt = args.format or settings.export.default_format
            if fmt == "table":
                sys.stdout.write(format_table(definitions))
            else:
                sys.stdout.write(export_permissions(definitions, ExportFormat(fmt)))
            return 0

        if args.command == "show":
            definition = catalog.get(args.identifier)
            print(f"Permission: {definition.identifier}")
            print(f"Category: {definition.category.value}")
            print(f"Since: {definition.introduced_in_version or '-'}")
            print(f"Review: {definition.review.value}")
            print(f"Description: {definition.description}")
            return 0

        if args.command == "validate":
            strict = settings.scopes.strict if args.strict is None else args.strict
            validator = ScopeValidator(
                catalog, strict=strict, warn_on_review=settings.scopes.warn_on_review
            )
            result = validator.validate(args.scope)
            for definition in result.known:
                marker = " (review)" if definition.requires_review else ""
                print(f"known: {definition.identifier}{marker}")
            for identifier in result.unknown:
                print(f"unknown: {identifier}")
            return 0 if result.is_valid else 1

        for category, members in catalog.grouped().items():
            print(f"{category.value}: {len(members)}")
        return 0

    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
