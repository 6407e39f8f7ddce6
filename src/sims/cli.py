"""
Command-line interface for the SimS content package.

Lets editors look at the bundle the site will render, check a content file
before it is deployed via ``SIMS_CONTENT_PATH``, and export the embedded
content as a starting point for such a file.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from sims.config import ContentSettings
from sims.content.bundle import get_content_bundle
from sims.content.providers import FileContentProvider, dump_bundle
from sims.core.exceptions import SimsException
from sims.core.logger import configure_root_logger, get_logger
from sims.models.content_bundle import SiteContentBundle

logger = get_logger(__name__)


def _load(content_path: Optional[str]) -> SiteContentBundle:
    if content_path:
        return FileContentProvider(content_path).load()
    return get_content_bundle()


def show(section: Optional[str] = None, content_path: Optional[str] = None) -> Any:
    """
    Return the bundle (or one section of it) as plain JSON-compatible data.

    Args:
        section: Top-level field name such as ``navigation`` or ``data_entry``
        content_path: Read this JSON/YAML file instead of the active bundle

    Raises:
        UnknownSectionError: If ``section`` is not a bundle field
    """
    bundle = _load(content_path)
    if section is None:
        return bundle.model_dump(mode="json")
    bundle.section(section)  # rejects names that are not bundle fields
    return bundle.model_dump(mode="json", include={section})[section]


def validate_content(content_path: str) -> bool:
    """
    Validate a content file without activating it.

    Returns:
        True if the file holds a valid bundle

    Raises:
        SimsException: If the file is missing, unparsable or invalid
    """
    logger.info(f"Validating content: {content_path}")
    FileContentProvider(content_path).load()
    logger.info("Content is valid")
    return True


def export_content(output_path: str, content_path: Optional[str] = None) -> Path:
    """Write the active bundle (or the one in ``content_path``) to ``output_path``."""
    return dump_bundle(_load(content_path), output_path)


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Command-line interface for sims.

    Supports subcommands:
    - show: Print the bundle or one section as JSON
    - validate: Validate a content file
    - export: Write the bundle to a JSON/YAML file

    Usage:
        sims-content show --section navigation
        sims-content validate /path/to/site.yaml
        sims-content export /path/to/site.json
    """
    parser = argparse.ArgumentParser(
        prog="sims-content",
        description="SimS - Sicherheit im Supermarkt: landing page content"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print the content bundle as JSON"
    )
    show_parser.add_argument(
        "--section",
        choices=SiteContentBundle.section_names(),
        help="Only print this section"
    )
    show_parser.add_argument(
        "--content",
        help="Read content from this JSON/YAML file instead of the active bundle"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a content file"
    )
    validate_parser.add_argument(
        "content",
        help="Path to content file (JSON or YAML)"
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Write the content bundle to a JSON/YAML file"
    )
    export_parser.add_argument(
        "output",
        help="Destination file (.json, .yaml or .yml)"
    )
    export_parser.add_argument(
        "--content",
        help="Export this JSON/YAML file instead of the active bundle"
    )

    args = parser.parse_args(argv)

    try:
        settings = ContentSettings.from_env()
    except SimsException as e:
        configure_root_logger()
        logger.error(f"{e}")
        sys.exit(1)

    configure_root_logger("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.command == "show":
            data = show(section=args.section, content_path=args.content)
            print(json.dumps(data, indent=2, ensure_ascii=False))
            sys.exit(0)

        elif args.command == "validate":
            validate_content(args.content)
            sys.exit(0)

        elif args.command == "export":
            path = export_content(args.output, content_path=args.content)
            print(path)
            sys.exit(0)

        else:
            parser.print_help()
            sys.exit(0)

    except SimsException as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
