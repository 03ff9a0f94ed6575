"""Command line front end: convert a request document and show the result."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from initializr.config import Config
from initializr.metadata import InitializrMetadata, MetadataBuilder, MetadataLoadError, load_metadata
from initializr.project import (
    InternalInconsistency,
    InvalidProjectRequest,
    ProjectRequest,
    RequestToDescriptionConverter,
)
from initializr.utils import console, load_json, print_error, print_success, print_summary_table, print_warning

EXIT_OK = 0
EXIT_INVALID_REQUEST = 1
EXIT_INTERNAL_ERROR = 2


def _load_catalog(metadata_path: Optional[Path]) -> InitializrMetadata:
    if metadata_path is None:
        print_warning("No metadata file given, using the built-in default catalog.")
        metadata = MetadataBuilder.with_defaults().build()
        print_summary_table(metadata.summary(), title="Metadata catalog")
        return metadata
    return load_metadata(metadata_path)


def run(
    request_path: Path,
    metadata_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
    as_json: bool = False,
) -> int:
    """Convert the request stored at *request_path* and report the outcome.

    Returns:
        The process exit code.
    """
    try:
        config = Config.load(config_path) if config_path else Config.from_env()
        metadata = _load_catalog(metadata_path or config.metadata_path)
        submitted = ProjectRequest.model_validate(load_json(request_path))
    except (OSError, ValueError, ValidationError, MetadataLoadError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_INTERNAL_ERROR

    # Same as the web form: catalog defaults first, submitted fields on top.
    request = ProjectRequest().initialize(metadata).model_copy(
        update=submitted.model_dump(exclude_unset=True)
    )

    converter = RequestToDescriptionConverter(config)
    try:
        description = converter.convert(request, metadata)
    except InvalidProjectRequest as exc:
        print_error(exc.message)
        return EXIT_INVALID_REQUEST
    except InternalInconsistency as exc:
        print_error(f"Internal error: {exc}")
        return EXIT_INTERNAL_ERROR

    if as_json:
        console.print_json(json.dumps(description.to_dict()))
    else:
        print_summary_table(description.summary(), title="Project description")
        print_success("Project request is valid.")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m initializr.cli``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate a project generation request against Initializr metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m initializr.cli request.json\n"
            "  python -m initializr.cli request.json --metadata metadata.yml --json\n"
        ),
    )
    parser.add_argument("request", help="Path to the JSON project request")
    parser.add_argument(
        "--metadata", "-m",
        default=None,
        help="Metadata document (JSON or YAML); defaults to the built-in catalog",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Configuration JSON file (default: read INITIALIZR_* environment variables)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resulting description as JSON",
    )

    args = parser.parse_args(argv)
    sys.exit(
        run(
            Path(args.request),
            metadata_path=Path(args.metadata) if args.metadata else None,
            config_path=Path(args.config) if args.config else None,
            as_json=args.json,
        )
    )


if __name__ == "__main__":
    main()
