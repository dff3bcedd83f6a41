"""apiscaffold command-line interface.

Usage::

    apiscaffold my-api
    apiscaffold my-api --output ./projects
    python -m apiscaffold my-api --quiet
    apiscaffold my-api --config apiscaffold.json
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from apiscaffold import __version__
from apiscaffold.config import Config
from apiscaffold.scaffolder import InvalidContext, generate_project
from apiscaffold.utils import (
    console,
    format_duration,
    print_artifact,
    print_banner,
    print_error,
    print_failures,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def validate_project_name(name: str) -> str | None:
    """Return an error message if *name* cannot be used as a directory name."""
    if not name or not name.strip():
        return "Project name must not be empty"
    if name in (".", ".."):
        return f"Invalid project name: {name!r}"
    if "/" in name or "\\" in name:
        return f"Project name must not contain path separators: {name!r}"
    return None


async def run(config: Config) -> int:
    """Generate the project described by *config* and report the outcome."""
    if config.project_root.exists():
        print_warning(
            f"{escape(str(config.project_root))} already exists; "
            "generated files will be overwritten."
        )

    print_banner(config.project_name)
    listeners = [] if config.quiet else [print_artifact]

    started = time.monotonic()
    result = await generate_project(
        config.project_name, config.output_dir, listeners=listeners
    )
    elapsed = time.monotonic() - started

    if not result.success:
        console.print()
        print_failures(result.failed)
        print_error(
            f"{len(result.failed)} of {len(result.artifacts)} artifacts could not be created."
        )
        return EXIT_FAILED

    console.print()
    print_summary_table(
        {
            "Project root": str(result.root),
            "Directories": str(len(result.directories)),
            "Files": str(len(result.files)),
            "Elapsed": format_duration(elapsed),
        },
        title=escape(config.project_name),
    )
    print_success(f'Project structure for "{escape(config.project_name)}" created successfully!')
    print_next_steps(config.project_name)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``apiscaffold`` and ``python -m apiscaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="apiscaffold",
        description=(
            "Generate a Node.js and Express.js project template with JWT "
            "authentication and error handling."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  apiscaffold my-api\n"
            "  apiscaffold my-api --output ./projects\n"
            "  apiscaffold my-api --config apiscaffold.json\n"
        ),
    )
    parser.add_argument("project_name", metavar="project-name", help="Name of the project to create")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the final summary",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Load settings (output_dir, quiet) from a JSON file instead of the environment",
    )
    parser.add_argument(
        "--save-config",
        default=None,
        metavar="PATH",
        help="Write the effective settings to a JSON file for later --config use",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    problem = validate_project_name(args.project_name)
    if problem:
        console.print(f"[bold red]Error:[/bold red] {escape(problem)}")
        return EXIT_USAGE

    if args.config:
        try:
            config = Config.load(Path(args.config))
        except (OSError, ValidationError) as exc:
            console.print(
                f"[bold red]Error:[/bold red] Cannot load config {escape(args.config)}: "
                f"{escape(str(exc))}"
            )
            return EXIT_USAGE
    else:
        config = Config.from_env()
    config.project_name = args.project_name
    if args.output:
        config.output_dir = Path(args.output)
    if args.quiet:
        config.quiet = True
    if args.save_config:
        config.save(Path(args.save_config))

    try:
        return asyncio.run(run(config))
    except InvalidContext as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
