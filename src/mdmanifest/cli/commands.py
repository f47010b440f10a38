"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer

from mdmanifest.config import Settings, load_config
from mdmanifest.core.errors import DiscoveryError, ManifestWriteError
from mdmanifest.core.models import CategoryScan, GenerateResult
from mdmanifest.core.pipeline import run_generate, run_scan


RootOpt = Annotated[Optional[str], typer.Option("--root", help="Directory holding the category folders")]
CategoryOpt = Annotated[
    Optional[list[str]],
    typer.Option("--category", "-c", help="Category directory to scan (repeatable); replaces the configured list"),
]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_scans(settings: Settings, scans: list[CategoryScan]) -> None:
    typer.echo(f"Searching for documents in categories: {', '.join(settings.categories)}")
    for scan in scans:
        if scan.found:
            typer.echo(f"  - {scan.name}: Found {len(scan.files)} file(s)")
        else:
            typer.echo(f"  - {scan.name}: Directory not found (skipping)")


def _echo_summary(result: GenerateResult) -> None:
    """Print post counts per category and the featured count."""
    typer.echo(f"Generated {result.output_path} with {len(result.manifest.posts)} post(s)")
    if result.category_counts:
        typer.echo("Posts by category:")
        for category, count in result.category_counts.items():
            typer.echo(f"  - {category}: {count}")
    if result.featured_count:
        typer.echo(f"Featured posts: {result.featured_count}")


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log discovery and extraction details")] = False,
    ):
    """Scan category folders for .md/.mdx files and write a JSON manifest."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


def generate_cmd(
    root: RootOpt = None,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Manifest file, relative to --root")] = None,
    category: CategoryOpt = None,
    ):
    """Build the manifest: discover -> extract front-matter -> sort -> write JSON."""
    settings = _settings(overrides={"root_dir": root, "output_file": output, "categories": category or None})

    try:
        result = run_generate(settings)
    except DiscoveryError as e:
        _fail("Discovery failed", e)
    except ManifestWriteError as e:
        _fail("Write failed", e)

    _echo_scans(settings, result.scans)
    typer.echo(f"Total: {result.total_files} document(s)")
    for failure in result.failures:
        typer.echo(f"Error parsing {failure.path}: {failure.message}", err=True)

    if result.empty:
        typer.echo(f"No documents found, created empty manifest at {result.output_path}")
        return
    _echo_summary(result)


def scan_cmd(
    root: RootOpt = None,
    category: CategoryOpt = None,
    ):
    """List the documents each category would contribute, without writing anything."""
    settings = _settings(overrides={"root_dir": root, "categories": category or None})
    try:
        scans = run_scan(settings)
    except DiscoveryError as e:
        _fail("Discovery failed", e)

    _echo_scans(settings, scans)
    for scan in scans:
        for path in scan.files:
            typer.echo(f"    {path}")
    typer.echo(f"Total: {sum(len(s.files) for s in scans)} document(s)")
