"""Generator orchestration: discover -> extract -> build -> write"""

import logging

from mdmanifest.config import Settings
from mdmanifest.core.discover import scan_categories
from mdmanifest.core.errors import ExtractionError
from mdmanifest.core.extract import extract_record
from mdmanifest.core.manifest import build_manifest, empty_manifest, summarize, write_manifest
from mdmanifest.core.models import CategoryScan, ExtractionFailure, GenerateResult
from mdmanifest.core.utils.timestamps import utc_now


logger = logging.getLogger(__name__)


def run_scan(settings: Settings) -> list[CategoryScan]:
    """Discovery only. Raises DiscoveryError for unreadable category directories."""
    return scan_categories(settings.root_path, settings.categories)


def run_generate(settings: Settings, now: str = None) -> GenerateResult:
    """Build and write the manifest described by settings.

    Per-file failures are logged and collected in result.failures; discovery
    and write failures (DiscoveryError, ManifestWriteError) propagate.
    """
    generated_at = now or utc_now()
    scans = run_scan(settings)
    files = [f for scan in scans for f in scan.files]
    output_path = settings.output_path

    if not files:
        logger.info("No documents found, writing empty manifest")
        manifest = empty_manifest(generated_at)
        write_manifest(manifest, output_path, settings.indent)
        return GenerateResult(manifest=manifest, output_path=output_path, scans=scans, empty=True)

    records = []
    failures = []
    for path in files:
        try:
            records.append(extract_record(path, settings.root_path, generated_at))
        except ExtractionError as e:
            logger.warning("Error parsing %s: %s", path, e.message)
            failures.append(ExtractionFailure(path=path, message=e.message))

    manifest = build_manifest(records, generated_at)
    write_manifest(manifest, output_path, settings.indent)
    category_counts, featured_count = summarize(manifest)
    logger.info("Wrote %d post(s) to %s", len(manifest.posts), output_path)

    return GenerateResult(
        manifest=manifest,
        output_path=output_path,
        scans=scans,
        failures=failures,
        category_counts=category_counts,
        featured_count=featured_count,
    )
