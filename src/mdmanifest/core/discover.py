"""File discovery under the configured category directories"""

import logging
from pathlib import Path

from mdmanifest.core.errors import DiscoveryError
from mdmanifest.core.models import CategoryScan


logger = logging.getLogger(__name__)

MD_EXTENSIONS = ('.md', '.mdx')


def _walk(directory: Path, found: list[Path], seen: set[Path]) -> list[Path]:
    """Collect .md/.mdx files under directory, depth-first in name order.

    Symlinked directories are followed, but each real directory is walked once,
    so link cycles terminate.
    """
    try:
        real = directory.resolve()
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except (OSError, RuntimeError) as e:
        raise DiscoveryError(directory, e) from e
    if real in seen:
        logger.info("%s: already visited (symlink loop), skipping", directory)
        return found
    seen.add(real)

    for entry in entries:
        if entry.is_dir():
            _walk(entry, found, seen)
        elif entry.name.endswith(MD_EXTENSIONS):
            found.append(entry)
    return found


def discover_files(directory: Path) -> list[Path]:
    """Return .md/.mdx files anywhere below an existing directory.

    Raises DiscoveryError if the directory (or any nested one) cannot be read.
    """
    return _walk(directory, [], set())


def scan_categories(root: Path, categories: list[str]) -> list[CategoryScan]:
    """Scan each root/<category>; missing ones are skipped, unreadable ones raise."""
    scans = []
    for name in categories:
        category_dir = root / name
        if not category_dir.exists():
            logger.info("%s: directory not found (skipping)", name)
            scans.append(CategoryScan(name=name, path=category_dir, found=False))
            continue
        files = discover_files(category_dir)
        logger.info("%s: found %d file(s)", name, len(files))
        scans.append(CategoryScan(name=name, path=category_dir, found=True, files=files))
    return scans
