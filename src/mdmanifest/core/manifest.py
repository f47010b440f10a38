"""Manifest building: date sort, empty fast path, atomic JSON write, summary counts"""

import json
import os
import stat
import tempfile
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path

from mdmanifest.core.errors import ManifestWriteError
from mdmanifest.core.models import DocumentRecord, Manifest
from mdmanifest.core.utils.timestamps import parse_timestamp


# Unparseable publishedAt values sort as the oldest possible point in time.
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def published_key(record: DocumentRecord) -> datetime:
    return parse_timestamp(record.metadata.published_at) or OLDEST


def sort_records(records: list[DocumentRecord]) -> list[DocumentRecord]:
    """Newest first; ties and invalid dates keep encounter order (stable sort)."""
    return sorted(records, key=published_key, reverse=True)


def empty_manifest(generated_at: str) -> Manifest:
    return Manifest(last_updated=generated_at, posts=[])


def build_manifest(records: list[DocumentRecord], generated_at: str) -> Manifest:
    return Manifest(last_updated=generated_at, posts=sort_records(records))


def render_manifest(manifest: Manifest, indent: int = 2) -> str:
    return json.dumps(manifest.to_json_dict(), indent=indent, ensure_ascii=False)


def _file_mode(path: Path) -> int:
    """Keep an existing manifest's mode; otherwise the process umask default, like open()."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_manifest(manifest: Manifest, path: Path, indent: int = 2) -> Path:
    """Replace path with the rendered manifest; all-or-nothing via a sibling temp file."""
    tmp_name = None
    try:
        data = render_manifest(manifest, indent).encode('utf-8')
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = _file_mode(path)
        with tempfile.NamedTemporaryFile(
            'wb', dir=path.parent, prefix=f".{path.name}.", suffix='.tmp', delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(data)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, UnicodeError) as e:
        raise ManifestWriteError(path, e) from e
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    return path


def summarize(manifest: Manifest) -> tuple[dict[str, int], int]:
    """Return (posts per category in first-seen order, featured post count)."""
    counts = dict(Counter(post.category for post in manifest.posts))
    featured = sum(1 for post in manifest.posts if post.metadata.featured)
    return counts, featured
