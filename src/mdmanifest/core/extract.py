"""Per-file metadata extraction: front-matter defaults, category and slug derivation"""

import json
import re
from datetime import date
from pathlib import Path
from typing import Any

from mdmanifest.core.errors import ExtractionError
from mdmanifest.core.models import DocumentRecord, Metadata
from mdmanifest.core.parse import parse_frontmatter
from mdmanifest.core.utils.timestamps import format_timestamp


UNCATEGORIZED = "uncategorized"
EXTENSION_RE = re.compile(r'\.(mdx|md)$')


def _text(value: Any) -> Any:
    """Normalize YAML values headed for string fields (dates -> ISO, scalars and containers -> str)."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, date):
        return format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return ', '.join(str(_text(v)) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def _pick(frontmatter: dict[str, Any], *keys: str) -> Any:
    """First truthy value among keys, normalized for a string field; None if all are falsy."""
    for key in keys:
        value = frontmatter.get(key)
        if value:
            return _text(value)
    return None


def _truthy(value: Any) -> bool:
    """Flag semantics: YAML booleans and 'true'/'false' strings as written, anything else by truthiness."""
    if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
        return value.strip().lower() == 'true'
    return bool(value)


def relative_path(path: Path, root: Path) -> Path:
    """Return path relative to root, falling back to an absolute comparison."""
    try:
        return path.relative_to(root)
    except ValueError:
        return path.resolve().relative_to(root.resolve())


def derive_category(rel_path: Path) -> str:
    """First directory segment of rel_path, or 'uncategorized' for a file at the root."""
    parts = rel_path.parts
    return parts[0] if len(parts) > 1 else UNCATEGORIZED


def derive_slug(frontmatter: dict[str, Any], path: Path) -> str:
    """Front-matter slug if set, else the filename without its .md/.mdx extension."""
    slug = _pick(frontmatter, 'slug')
    if slug:
        return slug
    return EXTENSION_RE.sub('', path.name)


def build_metadata(frontmatter: dict[str, Any], category: str, slug: str, now: str) -> Metadata:
    """Apply field defaults. publishedAt falls back to 'date', then to now."""
    return Metadata(
        title=_pick(frontmatter, 'title') or 'Untitled',
        description=_pick(frontmatter, 'description') or '',
        author=_pick(frontmatter, 'author') or 'Unknown',
        category=_pick(frontmatter, 'category') or category,
        published_at=_pick(frontmatter, 'publishedAt', 'date') or now,
        updated_at=_pick(frontmatter, 'updatedAt'),
        slug=slug,
        tags=frontmatter.get('tags') or [],
        image=_pick(frontmatter, 'image'),
        featured=_truthy(frontmatter.get('featured')),
    )


def _ensure_encodable(record: DocumentRecord) -> DocumentRecord:
    """Raise UnicodeEncodeError for values (e.g. lone surrogates) the UTF-8 manifest cannot hold."""
    json.dumps(record.model_dump(), ensure_ascii=False).encode('utf-8')
    return record


def extract_record(path: Path, root: Path, now: str) -> DocumentRecord:
    """Read one document and return its DocumentRecord.

    Raises ExtractionError on unreadable files, malformed front-matter,
    or text that cannot be written as UTF-8.
    """
    try:
        raw = path.read_text(encoding='utf-8')
        frontmatter, _ = parse_frontmatter(raw)
        rel = relative_path(path, root)
        category = derive_category(rel)
        slug = derive_slug(frontmatter, path)
        return _ensure_encodable(DocumentRecord(
            slug=slug,
            category=category,
            file=rel.as_posix(),
            metadata=build_metadata(frontmatter, category, slug, now),
        ))
    except (OSError, ValueError) as e:
        raise ExtractionError(path, str(e)) from e
