"""Unit tests for core/discover.py"""

import os

import pytest

from mdmanifest.core.discover import discover_files, scan_categories
from mdmanifest.core.errors import DiscoveryError


def test_discover_files_recursive(tmp_path, write_doc):
    """discover_files finds .md and .mdx files at any depth."""
    a = write_doc("guides/a.md")
    b = write_doc("guides/sub/deep/b.mdx")
    assert discover_files(tmp_path / "guides") == [a, b]


def test_discover_files_skips_other_extensions(tmp_path, write_doc):
    """Only names ending in .md/.mdx are collected."""
    write_doc("guides/notes.txt")
    write_doc("guides/readme.markdown")
    keep = write_doc("guides/keep.md")
    assert discover_files(tmp_path / "guides") == [keep]


def test_discover_files_name_order(tmp_path, write_doc):
    """Entries are visited in sorted name order."""
    write_doc("news/c.md")
    write_doc("news/a.md")
    write_doc("news/b.md")
    assert [p.name for p in discover_files(tmp_path / "news")] == ["a.md", "b.md", "c.md"]


def test_scan_categories_missing_dir_is_soft(tmp_path, write_doc):
    """A missing category yields found=False and no files, without raising."""
    write_doc("guides/a.md")
    scans = scan_categories(tmp_path, ["guides", "news"])
    assert [(s.name, s.found, len(s.files)) for s in scans] == [("guides", True, 1), ("news", False, 0)]


def test_scan_categories_ignores_unlisted_dirs(tmp_path, write_doc):
    """Directories outside the configured category list are never scanned."""
    write_doc("drafts/x.md")
    write_doc("top-level.md")
    scans = scan_categories(tmp_path, ["guides"])
    assert scans[0].files == []


def test_scan_categories_keeps_configured_order(tmp_path, write_doc):
    """Scans follow the configured category order, not disk order."""
    write_doc("blog/a.md")
    write_doc("guides/b.md")
    scans = scan_categories(tmp_path, ["guides", "blog"])
    assert [s.name for s in scans] == ["guides", "blog"]


def test_scan_categories_file_in_place_of_dir_is_fatal(tmp_path):
    """A category path that exists but is not a directory raises DiscoveryError."""
    (tmp_path / "guides").write_text("not a dir")
    with pytest.raises(DiscoveryError, match="guides"):
        scan_categories(tmp_path, ["guides"])


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_scan_categories_unreadable_dir_is_fatal(tmp_path, write_doc):
    """An existing but unreadable category directory raises DiscoveryError."""
    write_doc("guides/a.md")
    locked = tmp_path / "guides"
    locked.chmod(0)
    try:
        with pytest.raises(DiscoveryError):
            scan_categories(tmp_path, ["guides"])
    finally:
        locked.chmod(0o755)


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name != "posix", reason="needs POSIX symlinks")
def test_discover_files_symlink_cycle_terminates(tmp_path, write_doc):
    """A directory symlink pointing back up the tree is walked once, not forever."""
    a = write_doc("guides/a.md")
    (tmp_path / "guides" / "sub").mkdir()
    (tmp_path / "guides" / "sub" / "loop").symlink_to(tmp_path / "guides", target_is_directory=True)
    assert discover_files(tmp_path / "guides") == [a]


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name != "posix", reason="needs POSIX symlinks")
def test_discover_files_follows_symlinked_dir(tmp_path, write_doc):
    """A symlink to a directory outside the category is followed."""
    write_doc("shared/s.md")
    (tmp_path / "guides").mkdir()
    (tmp_path / "guides" / "linked").symlink_to(tmp_path / "shared", target_is_directory=True)
    assert [p.name for p in discover_files(tmp_path / "guides")] == ["s.md"]
