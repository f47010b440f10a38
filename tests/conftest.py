"""Root test configuration: content-tree builders shared by unit and integration tests"""

from pathlib import Path

import pytest

from mdmanifest.config import Settings


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no MDMANIFEST_* overrides."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDMANIFEST_{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="write_doc")
def write_doc_fixture(tmp_path):
    """Factory: write_doc('guides/a.md', title='A') creates a file with YAML front-matter."""
    def _write(rel: str, body: str = "# Body\n", raw: str = None, **fields) -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is None:
            header = "".join(f"{k}: {v}\n" for k, v in fields.items())
            raw = f"---\n{header}---\n\n{body}" if fields else body
        path.write_text(raw, encoding="utf-8")
        return path
    return _write


@pytest.fixture(name="settings")
def settings_fixture(tmp_path):
    return Settings(root_dir=str(tmp_path))
