"""Error kinds: per-file extraction failures vs. fatal run failures"""

from pathlib import Path


class ExtractionError(ValueError):
    """A single document could not be read or parsed. Recoverable: the file is skipped."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class DiscoveryError(RuntimeError):
    """An existing category directory could not be read. Fatal."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        super().__init__(f"Cannot read directory {path}: {cause}")


class ManifestWriteError(RuntimeError):
    """The manifest file could not be written. Fatal; the previous file is left in place."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        super().__init__(f"Cannot write manifest {path}: {cause}")
