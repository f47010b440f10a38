"""Data models for discovered files, document records, and the manifest"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Metadata(BaseModel):
    """Normalized front-matter for one document. Serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title:        str = "Untitled"
    description:  str = ""
    author:       str = "Unknown"
    category:     str
    published_at: str
    updated_at:   Optional[str] = None      # omitted from output when absent
    slug:         str
    tags:         list[str] = Field(default_factory=list)
    image:        Optional[str] = None      # omitted from output when absent
    featured:     bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_list(cls, value: Any) -> Any:
        """A lone value becomes a one-item list; non-string items are stringified."""
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [v if isinstance(v, str) else str(v) for v in value]
        if value is None:
            return value
        return [str(value)]


class DocumentRecord(BaseModel):
    """One parsed file as it appears in the manifest's posts list."""
    slug:     str
    category: str                   # top-level directory under the scan root
    file:     str                   # path relative to the scan root, '/'-separated
    metadata: Metadata


class Manifest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    last_updated: str
    posts:        list[DocumentRecord] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        """Return the JSON-ready dict: camelCase keys, absent optionals dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CategoryScan(BaseModel):
    """Discovery result for one configured category directory."""
    name:  str
    path:  Path
    found: bool                     # False when the directory does not exist
    files: list[Path] = Field(default_factory=list)


class ExtractionFailure(BaseModel):
    path:    Path
    message: str


class GenerateResult(BaseModel):
    """Everything a caller needs to report on one generator run."""
    manifest:        Manifest
    output_path:     Path
    scans:           list[CategoryScan]
    failures:        list[ExtractionFailure] = Field(default_factory=list)
    category_counts: dict[str, int] = Field(default_factory=dict)
    featured_count:  int = 0
    empty:           bool = False   # True when the no-documents fast path was taken

    @property
    def total_files(self) -> int:
        return sum(len(s.files) for s in self.scans)
