"""
Bundle configuration schema.

Defines the validated, immutable configuration a bundle run is built from:
- Languages and the extension set they resolve to
- Output path and root directory
- Annotation, ordering and empty-line options
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bundler.languages import resolve_extensions


class SortMode(Enum):
    """Supported file orderings."""
    NAME = "name"
    TYPE = "type"

    @classmethod
    def from_option(cls, value: Optional[str]) -> "SortMode":
        """Map a ``--sort`` value to a mode; anything but exactly ``type`` is by name."""
        if value == cls.TYPE.value:
            return cls.TYPE
        return cls.NAME


class BundleConfig(BaseModel):
    """Resolved options for one bundle run.

    Attributes:
        languages: Normalized, lower-cased language tokens
        output: Path of the bundle file to write
        root: Directory that is searched for source files
        note: Emit a ``// Source:`` comment before each file
        sort_mode: File ordering
        remove_empty_lines: Drop empty and whitespace-only lines
        author: Author written as a header comment, if any
    """
    model_config = ConfigDict(frozen=True)

    languages: frozenset[str] = Field(..., min_length=1)
    output: Path
    root: Path = Field(default_factory=Path.cwd)
    note: bool = False
    sort_mode: SortMode = SortMode.NAME
    remove_empty_lines: bool = False
    author: Optional[str] = None

    @field_validator("author")
    @classmethod
    def blank_author_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value

    @property
    def extensions(self) -> frozenset[str]:
        """Extensions the requested languages resolve to."""
        return resolve_extensions(self.languages)
