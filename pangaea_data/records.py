"""
Data model shared by the resolver, fetcher, cache store and assembler.

All values are plain dataclasses/enums so that every component can be tested
in isolation without touching the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Tuple

DOI_URL = "https://doi.org/"
IMAGE_MARKER = "png; read with PIL.Image.open()"


class ContentKind(Enum):
    """Kind of content served for a dataset, derived from its media type."""

    TABULAR = "text/tab-separated-values"
    IMAGE = "image/png"
    ARCHIVE = "application/zip"
    HTML_GATE = "text/html"
    UNKNOWN = ""

    @classmethod
    def from_media_type(cls, media_type: Optional[str]) -> "ContentKind":
        """
        Classify a ``Content-Type`` header value.

        Parameters such as ``;charset=UTF-8`` and letter case are ignored.
        """
        if not media_type:
            return cls.UNKNOWN
        essence = media_type.split(";", 1)[0].strip().lower()
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == essence:
                return kind
        return cls.UNKNOWN

    @classmethod
    def from_extension(cls, extension: str) -> "ContentKind":
        ext = extension.lower()
        if not ext.startswith("."):
            ext = "." + ext
        for kind, kind_ext in _EXTENSIONS.items():
            if kind_ext == ext:
                return kind
        return cls.UNKNOWN

    @property
    def extension(self) -> Optional[str]:
        """Cache file extension, or ``None`` for kinds that are never stored."""
        return _EXTENSIONS.get(self)


_EXTENSIONS = {
    ContentKind.TABULAR: ".txt",
    ContentKind.IMAGE: ".png",
    ContentKind.ARCHIVE: ".zip",
}


class FetchOutcome(Enum):
    """What :meth:`Fetcher.ensure_downloaded` did for a DOI."""

    DOWNLOADED = "downloaded"
    CACHED = "cached"
    LOGIN_REQUIRED = "login_required"
    UNSUPPORTED_MEDIA = "unsupported_media"


@dataclass(frozen=True)
class ResolvedSet:
    """
    Concrete dataset DOIs resolved from a single input DOI.

    Attributes:
        dois: Ordered dataset DOIs; a single dataset or file resolves to itself.
        citation: Citation text shared by every DOI of the set.
    """

    dois: Tuple[str, ...]
    citation: Optional[str] = None

    def __iter__(self):
        return iter(self.dois)

    def __len__(self) -> int:
        return len(self.dois)


@dataclass(frozen=True)
class CacheFile:
    """A file stored in the cache directory."""

    path: Path
    size: int
    modified: datetime


@dataclass(frozen=True)
class DatasetRecord:
    """
    One resolved dataset with its cached file and parsed contents.

    Attributes:
        parent_doi: DOI originally requested (a collection or the dataset itself).
        doi: DOI of this dataset.
        citation: Citation of the parent DOI.
        url: ``https://doi.org/`` landing URL of ``doi``.
        local_path: Cached file, or ``None`` when nothing was stored.
        data: ``pandas.DataFrame`` for tables and archive listings, a marker
            string for images, ``None`` when absent.
    """

    parent_doi: str
    doi: str
    citation: Optional[str]
    url: str
    local_path: Optional[Path] = None
    data: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        lines = [
            f"<Pangaea data> {self.doi}",
            f"  parent doi: {self.parent_doi}",
            f"  url:        {self.url}",
            f"  citation:   {self.citation}",
            f"  path:       {self.local_path}",
            "  data:",
            str(self.data),
        ]
        return "\n".join(lines)
