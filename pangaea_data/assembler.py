"""
Build :class:`DatasetRecord` values from cached files.
"""

from __future__ import annotations

import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, List, Optional

import pandas as pd

from .cache import CacheStore
from .records import DOI_URL, IMAGE_MARKER, ContentKind, DatasetRecord

logger = logging.getLogger(__name__)

HEADER_START = "/*"
HEADER_END = "*/"


def _header_length(path: Path) -> int:
    """Number of lines taken by a leading ``/* ... */`` metadata block."""
    with open(path, "r", encoding="utf-8") as fh:
        first = fh.readline()
        if not first.lstrip().startswith(HEADER_START):
            return 0
        count = 1
        line = first
        while HEADER_END not in line:
            line = fh.readline()
            if not line:
                return 0
            count += 1
        return count


def read_table(path: Path) -> pd.DataFrame:
    """Read a tab-separated PANGAEA text file, skipping its metadata header."""
    try:
        return pd.read_csv(path, sep="\t", skiprows=_header_length(path))
    except pd.errors.EmptyDataError:
        logger.debug("No tabular data in %s", path)
        return pd.DataFrame()


def list_archive(path: Path) -> pd.DataFrame:
    """Members of a zip archive without extracting them."""
    with zipfile.ZipFile(path, "r") as archive:
        rows = [
            {
                "name": info.filename,
                "length": info.file_size,
                "date": datetime(*info.date_time),
            }
            for info in archive.infolist()
        ]
    return pd.DataFrame(rows, columns=["name", "length", "date"])


def parse_file(path: Path) -> Any:
    kind = ContentKind.from_extension(path.suffix)
    if kind is ContentKind.ARCHIVE:
        return list_archive(path)
    if kind is ContentKind.TABULAR:
        return read_table(path)
    if kind is ContentKind.IMAGE:
        return IMAGE_MARKER
    logger.debug("No parser for %s", path)
    return None


class ResultAssembler:
    """Turns resolved DOIs plus cache contents into records."""

    def __init__(self, cache: CacheStore) -> None:
        self.cache = cache

    def assemble(
        self,
        resolved_dois: Iterable[str],
        parent_doi: str,
        citation: Optional[str],
    ) -> List[DatasetRecord]:
        records = []
        for doi in resolved_dois:
            files = self.cache.files_for(doi)
            local_path = files[0] if files else None
            data = parse_file(local_path) if local_path is not None else None
            records.append(
                DatasetRecord(
                    parent_doi=parent_doi,
                    doi=doi,
                    citation=citation,
                    url=DOI_URL + doi,
                    local_path=local_path,
                    data=data,
                )
            )
        return records
