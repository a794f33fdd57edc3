"""
Flat on-disk cache of downloaded datasets.

Each dataset is stored as ``<sanitized doi><extension>`` directly inside the
cache directory.  There is no index file: membership is derived from file
names alone.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .records import CacheFile, ContentKind

logger = logging.getLogger(__name__)


def sanitize_doi(doi: str) -> str:
    """Replace path-unsafe characters so ``doi`` can be used as a file stem."""
    return doi.replace("/", "_").replace(".", "_")


def _stem(path: Path) -> str:
    return path.name.split(".", 1)[0]


class CacheStore:
    """
    Cache directory keyed by DOI.

    Args:
        cache_dir: Directory holding cached files; created on first write.
        confirm: Callable used to confirm clearing the whole cache.
    """

    def __init__(self, cache_dir: Path, confirm: Optional[Callable[[str], str]] = None) -> None:
        self.cache_dir = Path(cache_dir)
        self._confirm = confirm or input

    def _files(self) -> List[Path]:
        if not self.cache_dir.is_dir():
            return []
        return sorted(p for p in self.cache_dir.iterdir() if p.is_file())

    def files_for(self, doi: str) -> List[Path]:
        """Cached files belonging to ``doi``."""
        key = sanitize_doi(doi)
        return [p for p in self._files() if _stem(p) == key]

    def contains(self, doi: str) -> bool:
        found = bool(self.files_for(doi))
        logger.debug("Cache check for dataset", extra={"doi": doi, "exists": found})
        return found

    def path_for(self, doi: str, kind: ContentKind) -> Path:
        """
        Target path for ``doi`` stored as ``kind``; creates the cache directory.
        """
        if kind.extension is None:
            raise ValueError(f"Content kind {kind.name} is not cached")
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        return self.cache_dir / f"{sanitize_doi(doi)}{kind.extension}"

    def list(self) -> List[CacheFile]:
        entries = []
        for path in self._files():
            stat = path.stat()
            entries.append(
                CacheFile(
                    path=path,
                    size=stat.st_size,
                    modified=datetime.fromtimestamp(stat.st_mtime),
                )
            )
        return entries

    def clear(self, dois: Optional[Iterable[str]] = None, prompt: bool = True) -> List[Path]:
        """
        Remove cached files.

        Without ``dois`` every file is removed, after asking for confirmation
        unless ``prompt`` is False.  With ``dois`` only their files are removed
        and no confirmation is asked.

        Returns:
            Paths that were deleted.
        """
        if dois is None:
            targets = self._files()
            if not targets:
                return []
            if prompt:
                answer = self._confirm(
                    f"Delete all {len(targets)} files in {self.cache_dir}? [y/N] "
                )
                if answer.strip().lower() not in ("y", "yes"):
                    logger.info("Cache clear cancelled")
                    return []
        else:
            keys = {sanitize_doi(doi) for doi in dois}
            targets = [p for p in self._files() if _stem(p) in keys]

        for path in targets:
            path.unlink()
            logger.debug("Removed cached file %s", path)
        logger.info("Removed %d cached files from %s", len(targets), self.cache_dir)
        return targets
