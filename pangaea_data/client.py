"""
High level entry point: resolve a DOI, download its datasets and parse them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

import requests
from tqdm import tqdm

from .assembler import ResultAssembler
from .cache import CacheStore
from .fetcher import Fetcher
from .records import CacheFile, DatasetRecord
from .resolver import IdentifierResolver
from .settings import PangaeaSettings, load_settings

logger = logging.getLogger(__name__)


class PangaeaClient:
    """
    Wires the resolver, fetcher, cache store and assembler around one HTTP session.

    Args:
        settings: Client settings; loaded from defaults/environment when omitted.
        session: HTTP session shared by all requests.
        cache: Cache store; built from ``settings.cache_dir`` when omitted.
    """

    def __init__(
        self,
        settings: Optional[PangaeaSettings] = None,
        session: Optional[requests.Session] = None,
        cache: Optional[CacheStore] = None,
    ) -> None:
        self.settings = settings or load_settings()
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.settings.user_agent
        self.session = session
        self.cache = cache or CacheStore(self.settings.cache_dir)
        self.resolver = IdentifierResolver(self.settings, self.session)
        self.fetcher = Fetcher(self.settings, self.cache, self.session)
        self.assembler = ResultAssembler(self.cache)

        logger.debug(
            "PangaeaClient initialised",
            extra={"cache_dir": str(self.cache.cache_dir), "base_url": self.settings.base_url},
        )

    def get_data(
        self,
        doi: str,
        overwrite: bool = True,
        verbose: bool = True,
        **request_options: Any,
    ) -> List[DatasetRecord]:
        """
        Fetch every dataset behind ``doi``.

        Args:
            doi: A ``10.1594/PANGAEA.<id>`` DOI or a ``https://doi.pangaea.de/`` URL
                of a dataset, a collection or a downloadable file.
            overwrite: Passed to :meth:`Fetcher.ensure_downloaded`.
            verbose: Log progress at INFO level and show a progress bar.
            **request_options: Extra keyword arguments for ``requests`` (headers,
                timeout, auth, ...).

        Returns:
            One record per resolved dataset, in resolution order.
        """
        level = logging.INFO if verbose else logging.DEBUG
        resolved = self.resolver.resolve(doi, **request_options)
        logger.log(level, "Downloading %d datasets from %s", len(resolved), doi)

        for dataset_doi in tqdm(resolved.dois, desc="datasets", unit="doi", disable=not verbose):
            self.fetcher.ensure_downloaded(
                dataset_doi, overwrite=overwrite, verbose=verbose, **request_options
            )

        logger.log(level, "Processing %d files", len(resolved))
        return self.assembler.assemble(resolved.dois, doi, resolved.citation)

    def cache_list(self) -> List[CacheFile]:
        return self.cache.list()

    def cache_clear(self, dois: Optional[Iterable[str]] = None, prompt: bool = True) -> List[Path]:
        return self.cache.clear(dois=dois, prompt=prompt)


_default_client: Optional[PangaeaClient] = None


def default_client() -> PangaeaClient:
    """Lazily created client used by the module-level helpers."""
    global _default_client
    if _default_client is None:
        _default_client = PangaeaClient()
    return _default_client


def pg_data(doi: str, overwrite: bool = True, verbose: bool = True, **request_options: Any) -> List[DatasetRecord]:
    """Shortcut for :meth:`PangaeaClient.get_data` on the default client."""
    return default_client().get_data(doi, overwrite=overwrite, verbose=verbose, **request_options)


def pg_cache_list() -> List[CacheFile]:
    return default_client().cache_list()


def pg_cache_clear(dois: Optional[Iterable[str]] = None, prompt: bool = True) -> List[Path]:
    return default_client().cache_clear(dois=dois, prompt=prompt)
