"""
Download dataset files into the cache.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, Optional

import requests
from PIL import Image

from .cache import CacheStore
from .errors import raise_for_status
from .markup import MetadataPage
from .records import ContentKind, FetchOutcome
from .resolver import metadata_url
from .settings import PangaeaSettings

logger = logging.getLogger(__name__)


class Fetcher:
    """
    Downloads a dataset once and stores it under its sanitized DOI.
    """

    def __init__(
        self,
        settings: PangaeaSettings,
        cache: CacheStore,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings
        self.cache = cache
        self.session = session or requests.Session()

    def ensure_downloaded(
        self,
        doi: str,
        overwrite: bool = True,
        verbose: bool = True,
        **request_options: Any,
    ) -> FetchOutcome:
        """
        Download ``doi`` unless it is already cached.

        A cached DOI is never downloaded again; ``overwrite`` does not force a
        refresh (clear the DOI from the cache first).  Progress is logged at
        INFO when ``verbose`` is set, DEBUG otherwise.

        Returns:
            The :class:`FetchOutcome` for ``doi``.

        Raises:
            HttpStatusError: The file request failed.
        """
        if self.cache.contains(doi):
            logger.debug("Cache available for %s, skipping download (overwrite=%s)", doi, overwrite)
            return FetchOutcome.CACHED

        url = metadata_url(doi, self.settings)
        options = {"timeout": self.settings.timeout, "allow_redirects": True}
        options.update(request_options)
        params = dict(options.pop("params", None) or {})
        params["format"] = "textfile"

        logger.log(logging.INFO if verbose else logging.DEBUG, "Downloading %s", url)
        response = self.session.get(url, params=params, **options)
        raise_for_status(response)

        kind = ContentKind.from_media_type(response.headers.get("Content-Type"))
        if kind is ContentKind.HTML_GATE and MetadataPage(response.text).requires_login():
            logger.warning("Log in required for %s, skipping file download", doi)
            return FetchOutcome.LOGIN_REQUIRED
        if kind.extension is None:
            logger.debug(
                "Unsupported media type %r for %s; nothing stored",
                response.headers.get("Content-Type"),
                doi,
            )
            return FetchOutcome.UNSUPPORTED_MEDIA

        target = self.cache.path_for(doi, kind)
        partial = target.with_name("." + target.name + ".part")
        try:
            self._write(kind, response, partial)
            partial.replace(target)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise
        logger.debug("Stored %s as %s", doi, target)
        return FetchOutcome.DOWNLOADED

    @staticmethod
    def _write(kind: ContentKind, response: requests.Response, target: Path) -> None:
        if kind is ContentKind.TABULAR:
            text = response.text
            if not text.endswith("\n"):
                text += "\n"
            target.write_text(text, encoding="utf-8")
        elif kind is ContentKind.IMAGE:
            with Image.open(io.BytesIO(response.content)) as image:
                image.save(target, format="PNG")
        elif kind is ContentKind.ARCHIVE:
            target.write_bytes(response.content)
