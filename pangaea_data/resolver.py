"""
Resolve a DOI into the concrete dataset DOIs it stands for.

A PANGAEA DOI can point at a single dataset, at a directly downloadable
archive, or at a collection whose landing page links to its member datasets.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

import requests

from .errors import MalformedIdentifierError, raise_for_status
from .markup import MetadataPage
from .records import ResolvedSet
from .settings import PangaeaSettings

logger = logging.getLogger(__name__)

PANGAEA_URL = re.compile(r"https?://doi\.pangaea\.de/?")
PANGAEA_URL_PREFIX = re.compile(r"^https?://doi\.pangaea\.de/")


def metadata_url(doi: str, settings: PangaeaSettings) -> str:
    """
    Landing page URL for ``doi``.

    Full ``doi.pangaea.de`` URLs pass through; bare DOIs must carry the
    repository prefix and are joined onto the base URL.
    """
    if PANGAEA_URL.search(doi):
        return doi
    if not doi.startswith(settings.doi_prefix):
        raise MalformedIdentifierError(doi)
    return settings.base_url + doi


def classify(doi: str, page: MetadataPage) -> ResolvedSet:
    """
    Decide which dataset DOIs ``doi`` resolves to, given its metadata page.

    Resolved DOIs are always bare (``10.1594/...``), also for URL input.
    """
    citation = page.citation
    dc_format = page.dc_format
    dataset = PANGAEA_URL_PREFIX.sub("", doi)

    # Archives are downloaded as-is unless the format describes a dataset collection.
    if "zip" in dc_format and "datasets" not in dc_format:
        logger.debug("%s is a direct file (%s)", doi, dc_format)
        return ResolvedSet(dois=(dataset,), citation=citation)

    links = page.follow_links()
    if not links:
        logger.debug("%s is a single dataset", doi)
        return ResolvedSet(dois=(dataset,), citation=citation)

    children = tuple(PANGAEA_URL_PREFIX.sub("", href) for href in links)
    logger.debug("%s is a collection of %d datasets", doi, len(children))
    return ResolvedSet(dois=children, citation=citation)


class IdentifierResolver:
    """Fetches landing pages and classifies DOIs."""

    def __init__(self, settings: PangaeaSettings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    def resolve(self, doi: str, **request_options: Any) -> ResolvedSet:
        url = metadata_url(doi, self.settings)
        options = {"timeout": self.settings.timeout, "allow_redirects": True}
        options.update(request_options)
        logger.debug("Fetching metadata page %s", url)
        response = self.session.get(url, **options)
        raise_for_status(response)
        return classify(doi, MetadataPage(response.text))
