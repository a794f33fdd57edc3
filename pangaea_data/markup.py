"""
Queries against PANGAEA landing pages.

Every lookup into the HTML markup lives here so the resolver and fetcher only
see plain strings.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

LOGIN_TITLE_MARKER = "Log in"


def _is_listing_block(tag: Tag) -> bool:
    return tag.name == "div" and tag.get("class") == ["MetaHeaderItem"]


def _is_follow_link(tag: Tag) -> bool:
    return tag.name == "a" and tag.get("rel") == ["follow"]


class MetadataPage:
    """Parsed metadata page of a DOI."""

    def __init__(self, html: str) -> None:
        self.soup = BeautifulSoup(html or "", "html.parser")

    @property
    def title(self) -> Optional[str]:
        node = self.soup.find("title")
        return node.get_text(strip=True) if node else None

    @property
    def dc_format(self) -> str:
        """``content`` of the ``DC.format`` meta tag, empty when missing."""
        node = self.soup.find("meta", attrs={"name": "DC.format"})
        return (node.get("content") or "") if node else ""

    @property
    def citation(self) -> Optional[str]:
        node = self.soup.find(
            lambda tag: tag.name == "h1" and tag.get("class") == ["MetaHeaderItem", "citation"]
        )
        return node.get_text(" ", strip=True) if node else None

    def follow_links(self) -> List[str]:
        """
        ``href`` of every ``rel="follow"`` link inside a ``MetaHeaderItem`` block.
        """
        hrefs = []
        for link in self.soup.find_all(_is_follow_link):
            if link.find_parent(_is_listing_block) is None:
                continue
            href = link.get("href")
            if href:
                hrefs.append(href)
        return hrefs

    def requires_login(self) -> bool:
        title = self.title
        return bool(title) and LOGIN_TITLE_MARKER in title
