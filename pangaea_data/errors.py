"""Exception types raised by the PANGAEA data client."""

from __future__ import annotations

from typing import Optional

import requests


class PangaeaError(Exception):
    """Base class for all errors raised by :mod:`pangaea_data`."""


class MalformedIdentifierError(PangaeaError, ValueError):
    """The identifier is neither a PANGAEA URL nor a ``10.1594`` DOI."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(
            f"{identifier} not of right form, expecting a DOI like "
            "10.1594/PANGAEA.746398 or a https://doi.pangaea.de/ URL"
        )


class HttpStatusError(PangaeaError, requests.HTTPError):
    """A metadata or file request returned a non-success status."""

    def __init__(self, message: str, response: Optional[requests.Response] = None) -> None:
        super().__init__(message, response=response)
        self.status_code = response.status_code if response is not None else None
        self.url = response.url if response is not None else None


def raise_for_status(response: requests.Response) -> None:
    """Re-raise :meth:`requests.Response.raise_for_status` as :class:`HttpStatusError`."""
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise HttpStatusError(str(exc), response=response) from exc
