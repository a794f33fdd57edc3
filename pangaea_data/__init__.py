"""
PANGAEA Data Package
Download, cache and parse datasets from the PANGAEA repository by DOI
"""

from .assembler import ResultAssembler
from .cache import CacheStore, sanitize_doi
from .client import PangaeaClient, pg_cache_clear, pg_cache_list, pg_data
from .errors import HttpStatusError, MalformedIdentifierError, PangaeaError
from .fetcher import Fetcher
from .markup import MetadataPage
from .records import (
    CacheFile,
    ContentKind,
    DatasetRecord,
    FetchOutcome,
    ResolvedSet,
)
from .resolver import IdentifierResolver, classify, metadata_url
from .settings import PangaeaSettings, load_settings

__all__ = [
    # Client
    'PangaeaClient',
    'pg_data',
    'pg_cache_list',
    'pg_cache_clear',

    # Components
    'IdentifierResolver',
    'Fetcher',
    'ResultAssembler',
    'CacheStore',
    'MetadataPage',
    'classify',
    'metadata_url',
    'sanitize_doi',

    # Data model
    'CacheFile',
    'ContentKind',
    'DatasetRecord',
    'FetchOutcome',
    'ResolvedSet',

    # Settings
    'PangaeaSettings',
    'load_settings',

    # Errors
    'PangaeaError',
    'MalformedIdentifierError',
    'HttpStatusError',
]
