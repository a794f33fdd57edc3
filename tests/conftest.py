"""
Pytest Configuration
Shared fixtures and configuration for all tests
"""

import io
import logging
import sys
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest
import requests
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pangaea_data.cache import CacheStore
from pangaea_data.settings import PangaeaSettings

# Configure logging for tests
logging.basicConfig(
    level=logging.WARNING,  # Reduce noise during tests
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logging.getLogger('PIL').setLevel(logging.WARNING)
logging.getLogger('urllib3').setLevel(logging.WARNING)

BASE_URL = "https://doi.pangaea.de/"
TSV_TYPE = "text/tab-separated-values;charset=UTF-8"

SINGLE_PAGE = """
<html><head>
<title>Temperature profile - PANGAEA</title>
<meta name="DC.format" content="text/tab-separated-values, 120 data points">
</head><body>
<h1 class="MetaHeaderItem citation">Smith, J (2013): Temperature profile. PANGAEA</h1>
<div class="MetaHeaderItem"><a href="https://www.pangaea.de/">home</a></div>
</body></html>
"""

COLLECTION_PAGE = """
<html><head>
<title>Collection - PANGAEA</title>
<meta name="DC.format" content="application/zip, 3 datasets">
</head><body>
<h1 class="MetaHeaderItem citation">Doe, A (2011): Station data collection. PANGAEA</h1>
<div class="MetaHeaderItem">
  <a rel="follow" href="https://doi.pangaea.de/10.1594/PANGAEA.761033">one</a>
  <a rel="follow" href="https://doi.pangaea.de/10.1594/PANGAEA.761034">two</a>
  <a rel="follow" href="https://doi.pangaea.de/10.1594/PANGAEA.761035">three</a>
</div>
<div class="MetaHeaderItem related"><a rel="follow" href="https://doi.pangaea.de/10.1594/PANGAEA.999999">x</a></div>
</body></html>
"""

ARCHIVE_PAGE = """
<html><head>
<title>Archive - PANGAEA</title>
<meta name="DC.format" content="application/zip, 2.1 MBytes">
</head><body>
<h1 class="MetaHeaderItem citation">Roe, B (2016): Image archive. PANGAEA</h1>
<div class="MetaHeaderItem">
  <a rel="follow" href="https://doi.pangaea.de/10.1594/PANGAEA.860501">other</a>
</div>
</body></html>
"""

LOGIN_PAGE = """
<html><head><title>Log in - PANGAEA</title></head>
<body><form action="/login"></form></body></html>
"""

TSV_BODY = (
    "/* DATA DESCRIPTION:\n"
    "Citation:\tSmith, J (2013): Temperature profile\n"
    "*/\n"
    "Depth water [m]\tTemp [°C]\n"
    "1.0\t4.5\n"
    "2.0\t4.3\n"
)


def make_response(
    body,
    content_type: str = "text/html;charset=UTF-8",
    status: int = 200,
    url: str = BASE_URL,
) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response._content = body if isinstance(body, bytes) else body.encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    response.url = url
    return response


def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 3), color=(10, 20, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


def zip_bytes() -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("images/a.jpg", b"a" * 10)
        archive.writestr("readme.txt", "hello")
    return buffer.getvalue()


class StubSession:
    """Minimal stand-in for ``requests.Session`` serving canned responses by URL."""

    def __init__(self, routes: Optional[Dict[str, requests.Response]] = None) -> None:
        self.routes = dict(routes or {})
        self.headers: Dict[str, str] = {}
        self.calls: List[Tuple[str, dict]] = []

    def get(self, url: str, **kwargs) -> requests.Response:
        self.calls.append((url, kwargs))
        if url not in self.routes:
            return make_response("not found", status=404, url=url)
        return self.routes[url]


# ============================================
# GLOBAL FIXTURES
# ============================================

@pytest.fixture
def cache_dir(tmp_path):
    """Per-test cache directory (not created until first write)"""
    return tmp_path / "cache"


@pytest.fixture
def settings(cache_dir):
    return PangaeaSettings(cache_dir=cache_dir, base_url=BASE_URL, timeout=5)


@pytest.fixture
def cache(cache_dir):
    return CacheStore(cache_dir)


@pytest.fixture
def session():
    return StubSession()


# ============================================
# TEST MARKERS
# ============================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "network: marks tests that would contact the live repository"
    )
