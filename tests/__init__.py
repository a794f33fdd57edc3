"""
Test Suite for the PANGAEA data client
Tests for DOI resolution, downloading, caching and parsing
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

__version__ = "1.0.0"
