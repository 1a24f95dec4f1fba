"""
Test Configuration File

Unified setup for Python path, avoiding sys.path.insert in each test file.
Provides the token catalog and documented snapshot fixtures.
"""

import sys
from pathlib import Path

import pytest
import yaml

# Add the src directory to the Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def catalog():
    """Fresh catalog singleton for each test."""
    from ncds.catalog import TokenCatalog

    TokenCatalog.reset_instance()
    yield TokenCatalog()
    TokenCatalog.reset_instance()


@pytest.fixture(scope="session")
def documented_snapshot():
    """Documented token values recorded in catalog_snapshot.yaml."""
    with open(FIXTURES_DIR / "catalog_snapshot.yaml", 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)
