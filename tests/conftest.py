import sys
from pathlib import Path
from typing import Dict, Optional

import pytest

# Ensure root path is available for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from core.dispatch import Dispatcher  # noqa: E402
from scraper import reset_registry  # noqa: E402
from scraper.the_pirate_bay import ThePirateBay  # noqa: E402
from utils.logging.error_log import ErrorLog  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"
TPB_BASE_URL = "http://thepiratebay.org"


def read_fixture(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


class FakeFetcher:
    """Serves canned pages by URL and counts every request."""

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        self.pages = dict(pages or {})
        self.calls: list[str] = []

    def fetch(self, url, cookies=None, timeout=None) -> str:
        self.calls.append(url)
        return self.pages.get(url, "")


@pytest.fixture(autouse=True)
def clean_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def error_log() -> ErrorLog:
    return ErrorLog(debug=False)


@pytest.fixture
def dispatcher(error_log: ErrorLog) -> Dispatcher:
    return Dispatcher(error_log=error_log)


@pytest.fixture
def tpb() -> ThePirateBay:
    return ThePirateBay(base_url=TPB_BASE_URL)


@pytest.fixture
def listing_html() -> str:
    return read_fixture("tpb_search.html")


@pytest.fixture
def details_html() -> str:
    return read_fixture("tpb_details.html")


@pytest.fixture
def make_fetcher():
    return FakeFetcher
