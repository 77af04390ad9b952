import pytest
from bs4 import BeautifulSoup

from scraper.base import Category


@pytest.fixture
def listing(listing_html):
    return BeautifulSoup(listing_html, "html.parser")


@pytest.fixture
def details(details_html):
    return BeautifulSoup(details_html, "html.parser")


def test_torrents_skips_header_row(tpb, listing):
    rows = tpb.torrents(listing)
    assert len(rows) == 1


def test_row_operations(tpb, listing):
    row = tpb.torrents(listing)[0]

    assert tpb.details(row) == "http://thepiratebay.org/torrent/6543210/Big_Buck_Bunny_1080p"
    assert tpb.title(row) == "Big Buck Bunny 1080p"
    assert tpb.torrent(row) == (
        "http://torrents.thepiratebay.org/6543210/Big_Buck_Bunny_1080p.6543210.TPB.torrent"
    )


def test_details_operations(tpb, details):
    assert tpb.seeders(details) == 42
    assert tpb.details_title(details).strip() == "Big Buck Bunny 1080p"
    assert tpb.details_torrent(details).endswith(".torrent")


def test_id_from_details_url(tpb):
    assert tpb.id("http://thepiratebay.org/torrent/6543210/Big_Buck_Bunny_1080p") == "6543210"


def test_urls(tpb):
    assert tpb.category_url(Category.MOVIES) == "http://thepiratebay.org/browse/201"
    assert tpb.search_url("big buck bunny") == "http://thepiratebay.org/search/big%20buck%20bunny/0/99/0"
    assert tpb.recent_url() == "http://thepiratebay.org/recent"


def test_seeders_raises_when_missing(tpb):
    with pytest.raises(AttributeError):
        tpb.seeders(BeautifulSoup("", "html.parser"))
