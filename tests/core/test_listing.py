import hashlib
import threading

import pytest

from core.listing import Torrents
from exceptions import OperationNotImplementedError
from scraper.base import BaseTracker, Category

SEARCH_URL = "http://thepiratebay.org/search/big%20buck%20bunny/0/99/0"
DETAILS_URL = "http://thepiratebay.org/torrent/6543210/Big_Buck_Bunny_1080p"


@pytest.fixture
def fetcher(make_fetcher, listing_html, details_html):
    return make_fetcher({SEARCH_URL: listing_html, DETAILS_URL: details_html})


@pytest.fixture
def torrents(tpb, fetcher, dispatcher):
    return Torrents(tpb, fetcher=fetcher, dispatcher=dispatcher)


def test_search_end_to_end(torrents, fetcher):
    results = torrents.search("big buck bunny").results()

    assert len(results) == 1
    record = results[0]
    assert record.details == DETAILS_URL
    assert record.title == "Big Buck Bunny 1080p"
    assert record.seeders == 42
    assert record.valid is True
    assert record.tid == hashlib.md5(f"{record.domain}{record.id}".encode("utf-8")).hexdigest()
    assert record.tid == hashlib.md5(b"thepiratebay.org6543210").hexdigest()
    assert fetcher.calls == [SEARCH_URL, DETAILS_URL]


def test_url_and_content_are_memoized(torrents, fetcher):
    torrents.search("big buck bunny")

    assert torrents.url == SEARCH_URL
    assert torrents.content() is torrents.content()
    assert fetcher.calls == [SEARCH_URL]


def test_category_url(torrents):
    assert torrents.category(Category.TV).url == "http://thepiratebay.org/browse/205"


def test_category_not_implemented(fetcher, dispatcher):
    torrents = Torrents(BaseTracker("http://base.example"), fetcher=fetcher, dispatcher=dispatcher)

    with pytest.raises(OperationNotImplementedError):
        torrents.category(Category.MOVIES)


def test_default_listing_is_recent(torrents):
    assert torrents.url == "http://thepiratebay.org/recent"


def test_empty_listing_yields_no_results(torrents, error_log):
    assert torrents.recent().results() == []


def test_invalid_records_are_filtered(tpb, make_fetcher, dispatcher, listing_html):
    broken_listing = listing_html.replace(".torrent", ".zip")
    fetcher = make_fetcher({SEARCH_URL: broken_listing})
    torrents = Torrents(tpb, fetcher=fetcher, dispatcher=dispatcher).search("big buck bunny")

    assert torrents.results() == []
    assert len(torrents.results(only_valid=False)) == 1


def test_cancelled_scan_returns_no_pending_records(torrents, fetcher):
    cancel_event = threading.Event()
    cancel_event.set()

    assert torrents.search("big buck bunny").results(cancel_event=cancel_event) == []
    assert DETAILS_URL not in fetcher.calls


def _listing_with_rows(count: int) -> str:
    rows = "".join(
        f'<tr><td><div class="detName"><a href="/torrent/{n}/Title_{n}" class="detLink">Title {n}</a></div>'
        f'<a href="http://torrents.thepiratebay.org/{n}/Title_{n}.{n}.TPB.torrent">Download</a></td></tr>'
        for n in range(1, count + 1)
    )
    return f'<html><body><table id="searchResult">{rows}</table></body></html>'


def test_cancel_during_scan_keeps_in_flight_records(tpb, dispatcher, details_html, make_fetcher):
    cancel_event = threading.Event()

    class CancellingFetcher(make_fetcher):
        def fetch(self, url, cookies=None, timeout=None):
            page = super().fetch(url, cookies=cookies, timeout=timeout)
            if "/torrent/" in url:
                cancel_event.set()
                return details_html
            return page

    fetcher = CancellingFetcher({SEARCH_URL: _listing_with_rows(20)})
    torrents = Torrents(tpb, fetcher=fetcher, dispatcher=dispatcher)

    results = torrents.search("big buck bunny").results(max_workers=2, cancel_event=cancel_event)

    detail_calls = [url for url in fetcher.calls if "/torrent/" in url]
    assert 1 <= len(detail_calls) <= 2
    # Registros já em andamento terminam e são mantidos, na ordem das linhas
    assert sorted(record.details for record in results) == sorted(detail_calls)
    assert [record.id for record in results] == sorted(record.id for record in results)
    assert all(record.seeders == 42 for record in results)


def test_exists():
    assert Torrents.exists("the_pirate_bay")
    assert not Torrents.exists("random")


def test_tracker_by_name(fetcher, dispatcher):
    torrents = Torrents("the_pirate_bay", fetcher=fetcher, dispatcher=dispatcher)
    assert torrents.name == "the_pirate_bay"


def test_errors_are_exposed(fetcher, dispatcher):
    torrents = Torrents(BaseTracker("http://base.example"), fetcher=fetcher, dispatcher=dispatcher)

    assert torrents.rows() == []
    assert len(torrents.errors) == 2
