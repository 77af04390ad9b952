"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import re
from typing import List
from urllib.parse import quote

from bs4 import BeautifulSoup, Tag

from app.config import Config
from scraper.base import BaseTracker, Category

_CATEGORY_CODES = {
    Category.MOVIES: '201',
    Category.TV: '205',
    Category.MUSIC: '101',
    Category.GAMES: '400',
    Category.APPLICATIONS: '300',
    Category.BOOKS: '601',
    Category.OTHER: '600',
}

_TORRENT_LINK = re.compile(r'(https?://[^"\'\s<>]+\.torrent)')
_SEEDERS = re.compile(r'.+<dd>(\d+)</dd>')
_DETAILS_ID = re.compile(r'/torrent/(\d+)')


# Scraper específico para The Pirate Bay
class ThePirateBay(BaseTracker):
    SCRAPER_TYPE = "the_pirate_bay"
    DEFAULT_BASE_URL = Config.TPB_BASE_URL
    DISPLAY_NAME = "The Pirate Bay"

    def details(self, tr: Tag) -> str:
        return self.base_url + tr.select_one('.detLink')['href']

    def torrent(self, tr: Tag) -> str:
        return _TORRENT_LINK.search(str(tr)).group(1)

    def title(self, tr: Tag) -> str:
        return tr.select_one('.detLink').get_text()

    def seeders(self, details: BeautifulSoup) -> int:
        return int(_SEEDERS.search(str(details)).group(1))

    # Ignora a linha de cabeçalho da tabela
    def torrents(self, site: BeautifulSoup) -> List[Tag]:
        return [tr for tr in site.select('#searchResult tr') if tr.select_one('.detLink')]

    def category_url(self, category: Category) -> str:
        return f"{self.base_url}/browse/{_CATEGORY_CODES[category]}"

    def id(self, details: str) -> str:
        return _DETAILS_ID.search(details).group(1)

    def details_title(self, details: BeautifulSoup) -> str:
        return details.select_one('#title').get_text()

    def details_torrent(self, details: BeautifulSoup) -> str:
        return _TORRENT_LINK.search(str(details)).group(1)

    def search_url(self, query: str) -> str:
        return f"{self.base_url}/search/{quote(query)}/0/99/0"

    def recent_url(self) -> str:
        return f"{self.base_url}/recent"
