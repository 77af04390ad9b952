"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import hashlib
import logging
import re
import threading
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup

from core.dispatch import Dispatcher, get_dispatcher
from core.enrichment import MovieLookup, SubtitleLookup, lookup_movie, subtitle_term
from core.validation import is_numeric, is_valid_record
from scraper import BaseTracker, load_scraper
from utils.concurrency.lazy_field import lazy_field
from utils.http.fetcher import Fetcher, get_fetcher
from utils.logging.error_log import ErrorEntry

logger = logging.getLogger(__name__)

_DOMAIN_PATTERN = re.compile(r'(ftp|http|https)://([w]+\.)?(.+?\.[a-z]{2,3})', re.IGNORECASE)
_IMDB_LINK_PATTERN = re.compile(r'((http://)?([w]{3}\.)?imdb.com/title/tt\d+)', re.IGNORECASE)
_IMDB_ID_PATTERN = re.compile(r'(tt\d+)')


# Converte o valor devolvido pelo tracker para inteiro, com fallback
def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class TorrentRecord:
    """
    Visão preguiçosa e memoizada de um torrent.

    Construído a partir da URL de detalhes (e opcionalmente título, link
    do .torrent e seeders já lidos da listagem). Os demais campos são
    derivados sob demanda através do Dispatcher, cada um calculado no
    máximo uma vez por registro, mesmo com acessos concorrentes.
    """

    def __init__(
        self,
        details: str,
        tracker: Union[str, BaseTracker],
        title: Optional[str] = None,
        torrent: Optional[str] = None,
        seeders: Optional[int] = None,
        dispatcher: Optional[Dispatcher] = None,
        fetcher: Optional[Fetcher] = None,
        cookies: Optional[Any] = None,
        movie_lookup: Optional[MovieLookup] = None,
        subtitle_lookup: Optional[SubtitleLookup] = None
    ):
        self.details = details
        self.adapter = load_scraper(tracker) if isinstance(tracker, str) else tracker
        self.dispatcher = dispatcher or get_dispatcher()
        self.fetcher = fetcher or get_fetcher()
        self.cookies = cookies
        self.movie_lookup = movie_lookup
        self.subtitle_lookup = subtitle_lookup
        self._subtitles: Dict[str, Any] = {}
        self._subtitles_lock = threading.Lock()

        # Valores da listagem entram direto no cache dos campos lazy
        if title is not None:
            self.__dict__['title'] = title.strip() if isinstance(title, str) else title
        if torrent is not None:
            self.__dict__['torrent'] = torrent
        if seeders is not None:
            self.__dict__['seeders'] = _to_int(seeders, 1)

    def _invoke(self, operation: str, argument: Any = None) -> Any:
        return self.dispatcher.invoke(operation, self.adapter, argument)

    @lazy_field
    def content(self) -> BeautifulSoup:
        """Página de detalhes baixada e parseada (uma única vez)."""
        return BeautifulSoup(self.fetcher.fetch(self.details, cookies=self.cookies), 'html.parser')

    @lazy_field
    def seeders(self) -> int:
        """Seeders do torrent; 1 quando o tracker não informa."""
        default = _to_int(self.dispatcher.default_value('seeders'), 1)
        return max(_to_int(self._invoke('seeders', self.content), default), 0)

    @property
    def dead(self) -> bool:
        return self.seeders <= 0

    @lazy_field
    def title(self) -> Optional[str]:
        value = self._invoke('details_title', self.content)
        return value.strip() if isinstance(value, str) else value

    @lazy_field
    def torrent(self) -> Optional[str]:
        return self._invoke('details_torrent', self.content)

    # Id bruto devolvido pelo tracker, sem conversão nem memoização
    def raw_id(self) -> Any:
        return self._invoke('id', self.details)

    @lazy_field
    def id(self) -> Optional[int]:
        raw = self.raw_id()
        if not is_numeric(raw):
            logger.debug(f"Id não numérico para {self.details}: {raw!r}")
            return None
        return int(str(raw))

    @lazy_field
    def domain(self) -> str:
        """Domínio da URL de detalhes, sem protocolo nem www."""
        match = _DOMAIN_PATTERN.search(self.details or '')
        return match.group(3) if match else ''

    @lazy_field
    def tid(self) -> str:
        """Id estável do torrent: md5 de domínio + id, usado para deduplicar entre trackers."""
        torrent_id = '' if self.id is None else str(self.id)
        return hashlib.md5(f"{self.domain}{torrent_id}".encode('utf-8')).hexdigest()

    @property
    def torrent_id(self) -> str:
        return self.tid

    @lazy_field
    def imdb(self) -> Optional[str]:
        """Link do IMDB encontrado na página de detalhes (ex: http://www.imdb.com/title/tt0066026)."""
        match = _IMDB_LINK_PATTERN.search(str(self.content))
        return match.group(1) if match else None

    @lazy_field
    def imdb_id(self) -> Optional[str]:
        match = _IMDB_ID_PATTERN.search(self.imdb or '')
        return match.group(1) if match else None

    @lazy_field
    def valid(self) -> bool:
        return is_valid_record(self)

    @lazy_field
    def movie(self) -> Optional[Any]:
        try:
            return lookup_movie(self.movie_lookup, self.imdb_id, self.title)
        except Exception as e:
            self.dispatcher.error_log.add(f"Falha ao buscar o filme de {self.details}", e)
            return None

    # Legenda para o idioma, memoizada por idioma
    def subtitle(self, language: str = 'english') -> Optional[Any]:
        with self._subtitles_lock:
            if language in self._subtitles:
                return self._subtitles[language]

            result = None
            if self.subtitle_lookup is not None:
                term = subtitle_term(self.imdb_id, self.movie)
                if term:
                    try:
                        result = self.subtitle_lookup.find(term, language, release_name=self.title or '')
                    except Exception as e:
                        self.dispatcher.error_log.add(f"Falha ao buscar legenda ({language}) de {self.details}", e)
            self._subtitles[language] = result
            return result

    @property
    def errors(self) -> List[ErrorEntry]:
        return self.dispatcher.error_log.entries

    def to_dict(self) -> Dict[str, Any]:
        """Converte o registro para dicionário (força o cálculo dos campos)"""
        return {
            'tid': self.tid,
            'id': self.id,
            'domain': self.domain,
            'details': self.details,
            'title': self.title,
            'torrent': self.torrent,
            'seeders': self.seeders,
            'imdb_id': self.imdb_id,
        }

    def __repr__(self) -> str:
        return f"<TorrentRecord {self.details}>"
