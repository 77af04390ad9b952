"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import threading
from concurrent.futures import CancelledError, ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from app.config import Config
from core.dispatch import Dispatcher, get_dispatcher, tracker_name
from models.torrent import TorrentRecord
from scraper import BaseTracker, Category, load_scraper, scraper_exists
from utils.http.fetcher import Fetcher, get_fetcher
from utils.logging.error_log import ErrorEntry

logger = logging.getLogger(__name__)


class Torrents:
    """
    Front-end de uma listagem de um tracker: busca, categoria ou recentes.

    Uso:
        Torrents('the_pirate_bay').search('ubuntu').results()
    """

    def __init__(
        self,
        tracker: Union[str, BaseTracker],
        fetcher: Optional[Fetcher] = None,
        dispatcher: Optional[Dispatcher] = None,
        cookies: Optional[Any] = None
    ):
        self.adapter = load_scraper(tracker) if isinstance(tracker, str) else tracker
        self.fetcher = fetcher or get_fetcher()
        self.dispatcher = dispatcher or get_dispatcher()
        self.cookies = cookies
        self._url: Optional[str] = None
        self._content: Optional[BeautifulSoup] = None
        self._content_lock = threading.Lock()

    # Verifica se existe um tracker registrado com o nome
    @staticmethod
    def exists(name: str) -> bool:
        return scraper_exists(name)

    @property
    def name(self) -> str:
        return tracker_name(self.adapter)

    def search(self, query: str) -> 'Torrents':
        self._select(self.dispatcher.invoke('search_url', self.adapter, query))
        return self

    # Listagem por categoria - OperationNotImplementedError se o tracker não suportar
    def category(self, category: Category) -> 'Torrents':
        self._select(self.dispatcher.invoke('category_url', self.adapter, category))
        return self

    def recent(self) -> 'Torrents':
        self._select(self.dispatcher.invoke('recent_url', self.adapter))
        return self

    def _select(self, url: str) -> None:
        with self._content_lock:
            self._url = url or ''
            self._content = None

    @property
    def url(self) -> str:
        if self._url is None:
            self._select(self.dispatcher.invoke('recent_url', self.adapter))
        return self._url

    # Página de listagem parseada (memoizada até a próxima seleção)
    def content(self) -> BeautifulSoup:
        url = self.url
        with self._content_lock:
            if self._content is None:
                self._content = BeautifulSoup(self.fetcher.fetch(url, cookies=self.cookies), 'html.parser')
            return self._content

    def rows(self) -> List[Tag]:
        rows = self.dispatcher.invoke('torrents', self.adapter, self.content())
        return list(rows or [])

    # Cria o registro a partir de uma linha, com os campos que a listagem já oferece
    def build_record(self, tr: Tag) -> TorrentRecord:
        return TorrentRecord(
            details=self.dispatcher.invoke('details', self.adapter, tr),
            tracker=self.adapter,
            title=self.dispatcher.invoke('title', self.adapter, tr),
            torrent=self.dispatcher.invoke('torrent', self.adapter, tr),
            dispatcher=self.dispatcher,
            fetcher=self.fetcher,
            cookies=self.cookies
        )

    # Força o cálculo dos campos do registro (inclui o download da página de detalhes)
    def _evaluate(
        self,
        record: TorrentRecord,
        only_valid: bool,
        cancel_event: Optional[threading.Event] = None
    ) -> Optional[TorrentRecord]:
        if cancel_event is not None and cancel_event.is_set():
            return None
        if only_valid and not record.valid:
            return None
        record.to_dict()
        return record

    def results(
        self,
        only_valid: bool = True,
        max_workers: Optional[int] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> List[TorrentRecord]:
        """
        Registros da listagem, na ordem das linhas.

        Os registros são avaliados em paralelo. Se `cancel_event` for
        sinalizado, avaliações ainda não iniciadas são canceladas e os
        registros correspondentes descartados; as que já estão em
        andamento terminam normalmente.
        """
        records = [self.build_record(tr) for tr in self.rows()]
        if not records:
            return []

        if max_workers is None:
            max_workers = Config.SCRAPER_MAX_WORKERS
        actual_max_workers = min(max(1, len(records)), max_workers)
        results_by_index: Dict[int, Optional[TorrentRecord]] = {}

        with ThreadPoolExecutor(max_workers=actual_max_workers) as executor:
            futures = [executor.submit(self._evaluate, record, only_valid, cancel_event) for record in records]

            for idx, future in enumerate(futures):
                if cancel_event is not None and cancel_event.is_set():
                    for pending in futures[idx:]:
                        pending.cancel()
                try:
                    results_by_index[idx] = future.result()
                except CancelledError:
                    results_by_index[idx] = None
                except Exception as e:
                    error_type = type(e).__name__
                    error_msg = str(e).split('\n')[0][:100] if str(e) else str(e)
                    logger.warning(f"[{self.name}] Erro no registro [{idx+1}]: {error_type} - {error_msg}")
                    results_by_index[idx] = None

        cancelled = cancel_event is not None and cancel_event.is_set()
        found = [results_by_index[idx] for idx in range(len(records)) if results_by_index.get(idx)]
        logger.info(
            f"[{self.name}] Processamento completo: {len(found)} torrents de {len(records)} linhas"
            + (" (cancelado)" if cancelled else "")
        )
        return found

    @property
    def errors(self) -> List[ErrorEntry]:
        return self.dispatcher.error_log.entries
