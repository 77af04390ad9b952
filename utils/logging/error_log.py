"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

from app.config import Config

ERROR_LOGGER_NAME = 'torrents.errors'

logger = logging.getLogger(ERROR_LOGGER_NAME)


# Entrada do log de erros: mensagem + detalhe truncado da exceção
@dataclass(frozen=True)
class ErrorEntry:
    message: str
    detail: str = ''

    def __str__(self) -> str:
        return f"{self.message}\n{self.detail}"


# Trunca a representação de um erro para o tamanho configurado
def format_error_detail(error: object, max_length: Optional[int] = None) -> str:
    if error is None or error == '':
        return ''
    if max_length is None:
        max_length = Config.ERROR_DETAIL_MAX_LENGTH
    return repr(error)[:max_length + 1]


class ErrorLog:
    """
    Log de erros em memória, somente-anexação, compartilhado entre o
    Fetcher e o Dispatcher.

    Legível pela aplicação hospedeira via `entries`. Quando `debug` está
    ativo, cada entrada também é espelhada no logger em nível WARNING.
    """

    def __init__(self, debug: Optional[bool] = None):
        self.debug = Config.DEBUG if debug is None else debug
        self._entries: List[ErrorEntry] = []
        self._lock = threading.Lock()

    def add(self, messages, error: object = '') -> ErrorEntry:
        if isinstance(messages, (list, tuple)):
            message = ', '.join(str(m) for m in messages)
        else:
            message = str(messages)

        entry = ErrorEntry(message, format_error_detail(error))
        with self._lock:
            self._entries.append(entry)

        if self.debug:
            logger.warning(f"Erro no núcleo de torrents ==> {entry.message} ==> {entry.detail} ...")
        else:
            logger.debug(f"{entry.message} - {entry.detail}")
        return entry

    @property
    def entries(self) -> List[ErrorEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self):
        return iter(self.entries)


_shared_error_log: Optional[ErrorLog] = None
_shared_lock = threading.Lock()


# Retorna o log de erros compartilhado do processo
def get_error_log() -> ErrorLog:
    global _shared_error_log
    if _shared_error_log is None:
        with _shared_lock:
            if _shared_error_log is None:
                _shared_error_log = ErrorLog()
    return _shared_error_log
