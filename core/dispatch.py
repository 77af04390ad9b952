"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import copy
import logging
import threading
import weakref
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from exceptions import InvalidArgumentError, OperationNotImplementedError
from scraper.base import BaseTracker, Category
from utils.logging.error_log import ErrorLog, get_error_log

logger = logging.getLogger(__name__)


# Fragmento = elemento HTML que não é o documento inteiro
def is_fragment(argument: Any) -> bool:
    return isinstance(argument, Tag) and not isinstance(argument, BeautifulSoup)


def is_document(argument: Any) -> bool:
    return isinstance(argument, BeautifulSoup)


def is_category(argument: Any) -> bool:
    return isinstance(argument, Category)


def is_string(argument: Any) -> bool:
    return isinstance(argument, str)


# Formato esperado do argumento de cada operação
# Operações fora da tabela aceitam qualquer argumento
ARGUMENT_SHAPES: Dict[str, Tuple[str, Callable[[Any], bool]]] = {
    'details': ('fragmento de linha', is_fragment),
    'title': ('fragmento de linha', is_fragment),
    'torrent': ('fragmento de linha', is_fragment),
    'category_url': ('categoria', is_category),
    'torrents': ('documento', is_document),
    'seeders': ('documento', is_document),
    'id': ('string', is_string),
}

# Valores usados quando o tracker falha ou não retorna nada
DEFAULT_VALUES: Dict[str, Any] = {
    'torrent': '',
    'torrents': [],
    'seeders': 1,
    'title': '',
    'details': '',
    'id': 0,
}

# Operações cuja ausência é erro de configuração do tracker
MANDATORY_OPERATIONS = frozenset({'category_url'})


# Verifica se o argumento tem o formato esperado pela operação
def valid_argument(operation: str, argument: Any) -> bool:
    shape = ARGUMENT_SHAPES.get(operation)
    if shape is None:
        return True
    return shape[1](argument)


# Nome legível do tracker para mensagens
def tracker_name(adapter: Any) -> str:
    return getattr(adapter, 'SCRAPER_TYPE', '') or type(adapter).__name__


class Dispatcher:
    """
    Camada de contenção em volta de todas as chamadas aos trackers.

    Valida o formato do argumento, chama a operação, captura qualquer
    exceção do tracker e substitui resultados ausentes pelo valor padrão
    da operação. A única exceção que sai daqui é
    OperationNotImplementedError, para operações obrigatórias.
    """

    def __init__(
        self,
        error_log: Optional[ErrorLog] = None,
        defaults: Optional[Mapping[str, Any]] = None,
        mandatory: Optional[Iterable[str]] = None
    ):
        self.error_log = error_log if error_log is not None else get_error_log()
        self.defaults: Dict[str, Any] = dict(DEFAULT_VALUES)
        if defaults:
            self.defaults.update(defaults)
        self.mandatory = frozenset(mandatory) if mandatory is not None else MANDATORY_OPERATIONS
        self._adapter_locks: "weakref.WeakKeyDictionary[BaseTracker, threading.Lock]" = weakref.WeakKeyDictionary()
        self._adapter_locks_guard = threading.Lock()

    # Valor padrão da operação - cópia para não compartilhar listas entre chamadas
    def default_value(self, operation: str) -> Any:
        return copy.copy(self.defaults.get(operation, ''))

    def invoke(self, operation: str, adapter: BaseTracker, argument: Any = None) -> Any:
        name = tracker_name(adapter)
        result = None

        try:
            if not valid_argument(operation, argument):
                expected = ARGUMENT_SHAPES[operation][0]
                raise InvalidArgumentError(operation, expected, argument)
            result = self._call(adapter, operation, argument)
        except InvalidArgumentError as e:
            self.error_log.add(f"Chamada inválida ao tracker {name} no método {operation}.", e)
        except Exception as e:
            self.error_log.add(f"Ocorreu um erro no tracker {name} no método {operation}.", e)

        if result is None:
            if operation in self.mandatory:
                logger.error(f"[{name}] Operação obrigatória {operation} não implementada")
                raise OperationNotImplementedError(name, operation, argument)
            return self.default_value(operation)

        return result

    def _call(self, adapter: BaseTracker, operation: str, argument: Any) -> Any:
        method = getattr(adapter, operation)
        if getattr(adapter, 'THREAD_SAFE', True):
            return method() if argument is None else method(argument)

        with self._lock_for(adapter):
            return method() if argument is None else method(argument)

    # Lock por instância para trackers com estado interno (liberado junto com o tracker)
    def _lock_for(self, adapter: BaseTracker) -> threading.Lock:
        with self._adapter_locks_guard:
            lock = self._adapter_locks.get(adapter)
            if lock is None:
                lock = self._adapter_locks[adapter] = threading.Lock()
            return lock


_default_dispatcher: Optional[Dispatcher] = None
_dispatcher_lock = threading.Lock()


# Retorna o Dispatcher padrão do processo
def get_dispatcher() -> Dispatcher:
    global _default_dispatcher
    if _default_dispatcher is None:
        with _dispatcher_lock:
            if _default_dispatcher is None:
                _default_dispatcher = Dispatcher()
    return _default_dispatcher
