"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import re
import threading
from typing import Any, Optional
from urllib.parse import quote_plus

import charset_normalizer
import requests

from app.config import Config
from exceptions import FetchError, FetcherError, LowConfidenceEncodingError
from utils.logging.error_log import ErrorLog, get_error_log

logger = logging.getLogger(__name__)

# Caracteres que algumas páginas deixam sem escape nos hrefs e que o cliente HTTP rejeita
_UNSAFE_URL_CHARS = re.compile(r'[{}|\\^\[\]`]|\s+')
_UTF8_PATTERN = re.compile(r'^utf[-_]?8', re.IGNORECASE)


# Escapa caracteres inseguros da URL - idempotente
def clean_url(url: str) -> str:
    return _UNSAFE_URL_CHARS.sub(lambda match: quote_plus(match.group(0)), url)


# Verifica se o nome do encoding detectado é UTF-8
def is_utf8(encoding: Optional[str]) -> bool:
    return bool(encoding) and bool(_UTF8_PATTERN.match(encoding))


class Fetcher:
    """
    Baixa uma URL e devolve o conteúdo como texto UTF-8.

    Nunca propaga exceções: qualquer falha (timeout, erro de conexão,
    status HTTP de erro, charset com confiança baixa) é registrada no log
    de erros compartilhado e resulta em string vazia. Uma única tentativa
    por chamada, sem retry.
    """

    def __init__(
        self,
        error_log: Optional[ErrorLog] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
        min_confidence: Optional[float] = None
    ):
        self.error_log = error_log if error_log is not None else get_error_log()
        self.timeout = timeout if timeout is not None else Config.HTTP_REQUEST_TIMEOUT
        self.min_confidence = (
            min_confidence if min_confidence is not None else Config.CHARSET_MIN_CONFIDENCE
        )
        if session is None:
            session = requests.Session()
            session.headers.update({
                'User-Agent': Config.USER_AGENT,
                'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            })
        self.session = session

    def fetch(self, url: str, cookies: Optional[Any] = None, timeout: Optional[int] = None) -> str:
        try:
            if not url or not isinstance(url, str):
                raise FetchError(str(url), "URL vazia ou inválida")

            response = self.session.get(
                clean_url(url),
                timeout=timeout if timeout is not None else self.timeout,
                cookies=cookies
            )
            response.raise_for_status()
            return self._decode(url, response.content)
        except (requests.RequestException, FetcherError) as e:
            self.error_log.add(f"Falha ao baixar {url}", e)
        except Exception as e:
            # Erros fora da taxonomia (ex: resposta malformada) também viram conteúdo vazio
            error_type = type(e).__name__
            logger.warning(f"Erro inesperado ao baixar {url}: {error_type}")
            self.error_log.add(f"Falha ao baixar {url}", e)

        return ''

    # Converte bytes para texto UTF-8 com base no charset detectado
    def _decode(self, url: str, data: bytes) -> str:
        detected = charset_normalizer.detect(data)
        encoding = detected.get('encoding')
        confidence = detected.get('confidence') or 0.0

        if not is_utf8(encoding) and confidence < self.min_confidence:
            raise LowConfidenceEncodingError(url, str(encoding), confidence)

        try:
            return data.decode(encoding, errors='ignore')
        except (LookupError, TypeError) as e:
            # Encoding desconhecido pelo Python: devolve o corpo original
            logger.debug(f"Transcodificação falhou para {url} ({encoding}): {type(e).__name__}")
            return data.decode('utf-8', errors='replace')


_default_fetcher: Optional[Fetcher] = None
_fetcher_lock = threading.Lock()


# Retorna o Fetcher padrão do processo
def get_fetcher() -> Fetcher:
    global _default_fetcher
    if _default_fetcher is None:
        with _fetcher_lock:
            if _default_fetcher is None:
                _default_fetcher = Fetcher()
    return _default_fetcher
