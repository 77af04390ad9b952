"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import os


# Converte string de ambiente (1, true, yes, on) para booleano
def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Logging
    LOG_LEVEL: int = int(os.getenv('LOG_LEVEL', '1'))
    LOG_FORMAT: str = os.getenv('LOG_FORMAT', 'console')  # 'json' ou 'console'

    # Espelha o log de erros compartilhado no logger (nível WARNING) quando ativo
    DEBUG: bool = _parse_bool(os.getenv('DEBUG', 'false'))

    # Timeouts (uma única tentativa por requisição - sem retry)
    HTTP_REQUEST_TIMEOUT: int = int(os.getenv('HTTP_REQUEST_TIMEOUT', '10'))

    # Detecção de charset: abaixo desta confiança, conteúdo não-UTF-8 é descartado
    CHARSET_MIN_CONFIDENCE: float = float(os.getenv('CHARSET_MIN_CONFIDENCE', '0.6'))

    # Tamanho máximo do detalhe do erro guardado no log compartilhado
    ERROR_DETAIL_MAX_LENGTH: int = 60

    # Workers para avaliação paralela dos registros de uma listagem
    SCRAPER_MAX_WORKERS: int = int(os.getenv('SCRAPER_MAX_WORKERS', '8'))

    USER_AGENT: str = os.getenv(
        'USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'
    )

    # Trackers
    TPB_BASE_URL: str = os.getenv('TPB_BASE_URL', 'http://thepiratebay.org')
