"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import sys

from utils.logging.error_log import ERROR_LOGGER_NAME

_LEVELS = {
    0: logging.DEBUG,
    1: logging.INFO,
    2: logging.WARNING,
    3: logging.ERROR
}

_FORMATS = {
    'json': '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
    'console': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# Nível numérico (0-3) para nível do logging; desconhecido vira INFO
def level_from_numeric(level: int) -> int:
    return _LEVELS.get(level, logging.INFO)


def setup_logging(log_level: int, log_format: str = 'console', debug: bool = False) -> logging.Handler:
    """
    Instala um único handler em stdout no root logger.

    Com `debug`, os erros contidos dos trackers (logger de erros) continuam
    visíveis em WARNING mesmo quando o nível geral é ERROR.
    """
    python_log_level = level_from_numeric(log_level)
    formatter = logging.Formatter(
        _FORMATS.get(log_format, _FORMATS['console']),
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(python_log_level)
    root_logger.handlers = [handler]

    errors_logger = logging.getLogger(ERROR_LOGGER_NAME)
    if debug:
        errors_logger.setLevel(min(python_log_level, logging.WARNING))
        handler.setLevel(min(python_log_level, logging.WARNING))
    else:
        errors_logger.setLevel(logging.NOTSET)
        handler.setLevel(python_log_level)

    # Conexões HTTP e detecção de charset não interessam no log da aplicação
    for noisy in ('urllib3', 'urllib3.connectionpool', 'charset_normalizer'):
        logging.getLogger(noisy).setLevel(logging.ERROR)
    logging.getLogger('requests').setLevel(logging.WARNING)
    return handler
