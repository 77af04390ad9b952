"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import re
from typing import Any

_URL_PATTERN = re.compile(
    r'(ftp|http|https)://(\w+:{0,1}\w*@)?(\S+)(:[0-9]+)?(/|/([\w#!:.?+=&%@!\-/]))?',
    re.IGNORECASE
)
_HTML_TAG = re.compile(r'</?[^>]*>')
_NUMERIC = re.compile(r'[0-9]+')

# Campos verificados por is_valid_record
VALIDATED_FIELDS = ('details', 'torrent', 'title', 'id')


# Verifica se o valor tem formato de URL
def valid_url(url: Any) -> bool:
    if not isinstance(url, str):
        return False
    return bool(_URL_PATTERN.search(url))


# URL válida terminada em .torrent
def valid_torrent(url: Any) -> bool:
    if not isinstance(url, str):
        return False
    return url.endswith('.torrent') and valid_url(url)


def is_numeric(value: Any) -> bool:
    return value is not None and bool(_NUMERIC.fullmatch(str(value)))


# Campo nulo, vazio, com tags HTML ou com espaço nas pontas
def is_malformed(value: Any) -> bool:
    if value is None:
        return True
    text = str(value)
    return not text or bool(_HTML_TAG.search(text)) or text.strip() != text


def is_valid_record(record) -> bool:
    """
    Verifica se um TorrentRecord está bem formado.

    Nenhum dos campos details, torrent, title e id pode ser nulo, vazio,
    conter tags HTML ou ter espaços nas pontas. Além disso details precisa
    ser uma URL, torrent uma URL .torrent, e o id bruto devolvido pelo
    tracker precisa ser puramente numérico.
    """
    for field in VALIDATED_FIELDS:
        if is_malformed(getattr(record, field)):
            return False

    return all([
        valid_url(record.details),
        valid_torrent(record.torrent),
        is_numeric(record.raw_id()),
    ])
