"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from core.dispatch import Dispatcher, DEFAULT_VALUES, get_dispatcher, valid_argument
from core.validation import valid_url, valid_torrent, is_valid_record

__all__ = [
    'Dispatcher',
    'DEFAULT_VALUES',
    'get_dispatcher',
    'valid_argument',
    'valid_url',
    'valid_torrent',
    'is_valid_record',
]
