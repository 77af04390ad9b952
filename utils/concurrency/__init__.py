"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from utils.concurrency.lazy_field import lazy_field, is_computed

__all__ = [
    'lazy_field',
    'is_computed',
]
