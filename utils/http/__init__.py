"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from utils.http.fetcher import Fetcher, clean_url, get_fetcher

__all__ = ['Fetcher', 'clean_url', 'get_fetcher']
