"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from models.torrent import TorrentRecord

__all__ = ['TorrentRecord']
