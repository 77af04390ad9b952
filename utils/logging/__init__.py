"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from utils.logging.error_log import ErrorEntry, ErrorLog, get_error_log
from utils.logging.logger import setup_logging

__all__ = ['ErrorEntry', 'ErrorLog', 'get_error_log', 'setup_logging']
