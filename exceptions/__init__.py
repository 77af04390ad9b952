"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from exceptions.scraper_exceptions import (
    ScraperError,
    ScraperNotFoundError,
    ScraperConfigurationError,
    OperationNotImplementedError,
    InvalidArgumentError
)
from exceptions.fetch_exceptions import (
    FetcherError,
    FetchError,
    LowConfidenceEncodingError
)

__all__ = [
    'ScraperError',
    'ScraperNotFoundError',
    'ScraperConfigurationError',
    'OperationNotImplementedError',
    'InvalidArgumentError',
    'FetcherError',
    'FetchError',
    'LowConfidenceEncodingError',
]
