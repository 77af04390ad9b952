"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import Iterable, Optional, Type

from app.config import Config
from scraper import BaseTracker, available_scraper_types, register_scraper
from utils.logging.logger import setup_logging

logger = logging.getLogger(__name__)


class Bootstrap:
    @staticmethod
    def register_trackers(extra_trackers: Optional[Iterable[Type[BaseTracker]]] = None) -> None:
        """Registra trackers adicionais da aplicação hospedeira (os embutidos já vêm registrados)"""
        for tracker_class in extra_trackers or ():
            register_scraper(tracker_class)

    @staticmethod
    def initialize(extra_trackers: Optional[Iterable[Type[BaseTracker]]] = None, configure_logging: bool = True) -> None:
        """Configura logging e o registro de trackers"""
        if configure_logging:
            setup_logging(Config.LOG_LEVEL, Config.LOG_FORMAT, debug=Config.DEBUG)

        Bootstrap.register_trackers(extra_trackers)

        if Config.DEBUG:
            logger.info("[[ Modo debug ]] - erros dos trackers serão exibidos")
        logger.info(f"Trackers disponíveis: {list(available_scraper_types().keys())}")
