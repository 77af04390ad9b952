"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from enum import Enum
from typing import List, Optional

from bs4 import BeautifulSoup, Tag


# Categorias aceitas por category_url
class Category(Enum):
    MOVIES = 'movies'
    TV = 'tv'
    MUSIC = 'music'
    GAMES = 'games'
    APPLICATIONS = 'applications'
    BOOKS = 'books'
    OTHER = 'other'


# Classe base para trackers
class BaseTracker:
    """
    Contrato de um adaptador de site.

    Cada operação recebe um formato específico de argumento (fragmento de
    linha, documento completo, categoria ou string). A implementação
    padrão levanta NotImplementedError; cada adaptador sobrescreve o que o
    site suporta e pode levantar exceções livremente - o Dispatcher
    contém as falhas e aplica os valores padrão.

    Adaptadores que guardam estado mutável devem definir THREAD_SAFE = False
    para que as chamadas sejam serializadas.
    """

    SCRAPER_TYPE: str = ''
    DEFAULT_BASE_URL: str = ''
    DISPLAY_NAME: str = ''
    THREAD_SAFE: bool = True

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = (base_url or self.DEFAULT_BASE_URL or '').rstrip('/')

    # URL da página de detalhes a partir de uma linha da listagem
    def details(self, tr: Tag) -> str:
        raise NotImplementedError

    # URL do arquivo .torrent a partir de uma linha da listagem
    def torrent(self, tr: Tag) -> str:
        raise NotImplementedError

    # Título a partir de uma linha da listagem
    def title(self, tr: Tag) -> str:
        raise NotImplementedError

    # Quantidade de seeders a partir da página de detalhes
    def seeders(self, details: BeautifulSoup) -> int:
        raise NotImplementedError

    # Linhas de resultado de uma página de listagem
    def torrents(self, site: BeautifulSoup) -> List[Tag]:
        raise NotImplementedError

    # URL da listagem filtrada por categoria (obrigatória)
    def category_url(self, category: Category) -> str:
        raise NotImplementedError

    # Id numérico a partir da URL de detalhes
    def id(self, details: str) -> str:
        raise NotImplementedError

    # Título a partir da página de detalhes
    def details_title(self, details: BeautifulSoup) -> str:
        raise NotImplementedError

    # URL do .torrent a partir da página de detalhes
    def details_torrent(self, details: BeautifulSoup) -> str:
        raise NotImplementedError

    # URL de busca por texto
    def search_url(self, query: str) -> str:
        raise NotImplementedError

    # URL dos envios recentes
    def recent_url(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.base_url}>"
