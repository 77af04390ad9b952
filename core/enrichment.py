"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import Any, Optional, Protocol


# Serviço externo de busca de filmes
class MovieLookup(Protocol):
    def find_by_imdb_id(self, imdb_id: str) -> Optional[Any]:
        ...

    def find_by_release_name(self, title: str) -> Optional[Any]:
        ...


# Serviço externo de busca de legendas
class SubtitleLookup(Protocol):
    def find(self, term: str, language: str, release_name: str = '') -> Optional[Any]:
        ...


# Busca o filme pelo IMDB quando disponível, senão pelo título do release
def lookup_movie(lookup: Optional[MovieLookup], imdb_id: Optional[str], title: str) -> Optional[Any]:
    if lookup is None:
        return None
    if imdb_id:
        return lookup.find_by_imdb_id(imdb_id)
    if title:
        return lookup.find_by_release_name(title)
    return None


# Termo de busca de legenda: IMDB do torrent ou, na falta, o IMDB do filme encontrado
def subtitle_term(imdb_id: Optional[str], movie: Optional[Any]) -> Optional[str]:
    if imdb_id:
        return imdb_id
    if movie is not None:
        return getattr(movie, 'imdb_id', None)
    return None
