"""Registro explícito de trackers: nome -> classe do adaptador -> instância única."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type

from exceptions import ScraperNotFoundError
from .base import BaseTracker, Category

_SCRAPER_REGISTRY: Dict[str, Type[BaseTracker]] = {}
_SCRAPER_METADATA: Dict[str, Dict[str, Any]] = {}
_SCRAPER_INSTANCES: Dict[str, BaseTracker] = {}
_registry_lock = threading.RLock()
_builtins_loaded = False


def _normalize_scraper_type(scraper_type: str) -> str:
    return scraper_type.strip().lower().replace('-', '_')


# Registra os trackers embutidos (mapeamento explícito, sem varrer diretórios)
def _register_builtin_scrapers() -> None:
    global _builtins_loaded
    if _builtins_loaded:
        return
    with _registry_lock:
        if _builtins_loaded:
            return
        from .the_pirate_bay import ThePirateBay

        for scraper_class in (ThePirateBay,):
            # Tracker do host com o mesmo nome tem prioridade sobre o embutido
            if _normalize_scraper_type(scraper_class.SCRAPER_TYPE) in _SCRAPER_REGISTRY:
                continue
            register_scraper(scraper_class)
        _builtins_loaded = True


# Registra uma classe de tracker - pode ser usado como decorator
def register_scraper(scraper_class: Type[BaseTracker], scraper_type: Optional[str] = None) -> Type[BaseTracker]:
    if not (isinstance(scraper_class, type) and issubclass(scraper_class, BaseTracker)):
        raise TypeError(f"{scraper_class!r} não herda de BaseTracker")

    normalized_type = _normalize_scraper_type(
        scraper_type or scraper_class.SCRAPER_TYPE or scraper_class.__name__
    )
    display_name = scraper_class.DISPLAY_NAME or scraper_class.__name__
    doc = (scraper_class.__doc__ or "").strip()

    with _registry_lock:
        _SCRAPER_REGISTRY[normalized_type] = scraper_class
        _SCRAPER_METADATA[normalized_type] = {
            "type": normalized_type,
            "class_name": scraper_class.__name__,
            "module": scraper_class.__module__,
            "default_url": scraper_class.DEFAULT_BASE_URL,
            "doc": doc,
            "display_name": display_name,
        }
        # Uma nova classe para o mesmo nome invalida a instância antiga
        _SCRAPER_INSTANCES.pop(normalized_type, None)
    return scraper_class


# Normaliza o nome do scraper para comparações
def normalize_scraper_type(scraper_type: str) -> str:
    return _normalize_scraper_type(scraper_type)


# Retorna metadados dos scrapers disponíveis
def available_scraper_types() -> Dict[str, Dict[str, Any]]:
    _register_builtin_scrapers()
    with _registry_lock:
        return {scraper_type: dict(metadata) for scraper_type, metadata in _SCRAPER_METADATA.items()}


# Verifica se existe um tracker registrado com o nome
def scraper_exists(scraper_type: str) -> bool:
    if not isinstance(scraper_type, str):
        return False
    _register_builtin_scrapers()
    return _normalize_scraper_type(scraper_type) in _SCRAPER_REGISTRY


# Retorna a instância única do tracker solicitado, criando no primeiro uso
def load_scraper(scraper_type: str) -> BaseTracker:
    _register_builtin_scrapers()
    normalized = _normalize_scraper_type(scraper_type)

    instance = _SCRAPER_INSTANCES.get(normalized)
    if instance is not None:
        return instance

    with _registry_lock:
        instance = _SCRAPER_INSTANCES.get(normalized)
        if instance is None:
            scraper_class = _SCRAPER_REGISTRY.get(normalized)
            if not scraper_class:
                raise ScraperNotFoundError(scraper_type, sorted(_SCRAPER_REGISTRY.keys()))
            instance = scraper_class()
            _SCRAPER_INSTANCES[normalized] = instance
        return instance


# Limpa o registro (usado em testes)
def reset_registry() -> None:
    global _builtins_loaded
    with _registry_lock:
        _SCRAPER_REGISTRY.clear()
        _SCRAPER_METADATA.clear()
        _SCRAPER_INSTANCES.clear()
        _builtins_loaded = False


__all__ = [
    "BaseTracker",
    "Category",
    "available_scraper_types",
    "load_scraper",
    "normalize_scraper_type",
    "register_scraper",
    "reset_registry",
    "scraper_exists",
]
