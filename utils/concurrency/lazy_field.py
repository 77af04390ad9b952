"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import threading
from typing import Any, Callable, Dict

_LOCKS_ATTR = '_lazy_field_locks'
_LOCKS_GUARD = threading.Lock()


# Retorna (criando se preciso) o lock de um campo numa instância
def _field_lock(instance: Any, name: str) -> threading.Lock:
    with _LOCKS_GUARD:
        locks: Dict[str, threading.Lock] = instance.__dict__.setdefault(_LOCKS_ATTR, {})
        lock = locks.get(name)
        if lock is None:
            lock = locks[name] = threading.Lock()
        return lock


class lazy_field:
    """
    Propriedade calculada no primeiro acesso e memoizada na instância.

    Cada campo tem seu próprio lock por instância: mesmo com acessos
    concorrentes, a função é executada uma única vez. Depois de calculado,
    o valor fica em `instance.__dict__` e o descritor não é mais consultado.
    Um valor já presente no `__dict__` (pré-carregado) nunca é recalculado.
    """

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func
        self.name = func.__name__
        self.__doc__ = func.__doc__

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self

        cache = instance.__dict__
        if self.name in cache:
            return cache[self.name]

        with _field_lock(instance, self.name):
            # Double-check: outra thread pode ter calculado enquanto esperávamos
            if self.name not in cache:
                cache[self.name] = self.func(instance)
            return cache[self.name]


# Indica se um campo lazy já foi calculado (ou pré-carregado) na instância
def is_computed(instance: Any, name: str) -> bool:
    return name in instance.__dict__
