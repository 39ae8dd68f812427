# --------------------------------------------------------------------
import typing as tp

from typing import Optional as Opt

from .nyxast import Identifier

T = tp.TypeVar('T')

# ====================================================================
# Name-keyed environment

class Environment(tp.Generic[T]):
    def __init__(self):
        self._bindings: dict[Identifier, T] = {}

    def __contains__(self, identifier: Identifier):
        return identifier in self._bindings

    def __getitem__(self, identifier: Identifier) -> T:
        return self._bindings[identifier]

    def __len__(self):
        return len(self._bindings)

    def get(self, identifier: Identifier) -> Opt[T]:
        return self._bindings.get(identifier)

    def assign(self, identifier: Identifier, value: T):
        self._bindings[identifier] = value

    def asdict(self) -> dict[str, T]:
        return {k.name: v for k, v in self._bindings.items()}
