"""
Adapter: DictVariableStore
Implementuje port VariableStore na zwykłym dict (sesja CLI/API, testy).
"""
from __future__ import annotations

from typing import Mapping, Optional

from contracts import ExprNode


class DictVariableStore:
    """Słownikowy magazyn powiązań zmiennych."""

    def __init__(self, initial: Mapping[str, ExprNode] | None = None) -> None:
        self._bindings: dict[str, ExprNode] = dict(initial or {})

    # -- VariableStore protocol ---------------------------------------------

    def get(self, name: str) -> Optional[ExprNode]:
        return self._bindings.get(name)

    def set(self, name: str, node: ExprNode) -> None:
        self._bindings[name] = node

    def remove(self, name: str) -> None:
        self._bindings.pop(name, None)

    def contains(self, name: str) -> bool:
        return name in self._bindings

    def names(self) -> list[str]:
        return sorted(self._bindings)

    def clear(self) -> None:
        self._bindings.clear()

    # -- Pomocnicze -----------------------------------------------------------

    def snapshot(self) -> dict[str, ExprNode]:
        """Płytka kopia powiązań (węzły są niemutowalne)."""
        return dict(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"DictVariableStore({self.names()!r})"
