"""
Port: VariableStore
Odpowiedzialność: mutowalne powiązania nazwa zmiennej → węzeł wyrażenia.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import ExprNode


@runtime_checkable
class VariableStore(Protocol):
    def get(self, name: str) -> Optional[ExprNode]:
        """Returns the node bound to `name`, or None if the name is unbound."""
        ...

    def set(self, name: str, node: ExprNode) -> None:
        """Binds `name` to `node`, replacing any previous binding."""
        ...

    def remove(self, name: str) -> None:
        """Removes the binding for `name`. Removing an unbound name is a no-op."""
        ...

    def contains(self, name: str) -> bool:
        ...

    def names(self) -> list[str]:
        """Bound names in sorted order (used by the command layer only)."""
        ...

    def clear(self) -> None:
        ...
