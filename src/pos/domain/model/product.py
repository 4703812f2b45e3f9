"""Product value: a catalog entry.

Products are owned by the catalog and referenced by cart lines. They never
change once built; catalog management is out of scope.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.value_objects import Money


@dataclass(frozen=True, eq=False)
class Product:
    """An immutable catalog entry, identified by its caller-assigned ``id``."""

    id: int
    name: str
    price: Money

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
