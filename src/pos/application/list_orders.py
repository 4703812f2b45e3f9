"""Application service: List Orders use case (query)."""

from __future__ import annotations

from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.model.order import OrderHistory


class ListOrdersHandler:

    def __init__(self, history: OrderHistory) -> None:
        self._history = history

    def handle(self) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._history.orders]
