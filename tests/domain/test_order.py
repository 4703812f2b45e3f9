"""Unit tests for Order snapshots, the id sequence and OrderHistory."""

import dataclasses

import pytest

from pos.domain.exceptions import OrderHistoryFullError
from pos.domain.model.cart import Cart
from pos.domain.model.order import MAX_ORDERS, Order, OrderHistory, OrderIdSequence
from pos.domain.model.payment import PaymentMethod
from pos.domain.model.value_objects import Money
from tests.fakes import sample_products


def _cart() -> Cart:
    a, b, _ = sample_products()
    cart = Cart()
    cart.add_item(a, 2)
    cart.add_item(b, 1)
    return cart


def _order(order_id: int) -> Order:
    return Order.from_cart(order_id, Cart(), PaymentMethod.CASH)


class TestOrderFromCart:

    def test_snapshot_contents(self):
        order = Order.from_cart(7, _cart(), PaymentMethod.CARD)
        assert order.id == 7
        assert order.payment_method_label == "Credit / Debit Card"
        assert order.total == Money.of("25.50")
        assert order.item_count == 2
        first = order.line_items[0]
        assert (first.product_id, first.product_name, first.quantity.value) == (1, "A", 2)
        assert first.line_total == Money.of("20.00")

    def test_snapshot_is_isolated_from_cart(self):
        cart = _cart()
        order = Order.from_cart(1, cart, PaymentMethod.CASH)
        a, _, c = sample_products()
        cart.add_item(a, 5)
        cart.add_item(c, 1)
        cart.clear()
        assert order.item_count == 2
        assert order.line_items[0].quantity.value == 2
        assert order.total == Money.of("25.50")

    def test_empty_cart_gives_empty_order(self):
        order = _order(1)
        assert order.line_items == ()
        assert order.total == Money.of("0")

    def test_order_is_immutable(self):
        order = _order(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.total = Money.of("1")


class TestOrderIdSequence:

    def test_starts_at_one_and_increments(self):
        seq = OrderIdSequence()
        assert [seq.next_id() for _ in range(3)] == [1, 2, 3]

    def test_custom_start(self):
        assert OrderIdSequence(start=40).next_id() == 40


class TestOrderHistory:

    def test_record_and_list(self):
        history = OrderHistory()
        history.record(_order(1))
        history.record(_order(2))
        assert [o.id for o in history.orders] == [1, 2]
        assert len(history) == 2
        assert history.capacity == MAX_ORDERS

    def test_full_history_refuses_and_carries_order(self):
        history = OrderHistory(capacity=1)
        history.record(_order(1))
        extra = _order(2)
        with pytest.raises(OrderHistoryFullError, match="not recorded") as exc_info:
            history.record(extra)
        assert exc_info.value.order is extra
        assert [o.id for o in history.orders] == [1]
