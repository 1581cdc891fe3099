import pytest

from order_desk.core.domain.model.errors import DuplicateKey, InvalidAmount, OrderNotFound
from order_desk.core.domain.model.order import CustomerName, LineItem, Order, OrderId


def _order(*amounts, order_id="A", customer="Alice"):
    return Order(
        order_id=OrderId(order_id),
        customer=CustomerName(customer),
        items=tuple(LineItem("p", a) for a in amounts),
    )


def test_total_of_no_items_is_zero():
    assert _order().total() == 0.0


def test_total_is_sum_of_item_amounts():
    order = _order(5, 10, 2.5)
    assert order.total() == pytest.approx(17.5)
    assert order.total() == sum(it.amount for it in order.items)


def test_total_includes_negative_amounts():
    assert _order(10, -4).total() == pytest.approx(6)


def test_with_customer_keeps_id_and_items():
    order = _order(3.5, 1)
    renamed = order.with_customer(CustomerName("Bob"))

    assert renamed.customer == CustomerName("Bob")
    assert renamed.order_id == order.order_id
    assert renamed.items is order.items
    assert order.customer == CustomerName("Alice")


def test_matches_keyword_on_id_or_customer():
    order = _order(order_id="X1", customer="Alice")
    assert order.matches_keyword("X")
    assert order.matches_keyword("lic")
    assert not order.matches_keyword("x")
    assert not order.matches_keyword("Bob")


def test_error_messages():
    assert str(DuplicateKey(message="order already exists", order_id="A")) == (
        "duplicate_key: A (order already exists)"
    )
    assert str(OrderNotFound(message="order does not exist", order_id="B")) == (
        "order_not_found: B (order does not exist)"
    )
    assert "must be >= 0" in str(InvalidAmount(message="must be >= 0", amount=-1.0))
