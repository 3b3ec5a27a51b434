"""Shared fixtures for the domain-shared test suite."""

from __future__ import annotations

import pytest

from sample_domain import Order, OrderId, OrderPlaced, RecordingPublisher


@pytest.fixture
def order() -> Order:
    """Return a fresh order with no pending events."""
    return Order(OrderId("order-1"))


@pytest.fixture
def placed_event() -> OrderPlaced:
    return OrderPlaced(order_id="order-1", amount=100)


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def letters() -> list[str]:
    return ["a", "b", "c", "d", "e"]
