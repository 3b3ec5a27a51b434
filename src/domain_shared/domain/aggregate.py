"""Aggregate root: the entity that collects domain events.

Business methods call ``add_domain_event`` while they change state.  Once
the surrounding unit of work commits, an application service extracts the
pending events (``pull_domain_events`` or ``dispatch_domain_events``) and
hands them to a ``DomainEventPublisher``.

No internal locking: one aggregate instance is expected to be handled by
one request / transaction at a time.
"""

from __future__ import annotations

import logging
from typing import Generic

from domain_shared.core.collections import ReadOnlySequence
from domain_shared.domain.events import DomainEvent, DomainEventPublisher
from domain_shared.domain.model import IdT

logger = logging.getLogger(__name__)


class AggregateRoot(Generic[IdT]):
    """Entity that accumulates the domain events raised during its lifetime.

    Implements the ``Entity`` contract: equality and hash derive from
    ``id`` alone.  Subclasses call ``super().__init__(id)`` and add their
    own state::

        class Order(AggregateRoot[OrderId]):
            def __init__(self, id: OrderId, customer: str) -> None:
                super().__init__(id)
                self.customer = customer

            def place(self) -> None:
                self.add_domain_event(OrderPlaced(order_id=str(self.id)))
    """

    def __init__(self, id: IdT) -> None:
        self._id = id
        self._domain_events: list[DomainEvent] = []

    @property
    def id(self) -> IdT:
        return self._id

    # -- Domain events -----------------------------------------------------

    def add_domain_event(self, event: DomainEvent) -> None:
        """Record *event*.  Insertion order is kept; duplicates are allowed."""
        self._domain_events.append(event)

    @property
    def domain_events(self) -> ReadOnlySequence[DomainEvent]:
        """Pending events, oldest first, as a read-only snapshot."""
        return ReadOnlySequence(self._domain_events)

    @property
    def has_domain_events(self) -> bool:
        return bool(self._domain_events)

    def clear_domain_events(self) -> None:
        """Drop all pending events.  Clearing an empty list is a no-op."""
        self._domain_events.clear()

    def pull_domain_events(self) -> ReadOnlySequence[DomainEvent]:
        """Return the pending events and clear them in one step."""
        events = self.domain_events
        self.clear_domain_events()
        return events

    # -- Identity equality -------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, "
            f"pending_events={len(self._domain_events)})"
        )


def dispatch_domain_events(
    aggregate: AggregateRoot, publisher: DomainEventPublisher
) -> int:
    """Publish every pending event of *aggregate*, in order.

    Events are pulled (and therefore cleared) before the first publish;
    a publisher error propagates to the caller.

    Returns the number of events handed to the publisher.
    """
    events = aggregate.pull_domain_events()
    for event in events:
        logger.debug(
            "Publishing domain event %s id=%s from %r",
            type(event).__name__,
            event.event_id,
            aggregate,
        )
        publisher.publish(event)

    if events:
        logger.info(
            "Dispatched %d domain event(s) from %s id=%s",
            len(events),
            type(aggregate).__name__,
            aggregate.id,
        )
    return len(events)
