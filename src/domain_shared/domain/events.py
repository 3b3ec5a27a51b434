"""Domain event and publisher contracts.

Design invariants
-----------------
1.  Every event is **immutable**; ``BaseDomainEvent`` is a frozen
    dataclass.
2.  ``event_id`` is a UUID4 generated at creation time and never reused.
3.  ``occurred_on`` is a timezone-aware UTC timestamp fixed at creation.

Publishing is delegated to an external ``DomainEventPublisher``; this
module only defines its shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, runtime_checkable

from domain_shared.core.ids import new_id as _uuid
from domain_shared.core.ids import utc_now as _now


@runtime_checkable
class DomainEvent(Protocol):
    """A fact that happened in the domain."""

    @property
    def event_id(self) -> str: ...

    @property
    def occurred_on(self) -> datetime: ...


@runtime_checkable
class DomainEventPublisher(Protocol):
    """Dispatches domain events once they leave their aggregate.

    Delivery guarantees are the implementation's concern.
    """

    def publish(self, event: DomainEvent) -> None: ...


@dataclass(frozen=True)
class BaseDomainEvent:
    """Immutable base for concrete domain events.

    Subclasses add their payload as further (defaulted) fields::

        @dataclass(frozen=True)
        class OrderPlaced(BaseDomainEvent):
            order_id: str = ""
    """

    event_id: str = field(default_factory=_uuid)
    occurred_on: datetime = field(default_factory=_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__
