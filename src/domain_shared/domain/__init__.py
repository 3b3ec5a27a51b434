"""Domain layer: identity contracts, value objects, events, aggregates.

This package defines the building blocks that business applications
compose their models from.  Everything exposed here is immutable except
an aggregate's own pending-event list.
"""

from domain_shared.domain.aggregate import AggregateRoot, dispatch_domain_events
from domain_shared.domain.events import (
    BaseDomainEvent,
    DomainEvent,
    DomainEventPublisher,
)
from domain_shared.domain.model import Entity, EntityId, Identity, ValueObject

__all__ = [
    "AggregateRoot",
    "BaseDomainEvent",
    "DomainEvent",
    "DomainEventPublisher",
    "Entity",
    "EntityId",
    "Identity",
    "ValueObject",
    "dispatch_domain_events",
]
