"""Shared domain-modeling primitives: entities, value objects, aggregate
roots with domain events, and pagination."""

from domain_shared.core.collections import ReadOnlySequence
from domain_shared.core.errors import (
    ConfigError,
    DomainSharedError,
    UnsupportedMutationError,
)
from domain_shared.domain import (
    AggregateRoot,
    BaseDomainEvent,
    DomainEvent,
    DomainEventPublisher,
    Entity,
    EntityId,
    Identity,
    ValueObject,
    dispatch_domain_events,
)
from domain_shared.pagination import Page, PageRequest

__all__ = [
    "AggregateRoot",
    "BaseDomainEvent",
    "ConfigError",
    "DomainEvent",
    "DomainEventPublisher",
    "DomainSharedError",
    "Entity",
    "EntityId",
    "Identity",
    "Page",
    "PageRequest",
    "ReadOnlySequence",
    "UnsupportedMutationError",
    "ValueObject",
    "dispatch_domain_events",
]

__version__ = "0.1.0"
