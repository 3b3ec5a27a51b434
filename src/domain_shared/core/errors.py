"""Custom exception hierarchy for the domain-shared library."""


class DomainSharedError(Exception):
    """Base exception for all domain-shared errors."""


# --- Configuration ---
class ConfigError(DomainSharedError):
    """Invalid or missing configuration."""


# --- Immutability ---
class UnsupportedMutationError(DomainSharedError, TypeError):
    """Attempted to mutate a read-only view (domain events, page content)."""
