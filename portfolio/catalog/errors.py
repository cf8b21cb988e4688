"""
Exceptions raised by the catalog engine.

Only the hard failures are modelled here. Deleting something that does
not exist or favouriting an artist twice are silent no-ops and never
raise.
"""


class CatalogError(Exception):
    """Base class for catalog failures."""


class MalformedPersistedData(CatalogError):
    """A persisted collection could not be parsed into its expected shape."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed data stored under {key!r}: {reason}")
        self.key = key
        self.reason = reason


class WorkValidationError(CatalogError, ValueError):
    """A work draft was rejected before being added to the catalog."""
