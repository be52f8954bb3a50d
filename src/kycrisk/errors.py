"""
Exceptions raised by the risk classification engine and its collaborators.
"""

from typing import Any, Optional


class KycRiskError(Exception):
    """Base class for kycrisk errors."""

    pass


class InvalidInputError(KycRiskError):
    """Raised when an assessment subject is malformed or of unknown type."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class LookupFailureError(KycRiskError):
    """Raised when a reference catalog could not be read.

    Distinct from a clean "not found", which is not an error.
    """

    def __init__(self, catalog: str, key: str, message: Optional[str] = None):
        super().__init__(message or f"Reference lookup failed: {catalog}[{key!r}]")
        self.catalog = catalog
        self.key = key
