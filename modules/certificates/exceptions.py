"""Custom exceptions for the certificates module."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional


class CatalogError(RuntimeError):
    """Base exception for reference catalog loading."""


class CatalogNotFoundError(CatalogError):
    """Raised when the catalog file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Certificate catalog not found: {path}")
        self.path = path


class CatalogValidationError(CatalogError):
    """Raised when the catalog document does not match the expected schema."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class CatalogReferenceError(CatalogError):
    """Raised when a catalog entry points at an unknown id."""


__all__ = [
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogValidationError",
    "CatalogReferenceError",
]
