"""
Error types shared across SlabLedger layers.
"""

from typing import Dict


class RecordValidationError(ValueError):
    """Raised when raw card input cannot become a record. Nothing is stored."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Invalid card input - {details}")


class StorageError(RuntimeError):
    """Raised when a storage slot cannot be read or written."""


class InvalidThemeError(ValueError):
    """Raised for a theme other than the supported ones."""
