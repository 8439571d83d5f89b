"""
Preferences Repository - the theme slot, independent of the card records.
"""

import logging
from typing import Optional

from errors import InvalidThemeError, StorageError
from repositories.storage_backend import StorageBackend

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


class PreferencesRepository:
    """
    Repository for the persisted theme preference.
    The last chosen theme is kept for the session even if saving it fails.
    """

    def __init__(self, backend: StorageBackend, slot: str = "theme", default_theme: str = "light"):
        if default_theme not in THEMES:
            raise InvalidThemeError(f"Unsupported theme: {default_theme}")
        self.backend = backend
        self.slot = slot
        self.default_theme = default_theme
        self._session_theme: Optional[str] = None

    def get_theme(self) -> str:
        """Retrieve the current theme, falling back to the saved one, then the default."""
        if self._session_theme is not None:
            return self._session_theme
        try:
            theme = self.backend.get_item(self.slot)
        except StorageError as e:
            logger.warning(f"Using default theme: {e}")
            return self.default_theme
        if theme not in THEMES:
            return self.default_theme
        return theme

    def save_theme(self, theme: str) -> str:
        """
        Apply and save the theme preference.

        Raises:
            InvalidThemeError: if theme is not "light" or "dark"
            StorageError: if the slot cannot be written; the theme still
                applies for this session
        """
        if theme not in THEMES:
            raise InvalidThemeError(f"Unsupported theme: {theme}")
        self._session_theme = theme
        self.backend.set_item(self.slot, theme)
        return theme

    def toggle_theme(self) -> str:
        """Flip between light and dark and save the result."""
        new_theme = "light" if self.get_theme() == "dark" else "dark"
        return self.save_theme(new_theme)
