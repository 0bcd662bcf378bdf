"""Abstract key-value store for user preferences.

Values are free-form strings; nothing is validated against a schema.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PreferenceRepository(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never set."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Forget *key*. Removing an unknown key is not an error."""
