"""Application services for persisted user preferences.

Two keys are used: the theme name and the assistant's conversation log.
Neither is needed by the catalog or order pipeline.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.repository.preference_repository import PreferenceRepository

logger = logging.getLogger(__name__)

THEME_KEY = "hhmi-theme"
CONVERSATION_KEY = "hhmi-ai-conversation"
DEFAULT_THEME = "default"
MAX_CONVERSATION_ENTRIES = 20


class ThemePreferences:

    def __init__(self, prefs: PreferenceRepository) -> None:
        self._prefs = prefs

    def current(self) -> str:
        return self._prefs.get(THEME_KEY) or DEFAULT_THEME

    def change(self, theme_name: str) -> str:
        theme_name = (theme_name or "").strip()
        if not theme_name:
            raise ValidationError("Theme name is required")
        self._prefs.set(THEME_KEY, theme_name)
        logger.info("Theme changed to: %s", theme_name)
        return theme_name


@dataclass(frozen=True)
class ConversationEntry:
    type: str  # "user" | "bot"
    content: str
    timestamp: str


class ConversationLog:
    """Bounded log of chat messages, newest last."""

    def __init__(
        self,
        prefs: PreferenceRepository,
        max_entries: int = MAX_CONVERSATION_ENTRIES,
    ) -> None:
        self._prefs = prefs
        self._max_entries = max_entries

    def entries(self) -> list[ConversationEntry]:
        raw = self._prefs.get(CONVERSATION_KEY)
        if not raw:
            return []
        try:
            return [ConversationEntry(**item) for item in json.loads(raw)]
        except (ValueError, TypeError) as exc:
            # A corrupt log only costs the chat history.
            logger.warning("Could not load conversation history: %s", exc)
            return []

    def append(
        self,
        sender: str,
        content: str,
        now: datetime | None = None,
    ) -> list[ConversationEntry]:
        if sender not in ("user", "bot"):
            raise ValidationError(f"Unknown message sender: {sender!r}")
        now = now or datetime.now(timezone.utc)
        entries = self.entries()
        entries.append(ConversationEntry(sender, content, now.isoformat()))
        entries = entries[-self._max_entries:]
        self._prefs.set(
            CONVERSATION_KEY, json.dumps([asdict(e) for e in entries])
        )
        return entries

    def clear(self) -> None:
        self._prefs.remove(CONVERSATION_KEY)
        logger.info("Conversation history cleared")
