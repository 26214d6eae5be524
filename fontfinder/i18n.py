"""Message catalog used to build user-facing notification text."""

from __future__ import annotations

import re
from typing import Callable

Localize = Callable[..., str]

PLACEHOLDER_RE = re.compile(r"\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}")

ENGLISH_MESSAGES = {
    "notifications.invalidDirectory": "Invalid font directory: {error}",
    "notifications.invalidFilePickerTarget": (
        "The file browser returned a different target than the requested directory"
    ),
}


class MessageCatalog:
    """Key based message lookup with `{name}` placeholders."""

    def __init__(self, messages: dict[str, str]) -> None:
        self._messages = dict(messages)

    def format(self, key: str, params: dict[str, object] | None = None) -> str:
        """Return the message for key with placeholders filled from params.

        Unknown keys are returned unchanged. Placeholders without a matching
        param are left as written.
        """
        template = self._messages.get(key)
        if template is None:
            return key
        values = params or {}

        def _substitute(match: re.Match[str]) -> str:
            name = match.group("name")
            if name not in values:
                return match.group(0)
            return str(values[name])

        return PLACEHOLDER_RE.sub(_substitute, template)


DEFAULT_CATALOG = MessageCatalog(ENGLISH_MESSAGES)
