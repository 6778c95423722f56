"""In-memory history of committed lines with up/down recall."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class History:
    """Committed lines, oldest first, with a recall position.

    The recall position ranges over ``[0, len]``; ``len`` means nothing is
    selected. Recall clamps at both ends and never wraps.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._position: int = 0

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def position(self) -> int:
        return self._position

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, line: str) -> bool:
        """Add *line* unless it is blank or already present (ignoring case).

        The recall position is reset either way. Returns ``True`` if the
        line was added.
        """
        added = False
        folded = line.casefold()
        if line.strip() and all(e.casefold() != folded for e in self._entries):
            self._entries.append(line)
            added = True
            logger.debug("Recorded history entry %r", line)
        self._position = len(self._entries)
        return added

    def previous(self) -> str:
        if not self._entries:
            return ""
        self._position = max(0, min(self._position - 1, len(self._entries) - 1))
        return self._entries[self._position]

    def next(self) -> str:
        if not self._entries:
            return ""
        self._position = min(self._position + 1, len(self._entries) - 1)
        return self._entries[self._position]

    def reset(self) -> None:
        """Deselect, so the next ``previous()`` returns the newest entry."""
        self._position = len(self._entries)
