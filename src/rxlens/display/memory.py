"""In-memory collaborators.

Session-only: nothing is persisted. Suitable for embedding the
orchestrator in another UI and for testing.
"""

from collections.abc import Iterator

from ..conversation import ChatEntry, TriggerState
from .base import BusyIndicator, DisplaySink


class ConversationLog(DisplaySink):
    """Append-only conversation log."""

    def __init__(self) -> None:
        self._entries: list[ChatEntry] = []

    def append_entry(self, entry: ChatEntry) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> tuple[ChatEntry, ...]:
        """Snapshot of the log in append order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ChatEntry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> ChatEntry:
        return self._entries[index]


class RecordingIndicator(BusyIndicator):
    """Keeps every trigger transition it receives."""

    def __init__(self) -> None:
        self.history: list[TriggerState] = []

    def update(self, triggers: TriggerState) -> None:
        self.history.append(triggers)

    @property
    def current(self) -> TriggerState | None:
        return self.history[-1] if self.history else None
