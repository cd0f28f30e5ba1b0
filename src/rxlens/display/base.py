"""Interfaces the orchestrator drives.

The orchestrator never touches a concrete display: it appends entries to a
sink and reports trigger changes to an indicator.
"""

from abc import ABC, abstractmethod

from ..conversation import ChatEntry, TriggerState


class DisplaySink(ABC):
    """Receives chat entries in the order they are produced."""

    @abstractmethod
    def append_entry(self, entry: ChatEntry) -> None:
        """Append an entry to the conversation display."""


class CompositeDisplay(DisplaySink):
    """Forwards every entry to several sinks, in order."""

    def __init__(self, *sinks: DisplaySink) -> None:
        self.sinks = sinks

    def append_entry(self, entry: ChatEntry) -> None:
        for sink in self.sinks:
            sink.append_entry(entry)


class BusyIndicator(ABC):
    """Receives loading and trigger-enablement transitions."""

    @abstractmethod
    def update(self, triggers: TriggerState) -> None:
        """Reflect the new trigger state."""
