"""Conversation state: the pending upload and the busy flag.

Owned by the orchestrator. Nothing here awaits, so every method runs as a
single step relative to other tasks on the event loop.
"""

from dataclasses import dataclass
from enum import Enum

from .models import TriggerState, UploadedAsset


class LifecyclePhase(str, Enum):
    """Phases of one submit -> respond cycle."""

    IDLE = "idle"
    ENCODING = "encoding"
    AWAITING_RESPONSE = "awaiting_response"
    RENDERING = "rendering"
    FAILING = "failing"


@dataclass
class ConversationState:
    """Pending asset, busy flag and current lifecycle phase."""

    pending: UploadedAsset | None = None
    busy: bool = False
    phase: LifecyclePhase = LifecyclePhase.IDLE

    def select(self, asset: UploadedAsset) -> bool:
        """Replace the pending asset. Refused while a request is in flight."""
        if self.busy:
            return False
        self.pending = asset
        return True

    def begin(self) -> bool:
        """Check-and-set the busy flag. Returns False if already busy."""
        if self.busy:
            return False
        self.busy = True
        self.phase = LifecyclePhase.ENCODING
        return True

    def advance(self, phase: LifecyclePhase) -> None:
        self.phase = phase

    def finish(self) -> None:
        """Return to idle and drop the pending asset."""
        self.busy = False
        self.pending = None
        self.phase = LifecyclePhase.IDLE

    @property
    def triggers(self) -> TriggerState:
        return TriggerState(
            loading=self.busy,
            upload_enabled=not self.busy,
            submit_enabled=not self.busy and self.pending is not None,
        )
