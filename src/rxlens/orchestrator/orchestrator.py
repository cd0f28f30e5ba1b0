"""Request orchestration.

Hides the request lifecycle: Idle -> Encoding -> AwaitingResponse ->
{Rendering | Failing} -> Idle. Every lifecycle ends back at Idle and
every failure ends in the same fixed chat message.
"""

import logging
from collections.abc import Callable

from ..conversation import ChatEntry, ConversationState, LifecyclePhase, UploadedAsset
from ..display import BusyIndicator, DisplaySink
from ..errors import RxLensError
from ..formatter import render
from ..prompts import get_instruction
from ..transport import Transport, extract_reply_text
from .payload import build_payload

logger = logging.getLogger(__name__)


class RequestOrchestrator:
    """Drives one prescription conversion at a time.

    Outcomes are delivered to the display sink and busy indicator, never
    returned. At most one lifecycle is active: submissions arriving while
    busy are dropped.
    """

    def __init__(
        self,
        transport: Transport,
        display: DisplaySink,
        indicator: BusyIndicator | None = None,
        state: ConversationState | None = None,
        instruction: str | None = None,
        formatter: Callable[[str], str] = render,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            transport: Inference API call
            display: Receives chat entries in order
            indicator: Receives trigger transitions (optional)
            state: Conversation state to drive (a fresh one by default)
            instruction: Instruction text (the packaged prompt by default)
            formatter: Reply-to-markup function
        """
        self.transport = transport
        self.display = display
        self.indicator = indicator
        self.state = state or ConversationState()
        self.instruction = instruction if instruction is not None else get_instruction()
        self._format = formatter

    @property
    def busy(self) -> bool:
        return self.state.busy

    def select(self, asset: UploadedAsset | None) -> bool:
        """Make an asset the pending upload, replacing any previous one.

        None (a cancelled picker) keeps the current selection.

        Returns:
            True if the asset is now pending
        """
        if asset is None:
            return False
        if not self.state.select(asset):
            logger.warning("Ignoring selection of %s while a request is in flight", asset.name)
            return False
        logger.debug("Selected %s (%s, %d bytes)", asset.name, asset.mime_type, asset.size)
        self._notify()
        return True

    async def submit_pending(self) -> None:
        """Submit the pending asset, if there is one."""
        asset = self.state.pending
        if asset is None:
            logger.debug("Submit requested with nothing selected")
            return
        await self.submit(asset)

    async def submit(self, asset: UploadedAsset) -> None:
        """Run one conversion lifecycle for an asset.

        A no-op while another lifecycle is in flight. Errors are logged
        and shown as the fixed failure message; none propagate.

        Args:
            asset: The prescription image to analyze

        Raises:
            ValueError: If asset is None
        """
        if asset is None:
            raise ValueError("submit() requires an asset")

        # Check-and-set before the first await keeps this atomic on the loop
        if self.state.busy:
            logger.warning("Dropping submission of %s: a request is already in flight", asset.name)
            return

        self.display.append_entry(ChatEntry.from_user(asset))
        self.state.begin()
        self._notify()
        logger.debug("Lifecycle started for %s", asset.name)

        # Cancellation skips the reply entry but still ends at Idle
        try:
            try:
                reply = await self._request_reply(asset)
                self._transition(LifecyclePhase.RENDERING)
                entry = ChatEntry.from_assistant(self._format(reply))
            except RxLensError as e:
                self._transition(LifecyclePhase.FAILING)
                logger.error("Analysis of %s failed: %s", asset.name, e)
                entry = ChatEntry.failure()
            except Exception:
                self._transition(LifecyclePhase.FAILING)
                logger.exception("Unexpected error while analyzing %s", asset.name)
                entry = ChatEntry.failure()

            self.display.append_entry(entry)
        finally:
            self.state.finish()
            self._notify()
            logger.debug("Lifecycle finished for %s", asset.name)

    async def _request_reply(self, asset: UploadedAsset) -> str:
        """Encode, send and unwrap. Raises RxLensError subclasses on failure."""
        payload = build_payload(asset, self.instruction)
        self._transition(LifecyclePhase.AWAITING_RESPONSE)
        envelope = await self.transport.send(payload)
        return extract_reply_text(envelope)

    def _transition(self, phase: LifecyclePhase) -> None:
        logger.debug("%s -> %s", self.state.phase.value, phase.value)
        self.state.advance(phase)

    def _notify(self) -> None:
        if self.indicator is not None:
            self.indicator.update(self.state.triggers)
