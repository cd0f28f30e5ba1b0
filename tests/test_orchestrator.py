"""Unit tests for the orchestrator module."""
import asyncio
import base64
import logging

import pytest

from rxlens.config import ERROR_MESSAGE
from rxlens.conversation import EntryRole, LifecyclePhase, TriggerState, UploadedAsset
from rxlens.errors import EncodingError, MalformedReplyError
from rxlens.orchestrator import RequestOrchestrator, build_payload, encode_asset

from fakes import FakeTransport, make_envelope

IDLE_WITH_ASSET = TriggerState(loading=False, upload_enabled=True, submit_enabled=True)
BUSY = TriggerState(loading=True, upload_enabled=False, submit_enabled=False)
IDLE_EMPTY = TriggerState(loading=False, upload_enabled=True, submit_enabled=False)


class TestPayload:
    """Tests for asset encoding and payload construction."""

    def test_encode_asset(self, asset):
        assert base64.b64decode(encode_asset(asset)) == asset.content

    def test_encode_empty_asset_fails(self):
        empty = UploadedAsset(content=b"", mime_type="image/png", name="blank.png")

        with pytest.raises(EncodingError, match="no content"):
            encode_asset(empty)

    def test_build_payload(self, asset):
        payload = build_payload(asset, "Read this.")

        assert payload.instruction == "Read this."
        assert payload.mime_type == "image/jpeg"
        assert base64.b64decode(payload.data) == asset.content

    def test_build_payload_requires_mime_type(self, asset):
        untyped = asset.model_copy(update={"mime_type": ""})

        with pytest.raises(EncodingError, match="no MIME type"):
            build_payload(untyped, "Read this.")


class TestSubmitSuccess:
    """Tests for the success path of a lifecycle."""

    @pytest.mark.asyncio
    async def test_reply_is_rendered(self, make_orchestrator, log, asset):
        """Scenario: heading and item reply gives a user and an assistant entry."""
        transport = FakeTransport(make_envelope("### Aspirin\n* Pain relief\n"))
        orchestrator = make_orchestrator(transport)

        await orchestrator.submit(asset)

        assert len(log) == 2
        user, assistant = log.entries
        assert user.role == EntryRole.USER
        assert user.asset == asset
        assert assistant.role == EntryRole.ASSISTANT
        assert not assistant.is_error
        assert ">Aspirin</h3>" in assistant.content
        assert assistant.content.count("<li ") == 1
        assert ">Pain relief</li>" in assistant.content
        assert orchestrator.busy is False

    @pytest.mark.asyncio
    async def test_payload_sent_once(self, make_orchestrator, asset):
        transport = FakeTransport()
        orchestrator = make_orchestrator(transport)

        await orchestrator.submit(asset)

        assert len(transport.sent) == 1
        payload = transport.sent[0]
        assert payload.instruction == "Read this prescription."
        assert payload.mime_type == asset.mime_type
        assert base64.b64decode(payload.data) == asset.content

    def test_default_instruction_is_packaged_prompt(self, log):
        orchestrator = RequestOrchestrator(transport=FakeTransport(), display=log)

        assert "https://www.drugs.com/search.php?searchterm=MEDICATION_NAME" in orchestrator.instruction
        assert "**Disclaimer: This is not medical advice." in orchestrator.instruction

    @pytest.mark.asyncio
    async def test_custom_formatter(self, log, asset):
        orchestrator = RequestOrchestrator(
            transport=FakeTransport(make_envelope("raw")),
            display=log,
            instruction="x",
            formatter=str.upper,
        )

        await orchestrator.submit(asset)

        assert log[-1].content == "RAW"


class TestSubmitFailure:
    """Tests for the failure paths of a lifecycle."""

    @pytest.mark.asyncio
    async def test_server_error(self, make_orchestrator, log, asset, server_error, caplog):
        """Scenario: HTTP 500 gives the fixed message and clears state."""
        orchestrator = make_orchestrator(FakeTransport(error=server_error))
        orchestrator.select(asset)

        with caplog.at_level(logging.ERROR, logger="rxlens"):
            await orchestrator.submit_pending()

        assert len(log) == 2
        assert log[1].is_error
        assert ERROR_MESSAGE in log[1].content
        assert "500" not in log[1].content
        assert "HTTP 500" in caplog.text
        assert orchestrator.busy is False
        assert orchestrator.state.pending is None

    @pytest.mark.asyncio
    async def test_no_candidates(self, make_orchestrator, log, asset):
        """Scenario: a 200 envelope without candidates takes the error path."""
        orchestrator = make_orchestrator(FakeTransport({"candidates": []}))

        await orchestrator.submit(asset)

        assert len(log) == 2
        assert log[1].is_error
        assert orchestrator.busy is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("envelope", [
        {},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"inline_data": {}}]}}]},
        make_envelope(""),
    ])
    async def test_malformed_envelopes(self, make_orchestrator, log, asset, envelope):
        orchestrator = make_orchestrator(FakeTransport(envelope))

        await orchestrator.submit(asset)

        assert log[-1].is_error

    @pytest.mark.asyncio
    async def test_encoding_error_skips_transport(self, make_orchestrator, log, caplog):
        transport = FakeTransport()
        orchestrator = make_orchestrator(transport)
        empty = UploadedAsset(content=b"", mime_type="image/png", name="blank.png")

        with caplog.at_level(logging.ERROR, logger="rxlens"):
            await orchestrator.submit(empty)

        assert transport.sent == []
        assert len(log) == 2
        assert log[1].is_error
        assert "blank.png" in caplog.text

    @pytest.mark.asyncio
    async def test_unexpected_error_is_contained(self, make_orchestrator, log, asset, caplog):
        orchestrator = make_orchestrator(FakeTransport(error=RuntimeError("socket exploded")))

        with caplog.at_level(logging.ERROR, logger="rxlens"):
            await orchestrator.submit(asset)

        assert log[1].is_error
        assert "socket exploded" not in log[1].content
        assert "socket exploded" in caplog.text
        assert orchestrator.state.phase == LifecyclePhase.IDLE

    @pytest.mark.asyncio
    async def test_ready_for_next_submission_after_failure(self, make_orchestrator, log, asset, server_error):
        transport = FakeTransport(error=server_error)
        orchestrator = make_orchestrator(transport)

        await orchestrator.submit(asset)
        transport.error = None
        await orchestrator.submit(asset)

        assert len(transport.sent) == 2
        assert [entry.is_error for entry in log] == [False, True, False, False]

    @pytest.mark.asyncio
    async def test_none_asset_rejected(self, make_orchestrator):
        orchestrator = make_orchestrator(FakeTransport())

        with pytest.raises(ValueError):
            await orchestrator.submit(None)  # type: ignore[arg-type]

    def test_malformed_reply_is_a_library_error(self):
        from rxlens.errors import RxLensError

        assert issubclass(MalformedReplyError, RxLensError)


class TestSingleFlight:
    """Tests for the one-request-in-flight gate."""

    @pytest.mark.asyncio
    async def test_submit_while_busy_is_noop(self, make_orchestrator, log, asset):
        gate = asyncio.Event()
        transport = FakeTransport(gate=gate)
        orchestrator = make_orchestrator(transport)

        first = asyncio.create_task(orchestrator.submit(asset))
        await asyncio.sleep(0)
        assert orchestrator.busy is True
        length_while_busy = len(log)

        await orchestrator.submit(asset)

        assert len(log) == length_while_busy
        assert len(transport.sent) == 1

        gate.set()
        await first
        assert len(log) == 2
        assert orchestrator.busy is False

    @pytest.mark.asyncio
    async def test_rapid_double_submit(self, make_orchestrator, log, asset):
        """Scenario: two submissions in the same tick dispatch one request."""
        transport = FakeTransport()
        orchestrator = make_orchestrator(transport)

        await asyncio.gather(orchestrator.submit(asset), orchestrator.submit(asset))

        assert len(transport.sent) == 1
        assert len(log) == 2

    @pytest.mark.asyncio
    async def test_phase_while_in_flight(self, make_orchestrator, asset):
        gate = asyncio.Event()
        orchestrator = make_orchestrator(FakeTransport(gate=gate))

        task = asyncio.create_task(orchestrator.submit(asset))
        await asyncio.sleep(0)
        assert orchestrator.state.phase == LifecyclePhase.AWAITING_RESPONSE

        gate.set()
        await task
        assert orchestrator.state.phase == LifecyclePhase.IDLE

    @pytest.mark.asyncio
    async def test_cancelled_request_returns_to_idle(self, make_orchestrator, log, indicator, asset):
        orchestrator = make_orchestrator(FakeTransport(gate=asyncio.Event()))

        task = asyncio.create_task(orchestrator.submit(asset))
        await asyncio.sleep(0)
        assert orchestrator.busy is True

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert orchestrator.busy is False
        assert orchestrator.state.phase == LifecyclePhase.IDLE
        assert indicator.current == IDLE_EMPTY
        assert [entry.role for entry in log] == [EntryRole.USER]


class TestSelection:
    """Tests for asset selection and trigger transitions."""

    def test_select_enables_submit(self, make_orchestrator, indicator, asset):
        orchestrator = make_orchestrator(FakeTransport())

        assert orchestrator.select(asset) is True
        assert orchestrator.state.pending == asset
        assert indicator.current == IDLE_WITH_ASSET

    def test_select_replaces_previous(self, make_orchestrator, asset):
        orchestrator = make_orchestrator(FakeTransport())
        other = UploadedAsset(content=b"png", mime_type="image/png", name="other.png")

        orchestrator.select(asset)
        orchestrator.select(other)

        assert orchestrator.state.pending == other

    def test_cancelled_selection_keeps_current(self, make_orchestrator, indicator, asset):
        orchestrator = make_orchestrator(FakeTransport())
        orchestrator.select(asset)

        assert orchestrator.select(None) is False
        assert orchestrator.state.pending == asset
        assert len(indicator.history) == 1

    @pytest.mark.asyncio
    async def test_select_ignored_while_busy(self, make_orchestrator, asset):
        gate = asyncio.Event()
        orchestrator = make_orchestrator(FakeTransport(gate=gate))
        other = UploadedAsset(content=b"png", mime_type="image/png", name="other.png")

        task = asyncio.create_task(orchestrator.submit(asset))
        await asyncio.sleep(0)
        assert orchestrator.select(other) is False

        gate.set()
        await task
        assert orchestrator.state.pending is None

    @pytest.mark.asyncio
    async def test_trigger_transitions(self, make_orchestrator, indicator, asset):
        orchestrator = make_orchestrator(FakeTransport())

        orchestrator.select(asset)
        await orchestrator.submit_pending()

        assert indicator.history == [IDLE_WITH_ASSET, BUSY, IDLE_EMPTY]

    @pytest.mark.asyncio
    async def test_submit_pending_without_selection(self, make_orchestrator, log):
        transport = FakeTransport()
        orchestrator = make_orchestrator(transport)

        await orchestrator.submit_pending()

        assert len(log) == 0
        assert transport.sent == []
