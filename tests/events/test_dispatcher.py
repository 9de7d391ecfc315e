"""Testes do Dispatcher (modos sync e async)."""

from __future__ import annotations

import asyncio
import time

import pytest

from app.services.task_supervisor import InlineExecutor, TaskSupervisor
from events.dispatcher import Dispatcher, DispatchMode, dispatch_mode_for
from events.errors import MultipleRespondersError, NoHandlerRespondedError
from events.handlers import EventHandler, ack
from events.registry import SlackApp
from events.types import (
    IGNORE,
    OK,
    Action,
    BackgroundEvent,
    ButtonAction,
    Command,
    Continue,
    ExecutionContext,
    Fail,
    Halt,
    Respond,
    ViewSubmission,
)
from fsm import DispatchStage, create_lifecycle


def _context() -> ExecutionContext:
    return ExecutionContext(team_id="T1", bot_token="xoxb-1", user_id="U1", channel_id="C1")


def _command(command: str = "/deploy") -> Command:
    return Command(command=command, user_id="U1", channel_id="C1", team_id="T1")


class IgnoreHandler(EventHandler):
    def __init__(self) -> None:
        self.calls = 0

    def handle_sync(self, event, context):
        self.calls += 1
        return IGNORE


class RespondHandler(EventHandler):
    def __init__(self, text: str) -> None:
        self.text = text
        self.calls = 0

    async def handle_sync(self, event, context):
        self.calls += 1
        return ack(self.text)


class RaisingHandler(EventHandler):
    def handle_sync(self, event, context):
        raise RuntimeError("boom")

    async def handle_async(self, event, context):
        raise RuntimeError("boom")


class RecordingAsyncHandler(EventHandler):
    def __init__(self, name: str, log: list[str]) -> None:
        self.name = name
        self.log = log

    async def handle_async(self, event, context):
        self.log.append(self.name)
        return OK


def _dispatcher(app: SlackApp, executor=None) -> Dispatcher:
    return Dispatcher(app, executor or InlineExecutor())


class TestDispatchMode:
    def test_background_events_are_async(self) -> None:
        assert dispatch_mode_for(BackgroundEvent(type="message")) is DispatchMode.ASYNC

    @pytest.mark.parametrize(
        "event",
        [
            Command(command="/x"),
            Action(type="block_actions", user_id="U1"),
            ViewSubmission(
                type="view_submission", user_id="U1", team_id="T1", callback_id="cb", view={}
            ),
        ],
    )
    def test_interactive_events_are_sync(self, event) -> None:
        assert dispatch_mode_for(event) is DispatchMode.SYNC


class TestSyncDispatch:
    @pytest.mark.asyncio
    async def test_first_responder_after_ignore_wins(self) -> None:
        app = SlackApp(handlers=[IgnoreHandler(), RespondHandler("A")])

        result = await _dispatcher(app).dispatch_sync(_command(), _context())

        assert result == Respond({"text": "A"})

    @pytest.mark.asyncio
    async def test_two_responders_raise(self) -> None:
        app = SlackApp(handlers=[RespondHandler("A"), RespondHandler("B")])

        with pytest.raises(MultipleRespondersError) as exc_info:
            await _dispatcher(app).dispatch_sync(_command("/deploy"), _context())

        assert exc_info.value.identifier == "/deploy"
        assert exc_info.value.handlers == ["RespondHandler", "RespondHandler"]

    @pytest.mark.asyncio
    async def test_no_responder_raises_with_identifier(self) -> None:
        app = SlackApp(handlers=[IgnoreHandler()])
        event = Action(
            type="block_actions",
            user_id="U1",
            action=ButtonAction(type="button", action_id="approve"),
        )

        with pytest.raises(NoHandlerRespondedError, match="approve"):
            await _dispatcher(app).dispatch_sync(event, _context())

    @pytest.mark.asyncio
    async def test_halting_middleware_skips_handlers(self) -> None:
        handler = RespondHandler("A")
        app = SlackApp(middleware=[lambda ctx, event: Halt("blocked")], handlers=[handler])

        result = await _dispatcher(app).dispatch_sync(_command(), _context())

        assert result is OK
        assert handler.calls == 0

    @pytest.mark.asyncio
    async def test_raising_handler_is_isolated(self, caplog: pytest.LogCaptureFixture) -> None:
        app = SlackApp(handlers=[RaisingHandler(), RespondHandler("A")])

        with caplog.at_level("ERROR"):
            result = await _dispatcher(app).dispatch_sync(_command(), _context())

        assert result == Respond({"text": "A"})
        assert "handler_failed" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_capability_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        class AsyncOnly(EventHandler):
            async def handle_async(self, event, context):
                return OK

        app = SlackApp(handlers=[AsyncOnly(), object(), RespondHandler("A")])

        with caplog.at_level("DEBUG"):
            result = await _dispatcher(app).dispatch_sync(_command(), _context())

        assert result == Respond({"text": "A"})
        assert caplog.text.count("handler_capability_missing") == 2

    @pytest.mark.asyncio
    async def test_fail_stops_chain(self) -> None:
        class Failing(EventHandler):
            def handle_sync(self, event, context):
                return Fail("quota_exceeded")

        later = RespondHandler("A")
        app = SlackApp(handlers=[Failing(), later])

        result = await _dispatcher(app).dispatch_sync(_command(), _context())

        assert result == Fail("quota_exceeded")
        assert later.calls == 0

    @pytest.mark.asyncio
    async def test_empty_ack_counts_as_response(self) -> None:
        class Acker(EventHandler):
            def handle_sync(self, event, context):
                return ack()

        app = SlackApp(handlers=[Acker()])

        result = await _dispatcher(app).dispatch_sync(_command(), _context())

        assert isinstance(result, Respond)
        assert result.is_empty

    @pytest.mark.asyncio
    async def test_handlers_receive_middleware_context(self) -> None:
        seen: dict[str, object] = {}

        class Reader(EventHandler):
            def handle_sync(self, event, context):
                seen["org"] = context.assigns.get("org")
                return ack()

        app = SlackApp(
            middleware=[lambda ctx, event: Continue(ctx.assign("org", "acme"))],
            handlers=[Reader()],
        )

        await _dispatcher(app).dispatch_sync(_command(), _context())

        assert seen["org"] == "acme"

    @pytest.mark.asyncio
    async def test_lifecycle_advances_through_running_stages(self) -> None:
        lifecycle = create_lifecycle("cid")
        lifecycle.advance(DispatchStage.NORMALIZING, reason="authenticated")
        lifecycle.advance(DispatchStage.CONTEXT_BUILDING, reason="normalized")
        app = SlackApp(handlers=[RespondHandler("A")])

        await _dispatcher(app).dispatch_sync(_command(), _context(), lifecycle=lifecycle)

        assert lifecycle.current_stage is DispatchStage.HANDLER_RUNNING

    @pytest.mark.asyncio
    async def test_blocking_sync_handler_runs_off_the_event_loop(self) -> None:
        class BlockingHandler(EventHandler):
            def handle_sync(self, event, context):
                time.sleep(0.3)
                return ack("done")

        ticks: list[float] = []

        async def ticker() -> None:
            while True:
                ticks.append(time.monotonic())
                await asyncio.sleep(0.02)

        app = SlackApp(handlers=[BlockingHandler()])
        task = asyncio.create_task(ticker())
        await asyncio.sleep(0)
        try:
            result = await _dispatcher(app).dispatch_sync(_command(), _context())
        finally:
            task.cancel()

        gaps = [later - earlier for earlier, later in zip(ticks, ticks[1:])]
        assert result == Respond({"text": "done"})
        assert len(ticks) >= 5
        assert max(gaps) < 0.2


class TestAsyncDispatch:
    @pytest.mark.asyncio
    async def test_returns_before_handlers_run(self) -> None:
        log: list[str] = []
        executor = InlineExecutor()
        app = SlackApp(handlers=[RecordingAsyncHandler("first", log)])

        result = await _dispatcher(app, executor).dispatch(
            BackgroundEvent(type="app_home_opened"), _context()
        )

        assert result is OK
        assert log == []
        assert executor.pending_count == 1

        await executor.drain()
        assert log == ["first"]

    @pytest.mark.asyncio
    async def test_raising_handler_does_not_block_siblings(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        log: list[str] = []
        executor = InlineExecutor()
        app = SlackApp(
            handlers=[
                RecordingAsyncHandler("a", log),
                RaisingHandler(),
                RecordingAsyncHandler("b", log),
            ]
        )

        with caplog.at_level("ERROR"):
            _dispatcher(app, executor).dispatch_async(BackgroundEvent(type="message"), _context())
            await executor.drain()

        assert log == ["a", "b"]
        assert executor.failures == []
        assert "handler_failed" in caplog.text

    @pytest.mark.asyncio
    async def test_halt_skips_async_handlers(self) -> None:
        log: list[str] = []
        executor = InlineExecutor()
        app = SlackApp(
            middleware=[lambda ctx, event: Halt("bot_message")],
            handlers=[RecordingAsyncHandler("a", log)],
        )

        _dispatcher(app, executor).dispatch_async(BackgroundEvent(type="message"), _context())
        await executor.drain()

        assert log == []

    @pytest.mark.asyncio
    async def test_caller_not_blocked_by_slow_handler(self) -> None:
        release = asyncio.Event()
        finished = asyncio.Event()

        class Slow(EventHandler):
            async def handle_async(self, event, context):
                await release.wait()
                finished.set()
                return OK

        supervisor = TaskSupervisor()
        app = SlackApp(handlers=[Slow()])

        _dispatcher(app, supervisor).dispatch_async(BackgroundEvent(type="message"), _context())

        assert not finished.is_set()
        assert supervisor.active_count == 1

        release.set()
        await asyncio.wait_for(finished.wait(), timeout=1.0)
        await supervisor.drain(timeout_seconds=1.0)

    @pytest.mark.asyncio
    async def test_raising_middleware_is_logged_by_executor(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        def broken(ctx, event):
            raise ValueError("broken middleware")

        executor = InlineExecutor()
        app = SlackApp(middleware=[broken])

        with caplog.at_level("ERROR"):
            _dispatcher(app, executor).dispatch_async(BackgroundEvent(type="message"), _context())
            await executor.drain()

        assert len(executor.failures) == 1
        assert "async_dispatch_task_failed" in caplog.text
