"""
Testes do ciclo de vida de dispatch (fsm).

Cobre estágios, mapa de transições, DispatchLifecycle e tipos de transição.
"""

import logging
from datetime import datetime

import pytest

from fsm import (
    DEFAULT_INITIAL_STAGE,
    TERMINAL_STAGES,
    VALID_TRANSITIONS,
    DispatchLifecycle,
    DispatchStage,
    StageTransition,
    TransitionResult,
    create_lifecycle,
    is_terminal,
    is_transition_valid,
)

SYNC_PATH = (
    DispatchStage.NORMALIZING,
    DispatchStage.CONTEXT_BUILDING,
    DispatchStage.MIDDLEWARE_RUNNING,
    DispatchStage.HANDLER_RUNNING,
    DispatchStage.RESPONDED,
)

ACTIVE_STAGES = [stage for stage in DispatchStage if stage not in TERMINAL_STAGES]


def _lifecycle_at(stage: DispatchStage) -> DispatchLifecycle:
    lifecycle = create_lifecycle("cid")
    for step in SYNC_PATH:
        if lifecycle.current_stage is stage:
            break
        lifecycle.advance(step, reason="next")
    return lifecycle


class TestStagesAndRules:
    def test_terminal_stages(self) -> None:
        assert TERMINAL_STAGES == {DispatchStage.RESPONDED, DispatchStage.FAILED}
        assert is_terminal(DispatchStage.RESPONDED)
        assert not is_terminal(DispatchStage.HANDLER_RUNNING)
        assert DEFAULT_INITIAL_STAGE is DispatchStage.AUTHENTICATING

    def test_transition_map_covers_every_stage(self) -> None:
        assert set(VALID_TRANSITIONS) == set(DispatchStage)
        for stage in TERMINAL_STAGES:
            assert VALID_TRANSITIONS[stage] == frozenset()

    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            (DispatchStage.AUTHENTICATING, DispatchStage.NORMALIZING, True),
            (DispatchStage.CONTEXT_BUILDING, DispatchStage.RESPONDED, True),
            (DispatchStage.CONTEXT_BUILDING, DispatchStage.MIDDLEWARE_RUNNING, True),
            (DispatchStage.MIDDLEWARE_RUNNING, DispatchStage.RESPONDED, False),
            (DispatchStage.AUTHENTICATING, DispatchStage.HANDLER_RUNNING, False),
            (DispatchStage.RESPONDED, DispatchStage.FAILED, False),
            (DispatchStage.FAILED, DispatchStage.AUTHENTICATING, False),
        ],
    )
    def test_is_transition_valid(
        self, source: DispatchStage, target: DispatchStage, expected: bool
    ) -> None:
        assert is_transition_valid(source, target) is expected


class TestDispatchLifecycle:
    def test_sync_happy_path(self) -> None:
        lifecycle = create_lifecycle("cid-1")

        for stage in SYNC_PATH:
            assert lifecycle.advance(stage, reason="next").success is True

        assert lifecycle.is_terminal
        assert lifecycle.dispatch_id == "cid-1"
        summary = lifecycle.get_summary()
        assert summary["current_stage"] == "RESPONDED"
        assert summary["stages"] == [stage.name for stage in SYNC_PATH]

    def test_async_happy_path_skips_running_stages(self) -> None:
        lifecycle = create_lifecycle("cid-async")
        lifecycle.advance(DispatchStage.NORMALIZING, reason="authenticated")
        lifecycle.advance(DispatchStage.CONTEXT_BUILDING, reason="normalized")

        result = lifecycle.advance(DispatchStage.RESPONDED, reason="async_scheduled")

        assert result.success is True
        assert lifecycle.current_stage is DispatchStage.RESPONDED
        assert lifecycle.get_summary()["stages"] == [
            "NORMALIZING",
            "CONTEXT_BUILDING",
            "RESPONDED",
        ]

    @pytest.mark.parametrize("stage", ACTIVE_STAGES, ids=lambda s: s.name)
    def test_fail_from_every_active_stage(self, stage: DispatchStage) -> None:
        lifecycle = _lifecycle_at(stage)
        assert lifecycle.current_stage is stage

        result = lifecycle.fail("boom", {"stage": stage.name})

        assert result.success is True
        assert result.transition is not None
        assert result.transition.from_stage is stage
        assert lifecycle.current_stage is DispatchStage.FAILED
        assert lifecycle.is_terminal

    def test_illegal_transition_is_rejected_and_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        lifecycle = DispatchLifecycle(dispatch_id="cid-bad")

        with caplog.at_level(logging.WARNING, logger="fsm.manager.machine"):
            result = lifecycle.advance(DispatchStage.HANDLER_RUNNING, reason="skip")

        assert result.success is False
        assert "AUTHENTICATING" in (result.error_reason or "")
        assert lifecycle.current_stage is DispatchStage.AUTHENTICATING
        assert lifecycle.get_summary()["stages"] == []
        record = next(r for r in caplog.records if r.getMessage() == "dispatch_transition_rejected")
        assert record.dispatch_id == "cid-bad"
        assert record.from_stage == "AUTHENTICATING"
        assert record.to_stage == "HANDLER_RUNNING"

    @pytest.mark.parametrize("terminal", [DispatchStage.RESPONDED, DispatchStage.FAILED])
    def test_terminal_stage_rejects_everything(self, terminal: DispatchStage) -> None:
        lifecycle = DispatchLifecycle(initial_stage=terminal)

        assert lifecycle.fail("again").success is False
        assert lifecycle.advance(DispatchStage.NORMALIZING, reason="again").success is False
        assert lifecycle.current_stage is terminal

    def test_accepted_transition_is_logged_at_debug(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        lifecycle = create_lifecycle("cid-debug")

        with caplog.at_level(logging.DEBUG, logger="fsm.manager.machine"):
            lifecycle.advance(
                DispatchStage.NORMALIZING, reason="authenticated", metadata={"team_id": "T1"}
            )

        record = next(r for r in caplog.records if r.getMessage() == "dispatch_stage_changed")
        assert record.transition["from_stage"] == "AUTHENTICATING"
        assert record.transition["to_stage"] == "NORMALIZING"
        assert record.transition["metadata"] == {"team_id": "T1"}


class TestTransitionTypes:
    def test_stage_transition_requires_reason(self) -> None:
        with pytest.raises(ValueError):
            StageTransition(
                from_stage=DispatchStage.AUTHENTICATING,
                to_stage=DispatchStage.NORMALIZING,
                reason="  ",
            )

    def test_stage_transition_log_dict(self) -> None:
        transition = StageTransition(
            from_stage=DispatchStage.NORMALIZING,
            to_stage=DispatchStage.CONTEXT_BUILDING,
            reason="normalized",
        )

        data = transition.to_log_dict()

        assert data["reason"] == "normalized"
        assert isinstance(transition.timestamp, datetime)
        assert data["timestamp"] == transition.timestamp.isoformat()

    def test_transition_result_invariants(self) -> None:
        with pytest.raises(ValueError):
            TransitionResult(success=True)
        with pytest.raises(ValueError):
            TransitionResult(success=False)
