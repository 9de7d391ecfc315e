"""Testes do normalizer Slack (payload bruto -> evento tipado)."""

from __future__ import annotations

import pytest

from api.normalizers.slack import SlackEventNormalizer, normalize, parse_action_element
from events.errors import UnrecognizedPayloadShapeError
from events.types import Action, BackgroundEvent, ButtonAction, Command, ViewSubmission


class TestBackgroundEvent:
    def test_app_home_opened_uses_event_ts(self) -> None:
        raw = {
            "type": "event_callback",
            "team_id": "T1",
            "event": {
                "type": "app_home_opened",
                "user": "U1",
                "channel": "D1",
                "tab": "home",
                "event_ts": "1700000000.000100",
            },
        }

        event = normalize(raw)

        assert event == BackgroundEvent(
            type="app_home_opened",
            user_id="U1",
            channel_id="D1",
            ts="1700000000.000100",
            tab="home",
        )

    def test_ts_preferred_over_event_ts(self) -> None:
        event = normalize(
            {"event": {"type": "message", "text": "oi", "ts": "1.0", "event_ts": "2.0"}}
        )

        assert event.ts == "1.0"
        assert event.text == "oi"

    def test_event_field_wins_over_command(self) -> None:
        event = normalize({"event": {"type": "message"}, "command": "/deploy"})

        assert isinstance(event, BackgroundEvent)


class TestCommand:
    def test_slash_command_defaults_text(self) -> None:
        raw = {
            "command": "/deploy",
            "user_id": "U1",
            "user_name": "ana",
            "channel_id": "C1",
            "channel_name": "ops",
            "team_id": "T1",
            "team_domain": "acme",
            "response_url": "https://hooks.slack.com/commands/1",
            "trigger_id": "trig",
        }

        event = normalize(raw)

        assert isinstance(event, Command)
        assert event.text == ""
        assert event.user_name == "ana"
        assert event.identifier == "/deploy"

    def test_command_with_text(self) -> None:
        assert normalize({"command": "/deploy", "text": "staging"}).text == "staging"


class TestAction:
    def test_button_action(self) -> None:
        raw = {
            "type": "block_actions",
            "user": {"id": "U1"},
            "channel": {"id": "C1"},
            "trigger_id": "trig",
            "container": {"type": "message"},
            "actions": [
                {
                    "type": "button",
                    "action_id": "approve",
                    "block_id": "b1",
                    "action_ts": "1.2",
                    "value": "42",
                    "text": {"type": "plain_text", "text": "Aprovar"},
                },
                {"type": "button", "action_id": "ignored"},
            ],
        }

        event = normalize(raw)

        assert isinstance(event, Action)
        assert event.user_id == "U1"
        assert event.channel_id == "C1"
        assert event.action == ButtonAction(
            type="button",
            action_id="approve",
            block_id="b1",
            action_ts="1.2",
            value="42",
            text={"type": "plain_text", "text": "Aprovar"},
        )

    def test_unsupported_element_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            event = normalize(
                {
                    "type": "block_actions",
                    "user": {"id": "U1"},
                    "actions": [{"type": "static_select", "action_id": "pick"}],
                }
            )

        assert event.action is None
        assert event.channel_id is None
        assert "action_element_unsupported" in caplog.text

    def test_missing_actions(self) -> None:
        assert normalize({"type": "block_actions", "user": {"id": "U1"}}).action is None
        assert parse_action_element(None) is None


class TestViewSubmission:
    def test_flattens_every_supported_field_type(self) -> None:
        raw = {
            "type": "view_submission",
            "team": {"id": "T1"},
            "user": {"id": "U1"},
            "trigger_id": "trig",
            "response_urls": [{"response_url": "https://hooks.slack.com/x"}],
            "view": {
                "callback_id": "onboarding",
                "state": {
                    "values": {
                        "b1": {
                            "name": {"type": "plain_text_input", "value": "Ana"},
                            "owner": {"type": "users_select", "selected_user": "U2"},
                        },
                        "b2": {
                            "room": {
                                "type": "conversations_select",
                                "selected_conversation": "C9",
                            },
                            "size": {
                                "type": "static_select",
                                "selected_option": {"value": "large"},
                            },
                            "tier": {
                                "type": "radio_buttons",
                                "selected_option": {"value": "gold"},
                            },
                        },
                        "b3": {
                            "team": {"type": "multi_users_select", "selected_users": ["U3", "U4"]},
                            "rooms": {
                                "type": "multi_conversations_select",
                                "selected_conversations": ["C1"],
                            },
                            "tags": {
                                "type": "multi_static_select",
                                "selected_options": [{"value": "a"}, {"value": "b"}],
                            },
                            "flags": {
                                "type": "checkboxes",
                                "selected_options": [{"value": "terms"}],
                            },
                            "day": {"type": "datepicker", "selected_date": "2026-01-31"},
                            "hour": {"type": "timepicker", "selected_time": "09:30"},
                        },
                    }
                },
            },
        }

        event = normalize(raw)

        assert isinstance(event, ViewSubmission)
        assert event.team_id == "T1"
        assert event.callback_id == "onboarding"
        assert event.channel_id is None
        assert event.response_urls == ({"response_url": "https://hooks.slack.com/x"},)
        assert event.form == {
            "name": "Ana",
            "owner": "U2",
            "room": "C9",
            "size": "large",
            "tier": "gold",
            "team": ["U3", "U4"],
            "rooms": ["C1"],
            "tags": ["a", "b"],
            "flags": ["terms"],
            "day": "2026-01-31",
            "hour": "09:30",
        }

    def test_empty_selection_yields_none(self) -> None:
        raw = {
            "type": "view_submission",
            "view": {
                "callback_id": "cb",
                "state": {
                    "values": {
                        "b1": {
                            "size": {"type": "static_select", "selected_option": None},
                            "note": {"type": "plain_text_input", "value": None},
                        }
                    }
                },
            },
        }

        assert normalize(raw).form == {"size": None, "note": None}

    def test_unknown_field_type_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        raw = {
            "type": "view_submission",
            "view": {
                "callback_id": "cb",
                "state": {
                    "values": {
                        "b1": {
                            "rich": {"type": "rich_text_input", "rich_text_value": {}},
                            "name": {"type": "plain_text_input", "value": "Ana"},
                        }
                    }
                },
            },
        }

        with caplog.at_level("DEBUG"):
            event = normalize(raw)

        assert event.form == {"name": "Ana"}
        assert "form_field_type_unsupported" in caplog.text


class TestUnrecognized:
    @pytest.mark.parametrize(
        "raw",
        [{}, {"type": "message_action"}, {"type": "shortcut", "callback_id": "x"}],
    )
    def test_unknown_shapes_raise(self, raw: dict) -> None:
        with pytest.raises(UnrecognizedPayloadShapeError) as exc_info:
            normalize(raw)

        assert exc_info.value.keys == sorted(raw)

    def test_non_dict_raises(self) -> None:
        with pytest.raises(UnrecognizedPayloadShapeError):
            normalize(["event"])  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "raw",
        [
            {"type": "block_actions", "actions": {"type": "button"}},
            {"type": "block_actions", "actions": "approve"},
            {"type": "view_submission", "view": {"state": ["values"]}},
            {"type": "view_submission", "view": {"state": {"values": "x"}}},
            {"type": "view_submission", "view": {}, "response_urls": 5},
        ],
    )
    def test_malformed_structural_fields_raise(self, raw: dict) -> None:
        with pytest.raises(UnrecognizedPayloadShapeError) as exc_info:
            normalize(raw)

        assert exc_info.value.keys == sorted(raw)

    def test_normalizer_adapter(self) -> None:
        assert isinstance(SlackEventNormalizer().normalize({"command": "/x"}), Command)
