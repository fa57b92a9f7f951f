"""
test_pipeline.py

Tests for action dispatch and the response envelope.
"""

from unittest.mock import patch

import pytest

from petguard_gateway.envelope import build_envelope, error_envelope, handle_request
from petguard_gateway.errors import BackendCallFailure, UnknownAction
from petguard_gateway.llm.client_base import BackendResult
from petguard_gateway.pipeline import dispatch

PHOTO = "UEhPVE8="

PAYLOADS = {
    "analyze_health": {"symptoms": "sneezing", "bodyPart": "nose"},
    "generate_personality": {"imageBase64": PHOTO},
    "generate_cartoon": {"imageBase64": PHOTO, "style": "Cute"},
    "generate_collectible_card": {"imageBase64": PHOTO, "theme": "Daily", "species": "cat"},
}


class TestDispatch:
    @pytest.mark.parametrize("action", sorted(PAYLOADS))
    def test_each_action_runs_one_pipeline(self, action, client, settings):
        target = {
            "analyze_health": "petguard_gateway.actions.health.HealthAnalysisAction.run",
            "generate_personality": "petguard_gateway.actions.personality.PersonalityAction.run",
            "generate_cartoon": "petguard_gateway.actions.cartoon.CartoonAction.run",
            "generate_collectible_card": (
                "petguard_gateway.actions.collectible_card.CollectibleCardAction.run"
            ),
        }
        with patch(target[action], return_value="sentinel") as mock_run:
            result = dispatch(action, PAYLOADS[action], client=client, settings=settings)

        assert result == "sentinel"
        mock_run.assert_called_once()

    @pytest.mark.parametrize("action", ["delete_everything", "", "ANALYZE_HEALTH", None, 7])
    def test_unknown_action(self, action, client, settings):
        with pytest.raises(UnknownAction) as exc:
            dispatch(action, {}, client=client, settings=settings)

        assert exc.value.action == action
        assert str(action) in str(exc.value)
        assert client.calls == []


class TestEnvelopeBuilders:
    def test_success_shape(self):
        assert build_envelope({"a": 1}) == {"success": True, "data": {"a": 1}}

    def test_success_with_null_data(self):
        assert build_envelope(None) == {"success": True, "data": None}

    def test_error_shape(self):
        assert error_envelope("bad") == {"success": False, "error": "bad"}


class TestHandleRequest:
    @pytest.mark.parametrize("action", sorted(PAYLOADS))
    def test_all_actions_succeed_with_offline_backend(self, action, client, settings):
        status, envelope = handle_request(
            {"action": action, "payload": PAYLOADS[action]}, client=client, settings=settings
        )

        assert status == 200
        assert envelope["success"] is True
        assert "data" in envelope
        assert "error" not in envelope

    def test_unknown_action_is_error_envelope(self, client, settings):
        status, envelope = handle_request(
            {"action": "summon_dragon", "payload": {}}, client=client, settings=settings
        )

        assert status == 500
        assert envelope["success"] is False
        assert "summon_dragon" in envelope["error"]
        assert "data" not in envelope

    def test_validation_failure_is_error_envelope(self, client, settings):
        status, envelope = handle_request(
            {"action": "generate_personality", "payload": {}}, client=client, settings=settings
        )

        assert status == 500
        assert "imageBase64" in envelope["error"]

    def test_non_object_body(self, client, settings):
        status, envelope = handle_request(["not", "an", "object"], client=client, settings=settings)

        assert status == 500
        assert envelope == {"success": False, "error": "Request body must be a JSON object"}

    def test_health_backend_failure_surfaces(self, client, settings):
        client.scripted.append(BackendCallFailure("Gemini call failed: 503"))
        status, envelope = handle_request(
            {"action": "analyze_health", "payload": PAYLOADS["analyze_health"]},
            client=client,
            settings=settings,
        )

        assert status == 500
        assert envelope["error"] == "Gemini call failed: 503"

    def test_cartoon_backend_failure_is_success_with_null(self, client, settings):
        client.scripted.append(BackendCallFailure("no image model"))
        status, envelope = handle_request(
            {"action": "generate_cartoon", "payload": PAYLOADS["generate_cartoon"]},
            client=client,
            settings=settings,
        )

        assert status == 200
        assert envelope == {"success": True, "data": None}

    def test_unexpected_exception_is_caught(self, client, settings):
        client.scripted.append(RuntimeError("kaboom"))
        status, envelope = handle_request(
            {"action": "generate_personality", "payload": PAYLOADS["generate_personality"]},
            client=client,
            settings=settings,
        )

        assert status == 500
        assert envelope == {"success": False, "error": "kaboom"}

    def test_personality_end_to_end(self, client, settings):
        client.scripted.append(
            BackendResult(text='```json\n{"tags":["A","B","C"],"description":"d"}\n```')
        )

        status, envelope = handle_request(
            {"action": "generate_personality", "payload": PAYLOADS["generate_personality"]},
            client=client,
            settings=settings,
        )

        assert status == 200
        assert envelope == {"success": True, "data": {"tags": ["A", "B", "C"], "description": "d"}}
