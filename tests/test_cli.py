"""
test_cli.py

Unit tests for the CLI functionality.
"""

import json
from unittest.mock import patch

import pytest

from petguard_gateway.cli import main


class TestCLI:
    def test_list_actions(self, capsys):
        with patch("sys.argv", ["petguard-gateway", "--list-actions"]):
            main()

        out = capsys.readouterr().out
        for name in (
            "analyze_health",
            "generate_cartoon",
            "generate_collectible_card",
            "generate_personality",
        ):
            assert f"- {name}" in out

    def test_no_command_prints_help(self, capsys):
        with patch("sys.argv", ["petguard-gateway"]):
            with pytest.raises(SystemExit) as exc:
                main()

        assert exc.value.code == 0
        assert "usage" in capsys.readouterr().out

    def test_invoke_with_mock_backend(self, tmp_path, capsys):
        payload_file = tmp_path / "payload.json"
        payload_file.write_text(json.dumps({"imageBase64": "QUJD", "style": "Pixel"}), encoding="utf-8")

        with patch(
            "sys.argv",
            ["petguard-gateway", "invoke", "--action", "generate_cartoon", "--payload", str(payload_file)],
        ):
            main()

        envelope = json.loads(capsys.readouterr().out)
        assert envelope == {"success": True, "data": "data:image/png;base64,QUJD"}

    def test_invoke_unknown_action_exits_nonzero(self, tmp_path, capsys):
        payload_file = tmp_path / "payload.json"
        payload_file.write_text("{}", encoding="utf-8")

        with patch(
            "sys.argv",
            ["petguard-gateway", "invoke", "--action", "teleport", "--payload", str(payload_file)],
        ):
            with pytest.raises(SystemExit) as exc:
                main()

        assert exc.value.code == 1
        envelope = json.loads(capsys.readouterr().out)
        assert envelope["success"] is False
        assert "teleport" in envelope["error"]

    @patch("uvicorn.run")
    def test_serve_runs_uvicorn(self, mock_run):
        with patch("sys.argv", ["petguard-gateway", "serve", "--port", "9001"]):
            main()

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args[0] == "petguard_gateway.api.main:build_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9001
