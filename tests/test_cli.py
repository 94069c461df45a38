# Area: Shared Tests
"""Tests for the command-line entry point."""

from unittest.mock import patch

from career_link import cli
from career_link.config import DEFAULT_CONFIG


def loaded_config(**overrides):
    config = dict(DEFAULT_CONFIG)
    config.update(overrides)
    return config


class TestParseArgs:
    """Tests for parse_args() and apply_args()."""

    def test_defaults(self):
        args = cli.parse_args([])
        assert args.demo is False
        assert args.strict is False
        assert args.config is None

    def test_flags_override_config(self):
        args = cli.parse_args([
            "--demo", "--strict", "--log-file", "out.log", "--model", "claude-x",
        ])
        config = cli.apply_args(args, loaded_config())
        assert config["demo_mode"] is True
        assert config["strict_gateway"] is True
        assert config["log_file"] == "out.log"
        assert config["model"] == "claude-x"

    def test_absent_flags_keep_config(self):
        config = cli.apply_args(cli.parse_args([]), loaded_config(demo_mode=True, model="m"))
        assert config["demo_mode"] is True
        assert config["model"] == "m"


class TestMain:
    """Tests for main()."""

    def test_missing_key_returns_error(self, capsys):
        with patch.object(cli, "load_config", return_value=loaded_config()), \
                patch.object(cli, "GameRunner") as mock_runner:
            assert cli.main([]) == 1
        assert "anthropic_api_key" in capsys.readouterr().err
        mock_runner.assert_not_called()

    def test_demo_runs_game(self):
        with patch.object(cli, "load_config", return_value=loaded_config()) as mock_load, \
                patch.object(cli, "GameRunner") as mock_runner, \
                patch.object(cli, "ConsoleUI"):
            assert cli.main(["--demo", "--config", "game.json"]) == 0

        mock_load.assert_called_once_with("game.json")
        config = mock_runner.call_args.kwargs["config"]
        assert config["demo_mode"] is True
        mock_runner.return_value.run.assert_called_once()

    def test_bad_env_value_returns_error(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("CAREER_LINK_PAUSE_SECONDS", "four")
        with patch("career_link.config.load_dotenv"), \
                patch.object(cli, "GameRunner") as mock_runner:
            assert cli.main(["--demo"]) == 1
        assert capsys.readouterr().err.startswith("Error: ")
        mock_runner.assert_not_called()

    def test_malformed_config_file_returns_error(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CAREER_LINK_PAUSE_SECONDS", raising=False)
        path = tmp_path / "game.json"
        path.write_text('{"demo_mode": true,')
        with patch("career_link.config.load_dotenv"), \
                patch.object(cli, "GameRunner") as mock_runner:
            assert cli.main(["--config", str(path)]) == 1
        assert capsys.readouterr().err.startswith("Error: ")
        mock_runner.assert_not_called()

    def test_config_file_must_be_object(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CAREER_LINK_PAUSE_SECONDS", raising=False)
        path = tmp_path / "game.json"
        path.write_text("[1, 2]")
        with patch("career_link.config.load_dotenv"), \
                patch.object(cli, "GameRunner") as mock_runner:
            assert cli.main(["--demo", "--config", str(path)]) == 1
        assert "JSON object" in capsys.readouterr().err
        mock_runner.assert_not_called()
