"""
End-to-end tests for the sigo entry point.
"""

import json

import pytest

from sigo.main import create_parser, main


@pytest.fixture
def run(tmp_path, home):
    """Run the CLI against a temporary config and home."""
    config = str(tmp_path / "config.yaml")

    def _run(*argv):
        return main(["--config", config, "--home", str(home), *argv])

    return _run


class TestParser:
    """Test argument parsing."""

    def test_prog(self):
        assert create_parser().prog == "sigo"

    def test_add_joins_words(self):
        args = create_parser().parse_args(["add", "call", "the", "bank"])
        assert args.command == "add"
        assert args.description == ["call", "the", "bank"]

    def test_id_is_int(self):
        args = create_parser().parse_args(["done", "7"])
        assert args.id == 7

    @pytest.mark.parametrize("bad", ["0", "-2", "seven"])
    def test_invalid_id_exits(self, bad):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["done", bad])

    def test_invalid_state_exits(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["list", "--state", "blocked"])


class TestMain:
    """Test full command runs."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: sigo" in capsys.readouterr().out

    def test_full_session(self, run, capsys):
        assert run("add", "first") == 0
        assert run("add", "second") == 0
        assert run("wait", "1") == 0
        assert run("done", "2") == 0
        assert run("add", "third") == 0
        capsys.readouterr()

        assert run("list", "--json") == 0
        tasks = json.loads(capsys.readouterr().out)
        assert tasks == [
            {"id": 2, "description": "third", "state": "ready"},
            {"id": 1, "description": "first", "state": "waiting"},
            {"id": 2, "description": "second", "state": "completed"},
        ]

        assert run("show", "2", "--json") == 0
        assert json.loads(capsys.readouterr().out)["description"] == "third"

    def test_home_from_env(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("SIGO_HOME", str(tmp_path / "env-home"))
        assert main(["--config", str(tmp_path / "none.yaml"), "add", "x"]) == 0
        assert (tmp_path / "env-home" / "ready_tasks").exists()

    def test_bad_config(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("home: [\n")
        assert main(["--config", str(config), "list"]) == 1
        assert "Invalid YAML" in capsys.readouterr().err

    def test_init_home_after_subcommand(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        home = tmp_path / "sub-home"
        assert main(["--config", str(config), "init", "--home", str(home)]) == 0
        assert f"home: {home}" in config.read_text()
        for name in ("ready_tasks", "waiting_tasks", "completed_tasks"):
            assert (home / name).exists()

        assert main(["--config", str(config), "add", "after init"]) == 0
        assert "after init" in (home / "ready_tasks").read_text()

    def test_init_then_add(self, tmp_path, capsys):
        config = str(tmp_path / "config.yaml")
        home = str(tmp_path / "init-home")
        assert main(["--config", config, "--home", home, "init"]) == 0
        # Home now comes from the written config
        assert main(["--config", config, "add", "from config"]) == 0
        assert (tmp_path / "init-home" / "ready_tasks").exists()
        assert "from config" in (tmp_path / "init-home" / "ready_tasks").read_text()
