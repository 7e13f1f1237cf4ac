"""
Smoke tests for the command-line scripts.
"""

import importlib.util
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def friends_cli():
    return load_script("friends")


@pytest.fixture(scope="module")
def validate_cli():
    return load_script("validate_graph")


class TestFriendsCli:
    """Test scripts/friends.py one-shot mode."""

    def test_friends_flag(self, friends_cli, sample_network, capsys):
        """--friends prints the friend list."""
        assert friends_cli.main([str(sample_network), "--friends", "3"]) == 0
        out = capsys.readouterr().out
        assert "Graph loaded successfully!" in out
        assert "Person 3 has 3 friends!" in out
        assert "List of friends: 4 2 1" in out

    def test_connect_flag(self, friends_cli, sample_network, capsys):
        """--connect prints each hop."""
        assert friends_cli.main([str(sample_network), "--connect", "0", "5"]) == 0
        out = capsys.readouterr().out
        assert "There is a connection from 0 to 5!" in out
        assert "0 is friends with 2\n2 is friends with 6\n6 is friends with 5" in out

    def test_missing_file(self, friends_cli, tmp_path, capsys):
        """An unreadable file exits with status 1."""
        assert friends_cli.main([str(tmp_path / "missing.txt"), "--friends", "0"]) == 1
        assert "Failed to load graph. Exiting." in capsys.readouterr().out

    def test_oversized_header_fails_cleanly(self, friends_cli, write_network, capsys):
        """An absurd header size is reported as a load failure."""
        path = write_network("100000000000 0\n")
        assert friends_cli.main([str(path), "--friends", "0"]) == 1
        assert "Failed to load graph. Exiting." in capsys.readouterr().out

    def test_prompts_for_file(self, friends_cli, sample_network, monkeypatch, capsys):
        """Without a file argument the user is asked for one."""
        monkeypatch.setattr("builtins.input", lambda prompt="": str(sample_network))
        assert friends_cli.main(["--connect", "0", "7"]) == 0
        assert "Cannot find a connection between 0 and 7" in capsys.readouterr().out

    def test_save_snapshot(self, friends_cli, sample_network, tmp_path, capsys):
        """--save-snapshot writes a loadable msgpack file."""
        target = tmp_path / "net.msgpack"
        assert friends_cli.main([str(sample_network), "--save-snapshot", str(target)]) == 0
        assert target.exists()
        assert friends_cli.main([str(target), "--friends", "9"]) == 0
        assert "Person 9 has 2 friends!" in capsys.readouterr().out


class TestValidateCli:
    """Test scripts/validate_graph.py."""

    def test_sample_network_passes(self, validate_cli, sample_network, monkeypatch, capsys):
        """The bundled sample should pass every check."""
        monkeypatch.setattr("sys.argv", ["validate_graph.py", str(sample_network)])
        assert validate_cli.main() == 0
        assert "All validation checks passed" in capsys.readouterr().out

    def test_missing_file_fails(self, validate_cli, tmp_path, monkeypatch):
        """A missing file fails validation."""
        monkeypatch.setattr("sys.argv", ["validate_graph.py", str(tmp_path / "none.txt")])
        assert validate_cli.main() == 1
