"""Tests for privileges module."""

import shlex
from unittest.mock import patch

import pytest

from connectorlib.errors import ElevationError, ToolNotFoundError
from connectorlib.privileges import (
    build_elevation_command,
    ensure_privileges,
    is_privileged,
)


class TestIsPrivileged:

    @patch("connectorlib.privileges.os.geteuid", return_value=0)
    def test_root(self, _):
        assert is_privileged() is True

    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_non_root(self, _):
        assert is_privileged() is False


class TestBuildElevationCommand:
    """Test cases for build_elevation_command."""

    def test_command_shape(self):
        cmd = build_elevation_command(["api", "8080"], "/home/me/work", python="/usr/bin/python3")

        assert cmd[:4] == ["sudo", "-i", "bash", "-c"]
        assert cmd[4] == "cd /home/me/work && /usr/bin/python3 -m connectorlib api 8080"

    def test_arguments_are_quoted(self):
        """Test hostile arguments survive the shell as single words."""
        cmd = build_elevation_command(['my api"; rm -rf /', "80"], "/tmp/with space", python="python3")
        script = cmd[4]

        assert script.startswith("cd '/tmp/with space' && ")
        inner = shlex.split(script.split(" && ", 1)[1])
        assert inner == ["python3", "-m", "connectorlib", 'my api"; rm -rf /', "80"]


class TestEnsurePrivileges:
    """Test cases for ensure_privileges."""

    @patch("connectorlib.privileges.os.execvp")
    @patch("connectorlib.privileges.os.geteuid", return_value=0)
    def test_root_proceeds(self, _, mock_exec):
        ensure_privileges("auto", ["api", "80"], "/tmp")
        mock_exec.assert_not_called()

    @patch("connectorlib.privileges.os.execvp")
    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_skip_mode(self, _, mock_exec):
        ensure_privileges("skip", ["api", "80"], "/tmp")
        mock_exec.assert_not_called()

    @patch("connectorlib.privileges.os.execvp")
    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_require_mode_fails_fast(self, _, mock_exec):
        with pytest.raises(ElevationError, match="root privileges are required"):
            ensure_privileges("require", ["api", "80"], "/tmp")
        mock_exec.assert_not_called()

    @patch("connectorlib.privileges.shutil.which", return_value="/usr/bin/sudo")
    @patch("connectorlib.privileges.os.execvp")
    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_auto_mode_reexecs(self, _, mock_exec, __):
        ensure_privileges("auto", ["api", "80"], "/srv/app")

        mock_exec.assert_called_once()
        file, cmd = mock_exec.call_args[0]
        assert file == "sudo"
        assert cmd[0] == "sudo"
        assert cmd[4].startswith("cd /srv/app && ")
        assert cmd[4].endswith("-m connectorlib api 80")

    @patch("connectorlib.privileges.shutil.which", return_value=None)
    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_auto_mode_without_sudo(self, *_):
        with pytest.raises(ToolNotFoundError, match="sudo not found"):
            ensure_privileges("auto", ["api", "80"], "/tmp")

    @patch("connectorlib.privileges.shutil.which", return_value="/usr/bin/sudo")
    @patch("connectorlib.privileges.os.execvp", side_effect=OSError("exec format error"))
    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_exec_failure(self, *_):
        with pytest.raises(ElevationError, match="exec format error"):
            ensure_privileges("auto", ["api", "80"], "/tmp")

    @patch("connectorlib.privileges.os.getcwd", return_value="/from/getcwd")
    @patch("connectorlib.privileges.shutil.which", return_value="/usr/bin/sudo")
    @patch("connectorlib.privileges.os.execvp")
    @patch("connectorlib.privileges.os.geteuid", return_value=1000)
    def test_defaults_to_current_directory(self, _, mock_exec, *__):
        ensure_privileges("auto", ["api", "80"])
        assert mock_exec.call_args[0][1][4].startswith("cd /from/getcwd && ")
