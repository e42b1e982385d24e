"""Root privilege check and sudo re-execution."""

import os
import shlex
import shutil
import sys
from typing import List, Optional, Sequence

from connectorlib.errors import ElevationError, ToolNotFoundError
from connectorlib.logging import log_stdout, logger


def is_privileged() -> bool:
    """Return True when running with an effective uid of 0."""
    return os.geteuid() == 0


def build_elevation_command(argv: Sequence[str], cwd: str, python: Optional[str] = None) -> List[str]:
    """Build the sudo command that re-runs this program as root.

    A root login shell is used so root's own environment (kubeconfig, PATH)
    applies, then the original working directory is restored.

    Args:
        argv: Arguments to pass through, without the program name
        cwd: Working directory to restore inside the login shell
        python: Interpreter to run the module with (default: sys.executable)
    """
    python = python or sys.executable
    inner = [python, "-m", "connectorlib"] + list(argv)
    script = f"cd {shlex.quote(cwd)} && {shlex.join(inner)}"
    return ["sudo", "-i", "bash", "-c", script]


def ensure_privileges(mode: str, argv: Sequence[str], cwd: Optional[str] = None) -> None:
    """Make sure the rest of the program runs as root.

    Modes:
        auto: re-exec under sudo when not root (does not return in that case)
        require: raise ElevationError when not root
        skip: do nothing

    Raises:
        ElevationError: If root is required and not available, or exec fails
        ToolNotFoundError: If sudo is needed but not installed
    """
    if mode == "skip" or is_privileged():
        return

    if mode == "require":
        raise ElevationError(
            "root privileges are required; re-run with sudo or use --elevation auto"
        )

    if not shutil.which("sudo"):
        raise ToolNotFoundError("sudo")

    cmd = build_elevation_command(argv, cwd or os.getcwd())
    log_stdout("Re-running as root via sudo")
    logger.debug("Elevating", fields={"cmd": shlex.join(cmd)})
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execvp(cmd[0], cmd)
    except OSError as e:
        raise ElevationError(f"failed to re-run under sudo: {e}") from e
