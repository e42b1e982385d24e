"""Exceptions raised by connectorlib."""


class ConnectorError(Exception):
    """Base class; carries the process exit code to use."""
    exit_code = 1


class ToolNotFoundError(ConnectorError):
    """A required executable is not on PATH."""

    def __init__(self, tool: str):
        super().__init__(f"{tool} not found in PATH")
        self.tool = tool


class ElevationError(ConnectorError):
    """Root privileges are required but could not be obtained."""


class KubectlError(ConnectorError):
    """A kubectl invocation exited non-zero."""

    def __init__(self, cmd, returncode: int, stderr: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr or ""
        super().__init__(f"Command failed with exit code {returncode}: {' '.join(self.cmd)}")

    @property
    def exit_code(self) -> int:
        return self.returncode or 1
