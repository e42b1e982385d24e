"""Thin adapter over the kubectl CLI."""

import shutil
import subprocess
from typing import List, Optional

from connectorlib.errors import KubectlError, ToolNotFoundError
from connectorlib.logging import log_stdout, logger


def find_kubectl(kubectl: str = "kubectl") -> str:
    """Resolve the kubectl executable.

    Raises:
        ToolNotFoundError: If kubectl cannot be found on PATH
    """
    path = shutil.which(kubectl)
    if not path:
        raise ToolNotFoundError(kubectl)
    return path


class KubectlClient:
    """Runs kubectl commands sequentially and fails fast on errors.

    With ``dry_run`` set, commands are logged and never executed; reads
    report that the namespace already exists.
    """

    def __init__(self, kubectl: str = "kubectl", dry_run: bool = False):
        self.kubectl = kubectl
        self.dry_run = dry_run

    def _run(
        self,
        args: List[str],
        input: Optional[str] = None,
        capture: bool = False,
        check: bool = True,
    ) -> subprocess.CompletedProcess:
        cmd = [self.kubectl] + args
        logger.debug("Running command", fields={"cmd": " ".join(cmd)})
        if self.dry_run:
            log_stdout(f"(dry-run) {' '.join(cmd)}")
            return subprocess.CompletedProcess(args=cmd, returncode=0, stdout="", stderr="")

        result = subprocess.run(cmd, input=input, capture_output=capture, text=True)
        if check and result.returncode != 0:
            raise KubectlError(cmd, result.returncode, result.stderr if capture else "")
        return result

    def namespace_exists(self, namespace: str) -> bool:
        result = self._run(["get", "namespace", namespace], capture=True, check=False)
        return result.returncode == 0

    def create_namespace(self, namespace: str) -> None:
        self._run(["create", "namespace", namespace])

    def apply_manifest(self, document: str, namespace: str) -> None:
        """Pipe a YAML document to ``kubectl apply -f -``."""
        self._run(["apply", "-n", namespace, "-f", "-"], input=document)

    def wait_for_rollout(self, name: str, namespace: str, timeout: Optional[str] = None) -> None:
        """Block until the deployment rollout finishes or kubectl gives up."""
        args = ["rollout", "status", f"deployment/{name}", "-n", namespace]
        if timeout:
            args.append(f"--timeout={timeout}")
        self._run(args)

    def list_resources(self, label_selector: str, namespace: str, kinds: str = "deploy,svc,pods") -> None:
        self._run(["get", kinds, "-n", namespace, "-l", label_selector])
