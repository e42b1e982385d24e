"""CLI interface for connectorlib."""

from typing import List, Optional

import typer

from connectorlib.config import ConnectorConfig, get_config
from connectorlib.errors import ConnectorError, KubectlError
from connectorlib.kubectl import KubectlClient, find_kubectl
from connectorlib.logging import log_stderr
from connectorlib.privileges import ensure_privileges
from connectorlib.register import register_connector
from connectorlib.validation import validate_input, format_validation_result

PROG_NAME = "register-connector"
HELP_FLAGS = ("-h", "--help")

app = typer.Typer(add_completion=False)


def usage() -> None:
    """Print usage to stderr."""
    log_stderr(f"Usage: {PROG_NAME} <short-name> <port>")
    log_stderr("  short-name: identifier used in resource names (e.g., api)")
    log_stderr("  port:       container's listen port (1-65535)")


def _elevated_args(config: ConnectorConfig, short_name: str, port: str) -> List[str]:
    """Arguments for the re-executed process.

    Resolved settings are passed explicitly because the root login shell
    does not inherit the caller's CONNECTOR_* environment.
    """
    args = [
        "--namespace", config.namespace,
        "--registry", config.registry,
        "--image-tag", config.image_tag,
        "--kubectl", config.kubectl,
        "--elevation", config.elevation,
    ]
    if config.rollout_timeout:
        args.extend(["--rollout-timeout", config.rollout_timeout])
    return args + ["--", short_name, port]


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    add_help_option=False,
)
def register(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None),
    namespace: Optional[str] = typer.Option(None, "--namespace", help="Target namespace (default: p360-mcp)"),
    registry: Optional[str] = typer.Option(None, "--registry", help="Image registry path the short name is appended to"),
    image_tag: Optional[str] = typer.Option(None, "--image-tag", help="Image tag (default: latest)"),
    kubectl: Optional[str] = typer.Option(None, "--kubectl", help="kubectl executable (default: kubectl)"),
    rollout_timeout: Optional[str] = typer.Option(None, "--rollout-timeout", help="Passed to 'kubectl rollout status --timeout', e.g. 5m"),
    elevation: Optional[str] = typer.Option(None, "--elevation", help="auto: re-run under sudo, require: fail unless root, skip: never elevate"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print names and manifests without touching the cluster"),
):
    """Create a connector Service and Deployment and wait for the rollout."""
    command_args = ctx.args if ctx.args else (args or [])

    if command_args and command_args[0] in HELP_FLAGS:
        usage()
        raise typer.Exit(0)

    if len(command_args) != 2:
        usage()
        raise typer.Exit(1)

    short_raw, port_raw = command_args

    try:
        config = get_config(
            dry_run=dry_run,
            namespace=namespace,
            registry=registry,
            image_tag=image_tag,
            kubectl=kubectl,
            rollout_timeout=rollout_timeout,
            elevation=elevation,
        )
    except ValueError as e:
        log_stderr(f"Error: {e}")
        raise typer.Exit(1)

    result = validate_input(short_raw, port_raw, config.registry, config.image_tag)
    if not result.is_valid:
        log_stderr(format_validation_result(result))
        raise typer.Exit(1)

    try:
        kubectl_path = config.kubectl
        if not config.dry_run:
            ensure_privileges(config.elevation, _elevated_args(config, short_raw, port_raw))
            kubectl_path = find_kubectl(config.kubectl)

        if result.has_warnings:
            log_stderr(format_validation_result(result))

        client = KubectlClient(kubectl_path, dry_run=config.dry_run)
        exit_code = register_connector(result.names, config, client)
    except KubectlError as e:
        log_stderr(f"Error: {e}")
        if e.stderr:
            log_stderr(e.stderr.rstrip())
        raise typer.Exit(e.exit_code)
    except ConnectorError as e:
        log_stderr(f"Error: {e}")
        raise typer.Exit(e.exit_code)

    raise typer.Exit(exit_code)


def main():
    app(prog_name=PROG_NAME)
