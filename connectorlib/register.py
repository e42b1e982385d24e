"""Connector registration pipeline: namespace, Service, Deployment, rollout."""

from connectorlib.config import ConnectorConfig
from connectorlib.kubectl import KubectlClient
from connectorlib.logging import log_stdout
from connectorlib.manifests import build_deployment, build_service, render
from connectorlib.naming import ResourceNames


def print_summary(names: ResourceNames, config: ConnectorConfig) -> None:
    log_stdout(f"Namespace:  {config.namespace}")
    log_stdout(f"Short:      {names.label}")
    log_stdout(f"Port:       {names.port}")
    log_stdout(f"Service:    {names.service_name}")
    log_stdout(f"Deployment: {names.workload_name}")
    log_stdout(f"Image:      {names.image}")


def ensure_namespace(client: KubectlClient, namespace: str) -> None:
    """Create the namespace if it does not exist yet."""
    if not client.namespace_exists(namespace):
        log_stdout(f"Creating namespace {namespace}")
        client.create_namespace(namespace)


def register_connector(names: ResourceNames, config: ConnectorConfig, client: KubectlClient) -> int:
    """Apply the Service and Deployment and wait for the rollout.

    kubectl failures raise KubectlError and stop the pipeline; resources
    applied before the failure are left in place.

    Returns:
        0 on success
    """
    namespace = config.namespace
    service = render(build_service(names))
    deployment = render(build_deployment(names))

    print_summary(names, config)

    if config.dry_run:
        log_stdout("")
        log_stdout("---")
        log_stdout(service.rstrip())
        log_stdout("---")
        log_stdout(deployment.rstrip())
        log_stdout("")

    ensure_namespace(client, namespace)

    log_stdout(f"Applying Service {names.service_name} in {namespace}")
    client.apply_manifest(service, namespace)

    log_stdout(f"Applying Deployment {names.workload_name} in {namespace}")
    client.apply_manifest(deployment, namespace)

    log_stdout("Waiting for rollout to complete...")
    client.wait_for_rollout(names.workload_name, namespace, timeout=config.rollout_timeout)

    selector = f"app={names.app_label}"
    log_stdout(f"Done. Resources with label {selector}:")
    client.list_resources(selector, namespace)
    return 0
