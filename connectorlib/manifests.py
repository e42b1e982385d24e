"""Typed Service and Deployment manifests for a connector workload.

Manifests are built as plain dataclasses and serialized with PyYAML, so the
label and image values never go through text templating.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from connectorlib.naming import ResourceNames

SERVICE_PORT = 80


@dataclass(frozen=True)
class ServicePort:
    port: int
    target_port: int
    name: str = "http"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "port": self.port, "targetPort": self.target_port}


@dataclass(frozen=True)
class ServiceManifest:
    name: str
    app_label: str
    ports: List[ServicePort] = field(default_factory=list)

    kind = "Service"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": "v1",
            "kind": self.kind,
            "metadata": {
                "name": self.name,
                "labels": {"app": self.app_label},
            },
            "spec": {
                "selector": {"app": self.app_label},
                "ports": [p.to_dict() for p in self.ports],
            },
        }


@dataclass(frozen=True)
class DeploymentManifest:
    name: str
    app_label: str
    container_name: str
    image: str
    container_port: int
    replicas: int = 1
    image_pull_policy: str = "Always"
    restart_policy: str = "Always"

    kind = "Deployment"

    def to_dict(self) -> Dict[str, Any]:
        labels = {"app": self.app_label}
        return {
            "apiVersion": "apps/v1",
            "kind": self.kind,
            "metadata": {
                "name": self.name,
                "labels": dict(labels),
            },
            "spec": {
                "replicas": self.replicas,
                "selector": {"matchLabels": dict(labels)},
                "template": {
                    "metadata": {"labels": dict(labels)},
                    "spec": {
                        "containers": [
                            {
                                "name": self.container_name,
                                "image": self.image,
                                "imagePullPolicy": self.image_pull_policy,
                                "ports": [{"containerPort": self.container_port}],
                            }
                        ],
                        "restartPolicy": self.restart_policy,
                    },
                },
            },
        }


def build_service(names: ResourceNames) -> ServiceManifest:
    """Service exposing port 80 and forwarding to the container port."""
    return ServiceManifest(
        name=names.service_name,
        app_label=names.app_label,
        ports=[ServicePort(port=SERVICE_PORT, target_port=names.port)],
    )


def build_deployment(names: ResourceNames) -> DeploymentManifest:
    """Single-replica Deployment running the connector image."""
    return DeploymentManifest(
        name=names.workload_name,
        app_label=names.app_label,
        container_name=names.label,
        image=names.image,
        container_port=names.port,
    )


def render(manifest) -> str:
    """Serialize a manifest to YAML, preserving key order."""
    return yaml.safe_dump(manifest.to_dict(), default_flow_style=False, sort_keys=False)
