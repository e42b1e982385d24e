"""Resource name derivation for connector workloads."""

import re
from dataclasses import dataclass

_INVALID_LABEL_CHARS = re.compile(r"[^a-z0-9-]")
_PORT_PATTERN = re.compile(r"[0-9]+")

NAME_PREFIX = "connector-"
SERVICE_SUFFIX = "-service"
MAX_NAME_LENGTH = 63
MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class ResourceNames:
    """Names derived from a sanitized label and port."""
    label: str
    port: int
    workload_name: str
    service_name: str
    app_label: str
    image: str

    def all_names(self) -> dict:
        """Kubernetes object names keyed by kind."""
        return {
            "service": self.service_name,
            "deployment": self.workload_name,
            "container": self.label,
        }


def sanitize(identifier: str) -> str:
    """Normalize a free-text identifier into a DNS-1123 style label.

    Lowercases, replaces anything outside ``[a-z0-9-]`` with a hyphen and
    strips leading and trailing hyphens. Inner runs of hyphens are kept.
    May return an empty string.
    """
    return _INVALID_LABEL_CHARS.sub("-", identifier.lower()).strip("-")


def parse_port(raw: str) -> int:
    """Parse a port given as decimal digits.

    Raises:
        ValueError: If the value is not all digits or is outside 1-65535
    """
    if not _PORT_PATTERN.fullmatch(raw):
        raise ValueError(f"port must be an integer between {MIN_PORT} and {MAX_PORT}: {raw!r}")
    port = int(raw)
    if port < MIN_PORT or port > MAX_PORT:
        raise ValueError(f"port must be an integer between {MIN_PORT} and {MAX_PORT}: {raw!r}")
    return port


def derive_names(label: str, port: int, registry: str, tag: str = "latest") -> ResourceNames:
    """Derive workload, service and image names from a sanitized label."""
    workload_name = f"{NAME_PREFIX}{label}"
    return ResourceNames(
        label=label,
        port=port,
        workload_name=workload_name,
        service_name=f"{workload_name}{SERVICE_SUFFIX}",
        app_label=workload_name,
        image=f"{registry}/{label}:{tag}",
    )


def max_label_length() -> int:
    """Longest label whose derived service name still fits a DNS label."""
    return MAX_NAME_LENGTH - len(NAME_PREFIX) - len(SERVICE_SUFFIX)
