"""Configuration management for connectorlib with environment variable hierarchy."""

import os
from typing import Optional
from dataclasses import dataclass


ELEVATION_MODES = ("auto", "require", "skip")


@dataclass
class ConnectorConfig:
    """Configuration for a single connector registration."""
    namespace: str
    registry: str
    image_tag: str
    kubectl: str
    elevation: str
    rollout_timeout: Optional[str] = None  # passed through to kubectl, e.g. "5m"
    dry_run: bool = False


class ConfigManager:
    """Manages configuration with hierarchy: defaults < env vars < CLI args."""

    DEFAULTS = {
        'namespace': 'p360-mcp',
        'registry': 'us-central1-docker.pkg.dev/prompt360-dev/images/connector',
        'image_tag': 'latest',
        'kubectl': 'kubectl',
        'elevation': 'auto',
    }

    ENV_VARS = {
        'namespace': 'CONNECTOR_NAMESPACE',
        'registry': 'CONNECTOR_IMAGE_REGISTRY',
        'image_tag': 'CONNECTOR_IMAGE_TAG',
        'kubectl': 'CONNECTOR_KUBECTL',
        'elevation': 'CONNECTOR_ELEVATION',
        'rollout_timeout': 'CONNECTOR_ROLLOUT_TIMEOUT',
    }

    def get_config(self, dry_run: bool = False, **cli_overrides) -> ConnectorConfig:
        """Get the resolved configuration using hierarchy: defaults < env vars < CLI args.

        Args:
            dry_run: Render and print without touching the cluster
            **cli_overrides: CLI argument overrides; None values are ignored

        Returns:
            ConnectorConfig with resolved values

        Raises:
            ValueError: If a value is empty or the elevation mode is unknown
        """
        config = dict(self.DEFAULTS)

        for key, env_var in self.ENV_VARS.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                config[key] = env_value

        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

        empty = [key for key in self.DEFAULTS if not str(config.get(key, '')).strip()]
        if empty:
            raise ValueError(f"Empty configuration value for: {', '.join(empty)}")

        elevation = config['elevation'].lower()
        if elevation not in ELEVATION_MODES:
            raise ValueError(
                f"Invalid elevation mode '{config['elevation']}' "
                f"(expected one of: {', '.join(ELEVATION_MODES)})"
            )

        return ConnectorConfig(
            namespace=config['namespace'],
            registry=config['registry'].rstrip('/'),
            image_tag=config['image_tag'],
            kubectl=config['kubectl'],
            elevation=elevation,
            rollout_timeout=config.get('rollout_timeout') or None,
            dry_run=dry_run,
        )


config_manager = ConfigManager()


def get_config(dry_run: bool = False, **cli_overrides) -> ConnectorConfig:
    """Convenience function to get configuration."""
    return config_manager.get_config(dry_run=dry_run, **cli_overrides)
