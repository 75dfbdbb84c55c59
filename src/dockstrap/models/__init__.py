"""Pydantic models for configuration and validation."""

from dockstrap.models.config import DockstrapConfig, RuntimeConfig, ReadinessConfig, KnifeConfig
from dockstrap.models.launch import LaunchSpec, DEFAULT_RUN_COMMAND
from dockstrap.models.bootstrap import BootstrapOptions, BootstrapRequest, SSHCredentials

__all__ = [
    "DockstrapConfig",
    "RuntimeConfig",
    "ReadinessConfig",
    "KnifeConfig",
    "LaunchSpec",
    "DEFAULT_RUN_COMMAND",
    "BootstrapOptions",
    "BootstrapRequest",
    "SSHCredentials",
]
