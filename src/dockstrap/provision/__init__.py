"""Provisioning orchestration."""

from dockstrap.provision.config import ConfigManager
from dockstrap.provision.orchestrator import Provisioner, ProvisionResult, ProvisionState
from dockstrap.provision.readiness import ReadinessGate

__all__ = [
    "ConfigManager",
    "Provisioner",
    "ProvisionResult",
    "ProvisionState",
    "ReadinessGate",
]
