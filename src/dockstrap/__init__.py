"""
Dockstrap - spawn SSH-enabled Docker containers and bootstrap them with Chef.

Creates a detached container running an SSH daemon, discovers its address
and hands it to knife bootstrap so it joins the fleet.
"""

__version__ = "1.0.0"
__author__ = "Dockstrap Development Team"

# Re-export key components for easier access
from dockstrap.models.config import DockstrapConfig
from dockstrap.models.launch import LaunchSpec
from dockstrap.models.bootstrap import BootstrapOptions, BootstrapRequest

__all__ = [
    "DockstrapConfig",
    "LaunchSpec",
    "BootstrapOptions",
    "BootstrapRequest",
]
