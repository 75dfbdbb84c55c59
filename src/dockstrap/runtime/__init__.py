"""Container runtime clients."""

from dockstrap.runtime.base import RuntimeClient
from dockstrap.runtime.command import build_run_command, render_command
from dockstrap.runtime.docker import DockerRuntime, extract_address

__all__ = [
    "RuntimeClient",
    "DockerRuntime",
    "build_run_command",
    "render_command",
    "extract_address",
]
