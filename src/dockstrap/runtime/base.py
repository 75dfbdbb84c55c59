"""Container runtime client interface."""

from abc import ABC, abstractmethod

from dockstrap.models.launch import LaunchSpec


class RuntimeClient(ABC):
    """Narrow interface to the container runtime used by the provisioner."""

    @abstractmethod
    async def launch(self, spec: LaunchSpec) -> str:
        """Create a detached container and return its identifier."""
        pass

    @abstractmethod
    async def inspect_address(self, container_id: str) -> str:
        """Return the IPv4 address assigned to a container."""
        pass
