"""Bootstrap collaborator interface."""

from abc import ABC, abstractmethod

from dockstrap.models.bootstrap import BootstrapRequest


class Bootstrapper(ABC):
    """Performs the remote bootstrap of a node described by a request."""

    @abstractmethod
    async def bootstrap(self, request: BootstrapRequest) -> None:
        """Bootstrap the node; raise BootstrapDispatchError on failure."""
        pass
