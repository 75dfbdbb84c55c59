"""Exceptions raised while provisioning a container."""


class DockstrapError(Exception):
    """Base class for all provisioning errors."""


class ConfigurationError(DockstrapError):
    """Required input is missing or the configuration file is invalid."""


class RuntimeClientError(DockstrapError):
    """The container runtime could not be invoked or returned an error."""


class LaunchError(RuntimeClientError):
    """The runtime refused or failed to create the container."""


class AddressResolutionError(DockstrapError):
    """No usable address was found for the container."""


class BootstrapDispatchError(DockstrapError):
    """The bootstrap collaborator failed."""

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode
