"""Second-stage bootstrap of provisioned containers."""

from dockstrap.bootstrap.base import Bootstrapper
from dockstrap.bootstrap.dispatcher import BootstrapDispatcher
from dockstrap.bootstrap.knife import KnifeBootstrapper, build_bootstrap_command
from dockstrap.bootstrap.resolver import ConfigResolver, HARD_DEFAULTS, SUPERUSER

__all__ = [
    "Bootstrapper",
    "BootstrapDispatcher",
    "KnifeBootstrapper",
    "build_bootstrap_command",
    "ConfigResolver",
    "HARD_DEFAULTS",
    "SUPERUSER",
]
