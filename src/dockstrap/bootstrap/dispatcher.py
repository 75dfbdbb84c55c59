"""Assembly and hand-off of bootstrap requests."""

import logging

from dockstrap.bootstrap.base import Bootstrapper
from dockstrap.bootstrap.resolver import SUPERUSER, ConfigResolver
from dockstrap.models.bootstrap import BootstrapRequest, SSHCredentials
from dockstrap.models.launch import LaunchSpec


logger = logging.getLogger(__name__)


class BootstrapDispatcher:
    """Builds a BootstrapRequest for a fresh container and hands it to a bootstrapper."""

    def __init__(self, resolver: ConfigResolver, bootstrapper: Bootstrapper):
        """Initialize dispatcher."""
        self.resolver = resolver
        self.bootstrapper = bootstrapper

    def build_request(self, spec: LaunchSpec, address: str, container_id: str) -> BootstrapRequest:
        """Build the bootstrap request for a launched container.

        The node is named after the container unless a name was given, and
        sudo is requested whenever the SSH user is not root.
        """
        options = self.resolver.overrides
        ssh_user = self.resolver.get("ssh_user")
        use_sudo = ssh_user != SUPERUSER

        return BootstrapRequest(
            address=address,
            node_name=options.node_name or container_id,
            run_list=list(options.run_list),
            ssh=SSHCredentials(
                user=ssh_user,
                password=self.resolver.get("ssh_password"),
                identity_file=options.identity_file,
                port=spec.ssh_port,
            ),
            use_sudo=use_sudo,
            use_sudo_password=use_sudo,
            distro=self.resolver.get("distro"),
            template_file=self.resolver.get("template_file"),
            environment=self.resolver.get("environment"),
            bootstrap_version=self.resolver.get("bootstrap_version"),
        )

    async def dispatch(self, spec: LaunchSpec, address: str, container_id: str) -> BootstrapRequest:
        """Build the request and run the bootstrap."""
        request = self.build_request(spec, address, container_id)
        logger.info(f"Bootstrapping node {request.node_name} at {request.address}")
        await self.bootstrapper.bootstrap(request)
        return request
