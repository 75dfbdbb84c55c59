"""knife bootstrap collaborator."""

import logging
import subprocess
from typing import List, Optional

from dockstrap.bootstrap.base import Bootstrapper
from dockstrap.errors import BootstrapDispatchError
from dockstrap.models.bootstrap import BootstrapRequest
from dockstrap.models.config import KnifeConfig
from dockstrap.utils.process import run_command


logger = logging.getLogger(__name__)


def build_bootstrap_command(request: BootstrapRequest, knife_binary: str = "knife") -> List[str]:
    """Render a bootstrap request as a ``knife bootstrap`` argument list."""
    cmd = [knife_binary, "bootstrap", request.address, "-x", request.ssh.user]
    if request.ssh.password:
        cmd.extend(["-P", request.ssh.password])
    cmd.extend(["-p", request.ssh.port])
    if request.ssh.identity_file:
        cmd.extend(["-i", request.ssh.identity_file])
    cmd.extend(["-N", request.node_name])
    if request.run_list:
        cmd.extend(["-r", ",".join(request.run_list)])
    if request.use_sudo:
        cmd.append("--sudo")
    if request.use_sudo_password:
        cmd.append("--use-sudo-password")
    cmd.extend(["-d", request.distro])
    if request.template_file:
        cmd.extend(["--template-file", request.template_file])
    if request.environment:
        cmd.extend(["-E", request.environment])
    if request.bootstrap_version:
        cmd.extend(["--bootstrap-version", request.bootstrap_version])
    return cmd


class KnifeBootstrapper(Bootstrapper):
    """Bootstraps nodes by running ``knife bootstrap``."""

    def __init__(self, config: Optional[KnifeConfig] = None):
        """Initialize knife bootstrapper."""
        self.config = config or KnifeConfig()

    async def bootstrap(self, request: BootstrapRequest) -> None:
        """Run knife bootstrap, streaming its output to the terminal."""
        cmd = build_bootstrap_command(request, knife_binary=self.config.knife_binary)
        # Keep the password out of the logs
        shown = ["******" if request.ssh.password and arg == request.ssh.password else arg for arg in cmd]

        try:
            await run_command(
                cmd,
                capture_output=False,
                timeout=self.config.bootstrap_timeout,
                log_cmd=shown,
            )
        except subprocess.CalledProcessError as e:
            logger.error(f"knife bootstrap of {request.node_name} exited with {e.returncode}")
            raise BootstrapDispatchError(
                f"knife bootstrap failed with exit code {e.returncode}",
                returncode=e.returncode,
            ) from e
        except (OSError, subprocess.TimeoutExpired) as e:
            raise BootstrapDispatchError(f"Failed to run knife bootstrap: {e}") from e
