"""Docker CLI runtime client."""

import logging
import re
import subprocess
from typing import Optional

from dockstrap.errors import AddressResolutionError, LaunchError, RuntimeClientError
from dockstrap.models.config import RuntimeConfig
from dockstrap.models.launch import LaunchSpec
from dockstrap.runtime.base import RuntimeClient
from dockstrap.runtime.command import build_run_command, render_command
from dockstrap.utils.process import run_command


logger = logging.getLogger(__name__)

IP_ADDRESS_PATTERN = re.compile(r'"IPAddress": "([\d\.]+)"')


def extract_address(inspect_output: str) -> str:
    """Pull the first IPv4 address out of ``docker inspect`` output."""
    match = IP_ADDRESS_PATTERN.search(inspect_output)
    if not match:
        raise AddressResolutionError("No IP address found in container inspection output")
    return match.group(1)


class DockerRuntime(RuntimeClient):
    """Runtime client that shells out to the docker CLI."""

    def __init__(self, config: Optional[RuntimeConfig] = None):
        """Initialize docker runtime client."""
        self.config = config or RuntimeConfig()

    async def launch(self, spec: LaunchSpec) -> str:
        """Run ``docker run -d`` and return the new container id."""
        cmd = build_run_command(spec, docker_binary=self.config.docker_binary)
        logger.info(f"Creating container: {render_command(cmd)}")

        try:
            result = await run_command(cmd, timeout=self.config.launch_timeout)
        except subprocess.CalledProcessError as e:
            logger.error(f"docker run failed with exit code {e.returncode}. Stderr: {e.stderr}")
            raise LaunchError("Cannot create container") from e
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error(f"Failed to run {self.config.docker_binary}: {e}")
            raise LaunchError("Cannot create container") from e

        container_id = result.stdout.rstrip()
        logger.debug(f"Created container {container_id}")
        return container_id

    async def inspect_address(self, container_id: str) -> str:
        """Run ``docker inspect`` once and extract the container address."""
        cmd = [self.config.docker_binary, "inspect", container_id]
        try:
            result = await run_command(cmd, timeout=self.config.inspect_timeout)
        except subprocess.CalledProcessError as e:
            logger.error(f"docker inspect failed for {container_id}. Stderr: {e.stderr}")
            raise RuntimeClientError(f"Cannot inspect container {container_id}") from e
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error(f"Failed to run {self.config.docker_binary}: {e}")
            raise RuntimeClientError(f"Cannot inspect container {container_id}") from e

        address = extract_address(result.stdout)
        logger.debug(f"Container {container_id} has address {address}")
        return address
