"""Wait for a new container's SSH daemon."""

import asyncio
import logging
from typing import Optional

from dockstrap.models.config import ReadinessConfig


logger = logging.getLogger(__name__)


def container_port(ssh_port: str) -> int:
    """Return the in-container port of a ``[host_ip:][host_port:]port[/proto]`` mapping."""
    return int(ssh_port.split("/")[0].rsplit(":", 1)[-1])


class ReadinessGate:
    """Delays the bootstrap until the container has had a chance to start sshd.

    By default this is a fixed sleep. With polling enabled it also tries to
    open a TCP connection to the SSH port until it succeeds or the timeout
    expires. It never fails the run: knife retries its own connections.
    """

    def __init__(self, config: Optional[ReadinessConfig] = None):
        """Initialize readiness gate."""
        self.config = config or ReadinessConfig()

    async def wait(self, address: str, ssh_port: str) -> bool:
        """Wait for the container; return whether the port was seen open."""
        if self.config.delay:
            await asyncio.sleep(self.config.delay)

        if not self.config.poll:
            return False

        try:
            port = container_port(ssh_port)
        except ValueError:
            logger.warning(f"Cannot poll SSH port mapping {ssh_port!r}, skipping readiness check")
            return False

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.config.timeout
        while True:
            if await self._port_open(address, port):
                logger.debug(f"SSH port {address}:{port} is accepting connections")
                return True
            if loop.time() + self.config.interval > deadline:
                break
            await asyncio.sleep(self.config.interval)

        logger.warning(f"SSH port {address}:{port} not open after {self.config.timeout}s")
        return False

    async def _port_open(self, address: str, port: int) -> bool:
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(address, port),
                timeout=self.config.interval,
            )
        except (OSError, asyncio.TimeoutError):
            return False
        writer.close()
        await writer.wait_closed()
        return True
