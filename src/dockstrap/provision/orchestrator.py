"""Provisioning state machine."""

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from dockstrap.bootstrap.dispatcher import BootstrapDispatcher
from dockstrap.errors import ConfigurationError
from dockstrap.models.bootstrap import BootstrapRequest
from dockstrap.models.launch import LaunchSpec
from dockstrap.provision.readiness import ReadinessGate
from dockstrap.runtime.base import RuntimeClient


logger = logging.getLogger(__name__)


class ProvisionState(Enum):
    """Stages of a provisioning run."""
    VALIDATING = "validating"
    LAUNCHING = "launching"
    RESOLVING_ADDRESS = "resolving_address"
    AWAITING_READINESS = "awaiting_readiness"
    DISPATCHING = "dispatching"
    DONE = "done"
    FAILED = "failed"


class ProvisionResult(BaseModel):
    """Outcome of a successful provisioning run."""
    container_id: str
    address: str
    request: BootstrapRequest


class Provisioner:
    """Creates a container, finds its address and bootstraps it.

    Stages run strictly in order and the first failure ends the run. A
    container created before a later failure is left running.
    """

    def __init__(
        self,
        runtime: RuntimeClient,
        dispatcher: BootstrapDispatcher,
        readiness: Optional[ReadinessGate] = None,
    ):
        """Initialize provisioner."""
        self.runtime = runtime
        self.dispatcher = dispatcher
        self.readiness = readiness or ReadinessGate()
        self.state: Optional[ProvisionState] = None
        self.history: List[ProvisionState] = []
        self.container_id: Optional[str] = None

    def _enter(self, state: ProvisionState):
        logger.debug(f"Provisioning state: {state.value}")
        self.state = state
        self.history.append(state)

    async def run(self, spec: LaunchSpec) -> ProvisionResult:
        """Run the full provisioning sequence for ``spec``."""
        self.history = []
        self.container_id = None

        try:
            self._enter(ProvisionState.VALIDATING)
            if not spec.image:
                raise ConfigurationError("Please provide a valid Docker container image (-I)")

            self._enter(ProvisionState.LAUNCHING)
            self.container_id = await self.runtime.launch(spec)

            self._enter(ProvisionState.RESOLVING_ADDRESS)
            address = await self.runtime.inspect_address(self.container_id)
        except Exception:
            self._enter(ProvisionState.FAILED)
            if self.container_id:
                logger.warning(f"Container {self.container_id} was created but is left running")
            raise

        logger.info(f"Container {self.container_id} is up at {address}")

        try:
            self._enter(ProvisionState.AWAITING_READINESS)
            await self.readiness.wait(address, spec.ssh_port)

            self._enter(ProvisionState.DISPATCHING)
            request = await self.dispatcher.dispatch(spec, address, self.container_id)
        except Exception:
            # State is left at the stage that failed
            logger.warning(f"Container {self.container_id} was created but is left running")
            raise

        self._enter(ProvisionState.DONE)
        return ProvisionResult(container_id=self.container_id, address=address, request=request)
