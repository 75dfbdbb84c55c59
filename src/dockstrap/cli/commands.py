"""Command implementations for CLI."""

import asyncio
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from dockstrap.bootstrap import BootstrapDispatcher, ConfigResolver, KnifeBootstrapper
from dockstrap.models.bootstrap import BootstrapOptions
from dockstrap.models.launch import LaunchSpec
from dockstrap.provision import ConfigManager, Provisioner, ProvisionResult, ReadinessGate
from dockstrap.runtime import DockerRuntime
from dockstrap.utils.logging import setup_logging


console = Console()
stderr_console = Console(stderr=True)


def build_provisioner(config, options: BootstrapOptions) -> Provisioner:
    """Wire the docker runtime, readiness gate and knife bootstrapper together."""
    resolver = ConfigResolver(overrides=options, fallback=config.knife)
    dispatcher = BootstrapDispatcher(
        resolver=resolver,
        bootstrapper=KnifeBootstrapper(config.knife),
    )
    return Provisioner(
        runtime=DockerRuntime(config.runtime),
        dispatcher=dispatcher,
        readiness=ReadinessGate(config.readiness),
    )


async def _create(
    spec: LaunchSpec,
    options: BootstrapOptions,
    config_path: Optional[Path],
    log_level: Optional[str],
) -> ProvisionResult:
    config = await ConfigManager(config_path).load()
    setup_logging(log_level or config.log_level)

    provisioner = build_provisioner(config, options)
    return await provisioner.run(spec)


def create_container(
    spec: LaunchSpec,
    options: BootstrapOptions,
    config_path: Optional[Path] = None,
    log_level: Optional[str] = None,
    quiet: bool = False,
) -> ProvisionResult:
    """Create a container and bootstrap it."""
    # Spinner draws on stderr, knife writes to stdout
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=stderr_console,
        transient=True,
        disable=quiet,
    ) as progress:
        progress.add_task("Provisioning container...", total=None)
        result = asyncio.run(_create(spec, options, config_path, log_level))

    if not quiet:
        console.print(
            f"[green]✓[/green] Container [cyan]{result.container_id[:12]}[/cyan] "
            f"bootstrapped as [cyan]{result.request.node_name}[/cyan] ({result.address})"
        )
    return result
