"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console

from dockstrap.cli.commands import create_container
from dockstrap.errors import BootstrapDispatchError, ConfigurationError, DockstrapError
from dockstrap.models.bootstrap import BootstrapOptions
from dockstrap.models.launch import LaunchSpec


# Create Typer app
app = typer.Typer(
    name="dockstrap",
    help="Dockstrap - spawn Docker containers and bootstrap them with Chef",
    add_completion=False,
)

# Errors go to stderr
console = Console(stderr=True)


@app.callback()
def callback():
    """Dockstrap - spawn Docker containers and bootstrap them with Chef."""


@app.command("create")
def create_command(
    ctx: typer.Context,
    command: Optional[List[str]] = typer.Argument(
        None, help="Command to run in the container (default: sshd)"
    ),
    image: Optional[str] = typer.Option(
        None, "--image", "-I", help="The Docker container image to use"
    ),
    node_name: Optional[str] = typer.Option(
        None, "--node-name", "-N", help="The Chef node name for your new node"
    ),
    ssh_user: Optional[str] = typer.Option(
        None, "--ssh-user", "-x", help="The ssh username (default: root)"
    ),
    ssh_password: Optional[str] = typer.Option(
        None, "--ssh-password", "-P", help="The ssh password"
    ),
    ssh_port: str = typer.Option("22", "--ssh-port", help="The ssh port"),
    distro: Optional[str] = typer.Option(
        None, "--distro", "-d", help="Bootstrap a distro using a template (default: chef-full)"
    ),
    template_file: Optional[str] = typer.Option(
        None, "--template-file", help="Full path to location of template to use"
    ),
    run_list: Optional[List[str]] = typer.Option(
        None, "--run-list", "-r", help="Comma separated list of roles/recipes to apply"
    ),
    identity_file: Optional[str] = typer.Option(
        None, "--identity", "-i", help="SSH identity file for authentication"
    ),
    port_forward: Optional[List[str]] = typer.Option(
        None, "--forward", "-p", help="Ports to forward using docker syntax"
    ),
    dns_servers: Optional[List[str]] = typer.Option(None, "--dns", help="DNS servers"),
    dns_search: Optional[List[str]] = typer.Option(
        None, "--search", help="DNS search suffixes"
    ),
    volumes: Optional[List[str]] = typer.Option(
        None, "--volumes", help="Volumes to mount, see docker syntax"
    ),
    hostname: Optional[str] = typer.Option(
        None, "--hostname", "-h", help="Hostname to assign to the container"
    ),
    memory: Optional[str] = typer.Option(
        None, "--memory", "-m", help="How much RAM to allocate/permit"
    ),
    cpu: Optional[str] = typer.Option(
        None, "--cpu", "-C", help="How much CPU to allocate/permit"
    ),
    privileged: bool = typer.Option(
        False, "--privileged", "-G", help="Runs in privileged mode"
    ),
    environment: Optional[str] = typer.Option(
        None, "--environment", "-E", help="The Chef environment for the node"
    ),
    bootstrap_version: Optional[str] = typer.Option(
        None, "--bootstrap-version", help="The version of Chef to install"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (default: ~/.dockstrap/config.yaml)"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
):
    """Create a container running sshd and bootstrap it with knife."""
    spec = LaunchSpec(
        image=image,
        ssh_port=ssh_port,
        port_forward=port_forward,
        dns_servers=dns_servers,
        dns_search=dns_search,
        volumes=volumes,
        hostname=hostname,
        memory=memory,
        cpu=cpu,
        privileged=privileged,
        command=command,
    )
    options = BootstrapOptions(
        node_name=node_name,
        run_list=run_list,
        ssh_user=ssh_user,
        ssh_password=ssh_password,
        identity_file=identity_file,
        distro=distro,
        template_file=template_file,
        environment=environment,
        bootstrap_version=bootstrap_version,
    )

    try:
        create_container(spec, options, config_path=config, log_level=log_level)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        typer.echo(ctx.get_usage(), err=True)
        typer.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
        raise typer.Exit(1) from e
    except BootstrapDispatchError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(e.returncode or 1) from e
    except DockstrapError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def main():
    """Main entry point for CLI."""
    app()
