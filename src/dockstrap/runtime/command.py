"""Rendering of ``docker run`` invocations."""

from typing import List

from dockstrap.models.launch import LaunchSpec


def build_run_command(spec: LaunchSpec, docker_binary: str = "docker") -> List[str]:
    """Build the argument list that creates a detached container for ``spec``.

    Options are emitted in a fixed order so the same spec always renders
    to the same command. Values are passed through untouched; the runtime
    is left to reject malformed ones.
    """
    cmd = [docker_binary, "run", "-d", "-p", spec.ssh_port]
    for port in spec.port_forward:
        cmd.extend(["-p", port])
    for server in spec.dns_servers:
        cmd.extend(["--dns", server])
    for domain in spec.dns_search:
        cmd.extend(["--dns-search", domain])
    for volume in spec.volumes:
        cmd.extend(["-v", volume])
    if spec.hostname:
        cmd.extend(["-h", spec.hostname])
    if spec.memory:
        cmd.extend(["-m", spec.memory])
    if spec.cpu:
        cmd.extend(["-c", spec.cpu])
    if spec.privileged:
        cmd.append("--privileged")
    cmd.append(spec.image)
    cmd.extend(spec.command)
    return cmd


def render_command(cmd: List[str]) -> str:
    """Join an argument list into a single printable command line."""
    return " ".join(cmd)
