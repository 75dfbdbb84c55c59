"""Container launch specification models."""

import re
from typing import List, Optional
from pydantic import BaseModel, Field, validator


DEFAULT_RUN_COMMAND = ["/usr/sbin/sshd", "-D", "-o", "UseDNS=no", "-o", "UsePAM=no"]

_LIST_SEPARATOR = re.compile(r"[\s,]+")


def split_list(value) -> List[str]:
    """Split a comma/whitespace separated option value into its items."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    items: List[str] = []
    for entry in value:
        items.extend(part for part in _LIST_SEPARATOR.split(str(entry)) if part)
    return items


class LaunchSpec(BaseModel):
    """Parameters for creating a detached container running an SSH daemon."""
    image: Optional[str] = Field(None, description="Container image reference")
    ssh_port: str = Field(default="22", description="SSH port to publish")
    port_forward: List[str] = Field(default_factory=list)
    dns_servers: List[str] = Field(default_factory=list)
    dns_search: List[str] = Field(default_factory=list)
    volumes: List[str] = Field(default_factory=list)
    hostname: Optional[str] = None
    memory: Optional[str] = None
    cpu: Optional[str] = None
    privileged: bool = Field(default=False)
    command: List[str] = Field(default_factory=lambda: list(DEFAULT_RUN_COMMAND))

    @validator("port_forward", "dns_servers", "dns_search", "volumes", pre=True)
    def split_option_lists(cls, v):
        """Accept comma or whitespace separated strings."""
        return split_list(v)

    @validator("command", pre=True)
    def default_command(cls, v):
        """Fall back to sshd when no command is given."""
        if not v:
            return list(DEFAULT_RUN_COMMAND)
        if isinstance(v, str):
            return v.split()
        return v

    class Config:
        """Pydantic config."""
        extra = "ignore"
