"""Bootstrap request models."""

from typing import List, Optional
from pydantic import BaseModel, Field, validator

from dockstrap.models.launch import split_list


class BootstrapOptions(BaseModel):
    """Per-run bootstrap overrides, usually collected from the command line."""
    node_name: Optional[str] = Field(None, description="Chef node name")
    run_list: List[str] = Field(default_factory=list)
    ssh_user: Optional[str] = None
    ssh_password: Optional[str] = None
    identity_file: Optional[str] = None
    distro: Optional[str] = None
    template_file: Optional[str] = None
    environment: Optional[str] = None
    bootstrap_version: Optional[str] = None

    @validator("run_list", pre=True)
    def split_run_list(cls, v):
        """Accept a comma separated run-list."""
        return split_list(v)

    class Config:
        """Pydantic config."""
        extra = "ignore"


class SSHCredentials(BaseModel):
    """SSH login details for the bootstrap step."""
    user: str
    password: Optional[str] = None
    identity_file: Optional[str] = None
    port: str = Field(default="22")

    class Config:
        """Pydantic config."""
        frozen = True


class BootstrapRequest(BaseModel):
    """Everything the second-stage bootstrap needs to converge a node."""
    address: str = Field(..., description="Address of the node to bootstrap")
    node_name: str = Field(..., description="Chef node name")
    run_list: List[str] = Field(default_factory=list)
    ssh: SSHCredentials
    use_sudo: bool = Field(default=False)
    use_sudo_password: bool = Field(default=False)
    distro: str = Field(..., description="Bootstrap template name")
    template_file: Optional[str] = None
    environment: Optional[str] = None
    bootstrap_version: Optional[str] = None

    class Config:
        """Pydantic config."""
        frozen = True
