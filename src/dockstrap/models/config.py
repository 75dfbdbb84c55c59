"""Configuration models."""

from typing import Optional
from pydantic import BaseModel, Field, validator


class RuntimeConfig(BaseModel):
    """Container runtime configuration."""
    docker_binary: str = Field(default="docker")
    launch_timeout: int = Field(default=300, ge=1)
    inspect_timeout: int = Field(default=30, ge=1)


class ReadinessConfig(BaseModel):
    """How long to wait before the container's SSH daemon is assumed up."""
    delay: float = Field(default=1.0, ge=0)
    poll: bool = Field(default=False)
    timeout: float = Field(default=30.0, gt=0)
    interval: float = Field(default=1.0, gt=0)


class KnifeConfig(BaseModel):
    """Fallback values for knife bootstrap, used when not given per run."""
    knife_binary: str = Field(default="knife")
    bootstrap_timeout: Optional[int] = None
    ssh_user: Optional[str] = None
    ssh_password: Optional[str] = None
    distro: Optional[str] = None
    template_file: Optional[str] = None
    environment: Optional[str] = None
    bootstrap_version: Optional[str] = None


class DockstrapConfig(BaseModel):
    """Main configuration model."""
    log_level: str = Field(default="INFO")
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)
    readiness: ReadinessConfig = Field(default_factory=ReadinessConfig)
    knife: KnifeConfig = Field(default_factory=KnifeConfig)

    @validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    class Config:
        """Pydantic config."""
        extra = "ignore"
