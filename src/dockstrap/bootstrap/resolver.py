"""Layered lookup of bootstrap settings."""

from typing import Any, Dict, Optional

from dockstrap.models.bootstrap import BootstrapOptions
from dockstrap.models.config import KnifeConfig


SUPERUSER = "root"

HARD_DEFAULTS: Dict[str, Any] = {
    "ssh_user": SUPERUSER,
    "distro": "chef-full",
}


class ConfigResolver:
    """Resolves a setting from per-run overrides, then fallback config, then defaults."""

    def __init__(
        self,
        overrides: BootstrapOptions,
        fallback: Optional[KnifeConfig] = None,
        defaults: Optional[Dict[str, Any]] = None,
    ):
        self.overrides = overrides
        self.fallback = fallback or KnifeConfig()
        self.defaults = HARD_DEFAULTS if defaults is None else defaults

    def get(self, key: str) -> Any:
        value = getattr(self.overrides, key, None)
        if value:
            return value
        value = getattr(self.fallback, key, None)
        if value:
            return value
        return self.defaults.get(key)
