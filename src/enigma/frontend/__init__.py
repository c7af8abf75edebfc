from .config import MachineConfig, load_config, load_default_config, parse_config
from .session import process
from .settings import Settings, apply_settings, configure, parse_settings

__all__ = [
    "MachineConfig",
    "parse_config",
    "load_config",
    "load_default_config",
    "Settings",
    "parse_settings",
    "apply_settings",
    "configure",
    "process",
]
