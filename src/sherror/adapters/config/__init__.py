"""
Configuration Adapters - Load settings and read/write the TOML artifact.
"""

from .environment import EnvironmentConfigProvider
from .loader import load_config
from .writeback import TomlConfigWriter

__all__ = ["EnvironmentConfigProvider", "load_config", "TomlConfigWriter"]
