"""
Configuration Adapters - Load configuration from various sources.
"""

from .yaml_file import YamlConfigProvider, DEFAULT_CONFIG_FILE

__all__ = ["YamlConfigProvider", "DEFAULT_CONFIG_FILE"]
