"""Configuration module for gerbersort."""

from .manager import ConfigManager, get_config, get_config_manager
from .models import ClassifierSettings, GerberSortConfig, LoggingSettings, ScanSettings

__all__ = [
    "GerberSortConfig",
    "ClassifierSettings",
    "ScanSettings",
    "LoggingSettings",
    "ConfigManager",
    "get_config",
    "get_config_manager",
]
