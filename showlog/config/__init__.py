"""Configuration management for showlog."""

from .config_manager import ConfigManager, ShowlogSettings
from .config_validator import ConfigValidator
from .glftpd_config import GlftpdPaths, load_glftpd_config

__all__ = ["ConfigManager", "ConfigValidator", "GlftpdPaths", "ShowlogSettings", "load_glftpd_config"]
