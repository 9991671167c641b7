"""Configuration management for showlog."""

import os
import yaml
from dataclasses import dataclass
from typing import Dict, Any, Optional

from .config_validator import ConfigValidator
from .glftpd_config import DEFAULT_GLFTPD_CONFIG
from ..core.layout import DEFAULT_VERSION

# Paths hidden from dirlog output, space separated.
DEFAULT_GROUP_DIRS = "/site/groups/"

# Subdirectory names hidden from dirlog output, comma separated.
DEFAULT_SUBDIR_LIST = (
    "cd?,cd??,dvd?,dvd??,disc?,disc??,disk?,disk??,extra?,extras?,"
    "sample?,samples?,sub?,subs?,subpack?,vobsub?,vobsubs?,proof?,cover?,covers?"
)


@dataclass(frozen=True)
class ShowlogSettings:
    """Resolved showlog settings, fixed for the whole run."""
    glftpd_config: str = DEFAULT_GLFTPD_CONFIG
    glftpd_version: int = DEFAULT_VERSION
    group_dirs: str = DEFAULT_GROUP_DIRS
    subdir_list: str = DEFAULT_SUBDIR_LIST
    max_results: int = 10
    log_level: str = 'WARNING'


class ConfigManager:
    """Manages loading and validation of showlog settings."""
    
    DEFAULT_CONFIG_LOCATIONS = [
        "showlog.yaml",
        "showlog.yml",
        os.path.expanduser("~/.showlog/config.yaml"),
        "/etc/showlog/config.yaml",
    ]
    
    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.
        
        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()
        
    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file.
        
        Built-in defaults are used when no config path was given and no
        file exists in the default locations.
        
        Returns:
            Dictionary containing configuration data.
            
        Raises:
            FileNotFoundError: If the given config file cannot be found.
            ValueError: If config file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}
        
        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {config_file}: {e}")
        
        # Validate configuration
        self.validator.validate(self.config_data)
        
        # Set defaults
        self._set_defaults()
        
        return self.config_data
    
    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.
        
        Returns:
            Path to configuration file, or None if there is none.
            
        Raises:
            FileNotFoundError: If an explicitly given file does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
        
        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location
        
        return None
    
    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = {
            'glftpd': {
                'config_file': DEFAULT_GLFTPD_CONFIG,
                'version': DEFAULT_VERSION
            },
            'exclusions': {
                'group_dirs': DEFAULT_GROUP_DIRS,
                'subdir_list': DEFAULT_SUBDIR_LIST
            },
            'defaults': {
                'max_results': 10
            },
            'logging': {
                'level': 'WARNING'
            }
        }
        
        # Merge defaults with existing config
        for section, section_defaults in defaults.items():
            if not self.config_data.get(section):
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if self.config_data[section].get(key) is None:
                    self.config_data[section][key] = value
    
    def get_settings(self) -> ShowlogSettings:
        """Get the loaded configuration as immutable settings.
        
        Returns:
            Settings built from the loaded configuration.
        """
        if not self.config_data:
            self.load_config()
        
        glftpd = self.config_data['glftpd']
        exclusions = self.config_data['exclusions']
        return ShowlogSettings(
            glftpd_config=glftpd['config_file'],
            glftpd_version=glftpd['version'],
            group_dirs=exclusions['group_dirs'],
            subdir_list=exclusions['subdir_list'],
            max_results=self.config_data['defaults']['max_results'],
            log_level=str(self.config_data['logging']['level']).upper()
        )
