"""Configuration validation for showlog."""

from typing import Dict, Any

from ..core.layout import KNOWN_VERSIONS


class ConfigValidator:
    """Validates showlog settings."""
    
    KNOWN_SECTIONS = ['glftpd', 'exclusions', 'defaults', 'logging']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    
    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.
        
        Args:
            config: Configuration dictionary to validate.
            
        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_structure(config)
        self._validate_glftpd(config.get('glftpd') or {})
        self._validate_exclusions(config.get('exclusions') or {})
        self._validate_defaults(config.get('defaults') or {})
        self._validate_logging(config.get('logging') or {})
    
    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.
        
        Args:
            config: Configuration dictionary.
            
        Raises:
            ValueError: If the document or a section is not a mapping.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping of sections")
        
        unknown_sections = [section for section in config if section not in self.KNOWN_SECTIONS]
        if unknown_sections:
            raise ValueError(f"Unknown configuration sections: {unknown_sections}")
        
        for section, values in config.items():
            if values is not None and not isinstance(values, dict):
                raise ValueError(f"Configuration section '{section}' must be a mapping")
    
    def _validate_glftpd(self, glftpd: Dict[str, Any]) -> None:
        if 'version' in glftpd:
            version = glftpd['version']
            if isinstance(version, bool) or not isinstance(version, int) or version not in KNOWN_VERSIONS:
                raise ValueError(
                    f"Unknown glftpd version: {version!r} (expected one of {list(KNOWN_VERSIONS)})"
                )
        
        if 'config_file' in glftpd and not isinstance(glftpd['config_file'], str):
            raise ValueError("glftpd config_file must be a string")
    
    def _validate_exclusions(self, exclusions: Dict[str, Any]) -> None:
        for key in ('group_dirs', 'subdir_list'):
            value = exclusions.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Exclusion '{key}' must be a string")
    
    def _validate_defaults(self, defaults: Dict[str, Any]) -> None:
        if 'max_results' in defaults:
            max_results = defaults['max_results']
            if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
                raise ValueError(f"max_results must be a positive integer: {max_results!r}")
    
    def _validate_logging(self, logging_config: Dict[str, Any]) -> None:
        level = logging_config.get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")
