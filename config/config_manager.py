"""
Configuration management for the arc-blog application.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging

import yaml

from models.core import BlogConfig, OutputFormat, DEFAULT_OUT_DIR
from config.error_handling import ConfigurationError, ValidationError
from services.interfaces import ConfigManagerInterface


VALID_OUTPUT_FORMATS = tuple(OutputFormat.choices())
YAML_SUFFIXES = ('.yaml', '.yml')


class ConfigManager(ConfigManagerInterface):
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_FILENAME = "arc_blog_config.json"

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize ConfigManager.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._default_config = self._create_default_config()

    def _create_default_config(self) -> Dict[str, Any]:
        """Create default configuration dictionary."""
        return {
            "out_dir": DEFAULT_OUT_DIR,
            "output": OutputFormat.TABLE.value,
            "analyze": False
        }

    def load_config(self, config_path: Union[str, Path]) -> BlogConfig:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            BlogConfig instance

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            self.logger.debug(f"Configuration file not found: {config_path}")
            return self._create_blog_config(self._default_config)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix.lower() in YAML_SUFFIXES:
                    config_data = yaml.safe_load(f) or {}
                else:
                    config_data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Invalid configuration file {config_path}: {str(e)}",
                details={"file_path": str(config_path)},
                original_exception=e
            )
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {str(e)}",
                details={"file_path": str(config_path)},
                original_exception=e
            )

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a mapping",
                details={"file_path": str(config_path)}
            )

        self.logger.info(f"Loaded configuration from: {config_path}")

        merged_config = self._merge_configs(self._default_config, config_data)
        try:
            self._validate_config(merged_config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e.message}",
                details={"file_path": str(config_path)},
                original_exception=e
            )

        return self._create_blog_config(merged_config)

    def save_default_config(self, output_path: Union[str, Path]) -> None:
        """
        Generate and save default configuration file.

        Args:
            output_path: Path where to save the default configuration

        Raises:
            ConfigurationError: If default configuration cannot be saved
        """
        output_path = Path(output_path)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(output_path, 'w', encoding='utf-8') as f:
                if output_path.suffix.lower() in YAML_SUFFIXES:
                    yaml.safe_dump(self._default_config, f, sort_keys=False)
                else:
                    json.dump(self._default_config, f, indent=2, ensure_ascii=False)

            self.logger.info(f"Default configuration saved to: {output_path}")

        except OSError as e:
            raise ConfigurationError(
                f"Failed to save default configuration to {output_path}: {str(e)}",
                details={"file_path": str(output_path)},
                original_exception=e
            )

    def merge_cli_args(self, config: BlogConfig, cli_args: Dict[str, Any]) -> BlogConfig:
        """
        Merge CLI arguments with existing configuration.
        CLI arguments take precedence over configuration file values.

        Args:
            config: Base BlogConfig instance
            cli_args: Dictionary of CLI arguments

        Returns:
            New BlogConfig instance with merged values
        """
        config_dict = self._blog_config_to_dict(config)

        for key in config_dict:
            if cli_args.get(key) is not None:
                config_dict[key] = cli_args[key]
                self.logger.debug(f"CLI override: {key} = {cli_args[key]}")

        return self._create_blog_config(config_dict)

    def _merge_configs(self, base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge a configuration dictionary on top of another."""
        merged = base_config.copy()
        for key, value in override_config.items():
            if key not in merged:
                self.logger.warning(f"Ignoring unknown configuration field: {key}")
                continue
            merged[key] = value
        return merged

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration dictionary.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValidationError: If configuration is invalid
        """
        if not isinstance(config['out_dir'], str) or not config['out_dir'].strip():
            raise ValidationError("out_dir must be a non-empty string")

        if not isinstance(config['output'], str) or config['output'].strip().lower() not in VALID_OUTPUT_FORMATS:
            raise ValidationError(
                f"output must be one of: {', '.join(VALID_OUTPUT_FORMATS)}"
            )

        if not isinstance(config['analyze'], bool):
            raise ValidationError("analyze must be a boolean")

    def _create_blog_config(self, config_dict: Dict[str, Any]) -> BlogConfig:
        """Create BlogConfig instance from dictionary."""
        return BlogConfig(
            out_dir=config_dict['out_dir'],
            output=config_dict['output'],
            analyze=config_dict['analyze']
        )

    def _blog_config_to_dict(self, config: BlogConfig) -> Dict[str, Any]:
        """Convert BlogConfig instance to dictionary."""
        return {
            'out_dir': config.out_dir,
            'output': config.output,
            'analyze': config.analyze
        }

    def get_config_path(self, config_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Get the default configuration file path.

        Args:
            config_dir: Optional directory for configuration file

        Returns:
            Path to configuration file
        """
        if config_dir is None:
            config_dir = Path.cwd()
        else:
            config_dir = Path(config_dir)

        return config_dir / self.DEFAULT_CONFIG_FILENAME
