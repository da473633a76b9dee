# File: ConfigLoader.py
import yaml
from pathlib import Path
from typing import Union
from .FileServiceConfig import FileServiceSettings
import logging

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads file service settings from YAML files."""

    def load_settings(self, file_path: Union[str, Path]) -> FileServiceSettings:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                root = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Configuration file not found: {file_path}. Using defaults.")
            return FileServiceSettings()
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML file {file_path}: {e}")
            return FileServiceSettings()

        if root is None:
            return FileServiceSettings()
        if not isinstance(root, dict):
            logger.warning(f"Configuration YAML {file_path} root is not a dict: {type(root)}. Using defaults.")
            return FileServiceSettings()

        try:
            settings = FileServiceSettings.from_mapping(root)
        except ValueError as e:
            logger.error(f"Invalid configuration in {file_path}: {e}")
            return FileServiceSettings()

        logger.info(f"Loaded file service settings from {file_path} (adapter: {settings.adapter})")
        return settings
