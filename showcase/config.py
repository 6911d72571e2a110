"""Configuration management with environment variable and file support"""

import logging
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

PLACEHOLDER_MARKER = 'YOUR_'


class ConfigurationError(Exception):
    pass


def is_placeholder(value: Optional[str]) -> bool:
    """True when a setting is empty or still holds the template placeholder"""
    if not value or not isinstance(value, str):
        return True
    value = value.strip()
    return not value or PLACEHOLDER_MARKER in value


class Config:
    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or "config.yaml"
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self):
        config_path = Path(self.config_file)
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"⚠️  Could not load config file {config_path}: {e}")
                self._config = {}
            if not isinstance(self._config, dict):
                logger.warning(f"⚠️  Config file {config_path} is not a mapping, ignoring it")
                self._config = {}
        else:
            self._config = {}

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        env_key = env_var or key.upper().replace('.', '_')
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        if '.' in key:
            value = self._config
            for k in key.split('.'):
                if isinstance(value, dict):
                    value = value.get(k)
                else:
                    value = None
                    break
            if value is not None:
                return value
        elif key in self._config:
            return self._config[key]

        return default

    def get_bool(self, key: str, default: bool = False, env_var: Optional[str] = None) -> bool:
        value = self.get(key, default, env_var)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return bool(value)

    def get_int(self, key: str, default: int = 0, env_var: Optional[str] = None) -> int:
        value = self.get(key, default, env_var)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_float(self, key: str, default: float = 0.0, env_var: Optional[str] = None) -> float:
        value = self.get(key, default, env_var)
        try:
            return float(value)
        except (ValueError, TypeError):
            return default

    @property
    def sheet_csv_url(self) -> str:
        return self.get('sheet.csv_url', '', env_var='SHEET_CSV_URL') or ''

    @property
    def youtube_api_key(self) -> str:
        return self.get('youtube.api_key', '', env_var='YOUTUBE_API_KEY') or ''
