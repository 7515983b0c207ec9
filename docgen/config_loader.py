# docgen/config_loader.py

"""
Configuration loader for the documentation generator.
Loads settings from config.yaml merged over built-in defaults. Environment
variable overrides are applied by the LLM clients, not here.
"""

import copy
import os
import yaml
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages configuration settings."""

    DEFAULT_CONFIG = {
        'llm': {
            'provider': 'ollama',
            'base_url': 'http://localhost:11434',
            'model': 'qwen2.5-coder:7b',
            'gemini_model': 'gemini-2.0-flash',
            'temperature': 0.3,
            'max_output_tokens': 1024,
            'timeout': 120,
            'max_retries': 3,
            'rate_limit_calls_per_minute': 20,
        },
        'generation': {
            'style': 'google',
            'max_concurrency': 3,
            'batch_delay_seconds': 1.0,
        },
        'cache': {
            'enabled': True,
            'file': '.docstring_cache.json'
        },
        'history': {
            'enabled': True,
            'file': '.docgen_history.json',
            'max_entries': 50
        },
        'output': {
            'suffix': '.documented',
            'in_place': False
        },
        'logging': {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'file': 'docgen.log'
        },
        'security': {
            'forbidden_paths': ['/etc', '/sys', '/proc', '~/.ssh'],
            'validate_paths': True
        }
    }

    def __init__(self, config_path: str = 'config.yaml'):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to the configuration YAML file
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file or use defaults.

        Returns:
            Configuration dictionary
        """
        config = copy.deepcopy(self.DEFAULT_CONFIG)

        if not os.path.exists(self.config_path):
            logger.info(f"Config file not found at {self.config_path}, using defaults")
            return config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {self.config_path}: {e}")
            logger.info("Using default configuration")
            return config

        if isinstance(user_config, dict):
            config = self._merge_configs(config, user_config)
            logger.info(f"Loaded configuration from {self.config_path}")
        elif user_config is not None:
            logger.warning(f"Ignoring non-mapping config in {self.config_path}")
        return config

    def _merge_configs(self, default: Dict, user: Dict) -> Dict:
        """Recursively merge user config into default config."""
        merged = default.copy()

        for key, value in user.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_configs(merged[key], value)
            else:
                merged[key] = value

        return merged

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'llm.model')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_llm_settings(self) -> Dict[str, Any]:
        """Get the whole llm section."""
        return dict(self.config.get('llm', {}))

    def get_llm_provider(self) -> str:
        return str(self.get('llm.provider', 'ollama')).lower()

    def get_rate_limit(self) -> int:
        """Get rate limit for LLM calls per minute."""
        return int(self.get('llm.rate_limit_calls_per_minute', 20))

    def get_docstring_style(self) -> str:
        return self.get('generation.style', 'google')

    def get_max_concurrency(self) -> int:
        return int(self.get('generation.max_concurrency', 3))

    def get_batch_delay(self) -> float:
        return float(self.get('generation.batch_delay_seconds', 1.0))

    def is_cache_enabled(self) -> bool:
        return bool(self.get('cache.enabled', True))

    def get_cache_file(self) -> str:
        return self.get('cache.file', '.docstring_cache.json')

    def is_history_enabled(self) -> bool:
        return bool(self.get('history.enabled', True))

    def get_history_file(self) -> str:
        return self.get('history.file', '.docgen_history.json')

    def get_history_max_entries(self) -> int:
        return int(self.get('history.max_entries', 50))

    def get_output_suffix(self) -> str:
        return self.get('output.suffix', '.documented')

    def is_in_place(self) -> bool:
        return bool(self.get('output.in_place', False))

    def get_log_level(self) -> str:
        return self.get('logging.level', 'INFO')

    def get_log_format(self) -> str:
        return self.get('logging.format', '%(levelname)s - %(message)s')

    def get_log_file(self) -> str:
        return self.get('logging.file', 'docgen.log')

    def get_forbidden_paths(self) -> List[str]:
        """Get list of forbidden paths with ~ expanded."""
        return [os.path.expanduser(p) for p in self.get('security.forbidden_paths', [])]

    def should_validate_paths(self) -> bool:
        return bool(self.get('security.validate_paths', True))
