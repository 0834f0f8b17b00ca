"""
Rule set configuration loader.

Loads named rule sets (rules, custom messages, required default) from
YAML configuration files.
"""

from dataclasses import dataclass, field as dataclass_field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from fieldrules.core.base import MapData
from fieldrules.core.exceptions import ConfigurationError
from shared.utils.config import settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class RuleSetConfig:
    """A named set of rules and messages ready to build a validator"""
    name: str
    rules: MapData
    messages: MapData = dataclass_field(default_factory=dict)
    required_default: bool = False


class RuleSetConfigLoader:
    """
    Loads rule set configuration from YAML files.

    Supports:
    - Global settings (required_default)
    - Named rule sets with rules and messages
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to rule set YAML file
                        If None, uses RULES_CONFIG_PATH or config/validation/rules.yaml
        """
        if config_path is None:
            config_path = settings.RULES_CONFIG_PATH
        if config_path is None:
            base_dir = Path(__file__).parent.parent.parent
            config_path = base_dir / "config" / "validation" / "rules.yaml"

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
            ConfigurationError: If the document is not a mapping
        """
        if not self.config_path.exists():
            logger.warning(
                f"Rule set config file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse rule set config: {e}")
            raise

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"fieldrules: rule set config must be a mapping: {self.config_path}"
            )

        self._config = loaded
        logger.info(f"Loaded rule set config from: {self.config_path}")
        return self._config

    def get_global_settings(self) -> Dict[str, Any]:
        """
        Get global settings.

        Returns:
            Global settings dictionary
        """
        if self._config is None:
            self.load()

        return self._config.get('global') or {}

    def list_rule_sets(self) -> List[str]:
        """
        List the names of all configured rule sets.
        """
        if self._config is None:
            self.load()

        return list((self._config.get('rule_sets') or {}).keys())

    def get_rule_set(self, name: str) -> RuleSetConfig:
        """
        Get a rule set by name.

        Args:
            name: Rule set identifier

        Returns:
            RuleSetConfig

        Raises:
            ConfigurationError: If the rule set is unknown or malformed
        """
        if self._config is None:
            self.load()

        rule_sets = self._config.get('rule_sets') or {}
        if name not in rule_sets:
            raise ConfigurationError(f"fieldrules: rule set '{name}' is not configured")

        raw = rule_sets[name] or {}
        if not isinstance(raw, dict):
            raise ConfigurationError(f"fieldrules: rule set '{name}' must be a mapping")

        required_default = raw.get(
            'required_default',
            self.get_global_settings().get('required_default', settings.REQUIRED_DEFAULT)
        )

        return RuleSetConfig(
            name=name,
            rules=self._to_map_data(name, 'rules', raw.get('rules')),
            messages=self._to_map_data(name, 'messages', raw.get('messages')),
            required_default=bool(required_default),
        )

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()

    @staticmethod
    def _to_map_data(rule_set: str, section: str, raw: Any) -> MapData:
        """Normalize a rules/messages section into field -> list of strings"""
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"fieldrules: '{section}' of rule set '{rule_set}' must be a mapping"
            )

        data: MapData = {}
        for field, entries in raw.items():
            # A single rule may be written without a list
            if isinstance(entries, str):
                entries = [entries]
            if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
                raise ConfigurationError(
                    f"fieldrules: '{section}.{field}' of rule set '{rule_set}' "
                    "must be a string or a list of strings"
                )
            data[str(field)] = list(entries)
        return data

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration when file doesn't exist.
        """
        return {
            'global': {
                'required_default': settings.REQUIRED_DEFAULT,
            },
            'rule_sets': {}
        }
