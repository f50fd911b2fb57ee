"""
termedit User Configuration

Hierarchical config system with global defaults + local overrides:
- Global: ~/.termedit/config.json (cross-project settings)
- Local: .termedit/config.json (project-specific overrides)

Config structure:
{
  "edit": {
    "indent_unit": "    ",     // Indentation used for entries added to empty lists
    "backup": false            // Copy the file to .termedit/backups before rewriting
  },
  "output": {
    "line_numbers": false,     // Prefix read output with source line numbers
    "diff_context": 3          // Context lines in --diff output
  }
}
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from termedit.logging_config import logger
from termedit.paths import get_paths


# Default configuration
DEFAULT_CONFIG = {
    "edit": {
        "indent_unit": "    ",
        "backup": False,
    },
    "output": {
        "line_numbers": False,
        "diff_context": 3,
    },
}


class UserConfig:
    """
    Manages hierarchical user configuration.

    Load order (with override):
    1. Default config (hardcoded)
    2. Global config (~/.termedit/config.json)
    3. Local config (.termedit/config.json)
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize config manager.

        Args:
            project_root: Project root directory (defaults to CWD)
        """
        paths = get_paths(project_root) if project_root is not None else get_paths()
        self.global_config_path = paths.global_config
        self.local_config_path = paths.local_config

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration with hierarchical override.

        Returns:
            Merged configuration dictionary
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        for label, path in (("global", self.global_config_path), ("local", self.local_config_path)):
            if not path.exists():
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load {label} config from {path}: {e}")
                continue
            if not isinstance(loaded, dict):
                logger.warning(f"Ignoring {label} config {path}: top level must be an object")
                continue
            config = self._deep_merge(config, loaded)
            logger.debug(f"Loaded {label} config from {path}")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries, with override taking precedence.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "edit.indent_unit")
            default: Default value if key not found

        Returns:
            Config value

        Examples:
            config.get("edit.backup")  # False
            config.get("output.diff_context")  # 3
        """
        value = self._config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


# Global singleton
_config: Optional[UserConfig] = None


def get_user_config(project_root: Optional[Path] = None) -> UserConfig:
    """
    Get the user configuration singleton.

    Args:
        project_root: Optional project root override

    Returns:
        UserConfig instance
    """
    global _config
    if project_root is not None:
        return UserConfig(project_root)
    if _config is None:
        _config = UserConfig()
    return _config


def reset_user_config() -> None:
    """Reset the global config singleton (for testing)."""
    global _config
    _config = None
