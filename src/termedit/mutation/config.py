"""
Configuration for edit sessions and the save step.

Merges hardcoded defaults with the user's hierarchical config.
"""

from typing import Any, Dict, Optional

from termedit.exceptions import ConfigError
from termedit.paths import get_paths
from termedit.user_config import get_user_config


def get_mutation_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Get mutation configuration with dynamic paths.

    Paths are resolved at runtime to support the .termedit/ directory structure.

    Args:
        overrides: Values that win over both defaults and user config

    Returns:
        Flat settings dictionary

    Raises:
        ConfigError: If a configured value is unusable
    """
    paths = get_paths()
    user_config = get_user_config()

    config = {
        "backup_enabled": bool(user_config.get("edit.backup", False)),
        "backup_dir": str(paths.backups_dir),
        "indent_unit": user_config.get("edit.indent_unit", "    "),
        "diff_context": user_config.get("output.diff_context", 3),
        "line_numbers": bool(user_config.get("output.line_numbers", False)),
    }
    config.update(overrides or {})

    validate_mutation_config(config)
    return config


def validate_mutation_config(config: Dict[str, Any]) -> None:
    """
    Validate settings that would otherwise corrupt output.

    Raises:
        ConfigError: If the indent unit is not whitespace or the diff context is negative
    """
    indent_unit = config.get("indent_unit")
    if not isinstance(indent_unit, str) or (indent_unit and not indent_unit.isspace()) or "\n" in indent_unit:
        raise ConfigError(f"edit.indent_unit must be spaces or tabs, got {indent_unit!r}")

    diff_context = config.get("diff_context")
    if not isinstance(diff_context, int) or isinstance(diff_context, bool) or diff_context < 0:
        raise ConfigError(f"output.diff_context must be a non-negative integer, got {diff_context!r}")
