"""
termedit Path Configuration

Centralized path management for termedit's own data files.
All paths are relative to the project root (current working directory).

Directory Structure:
.termedit/
├── config.json          # Local config overrides
├── backups/             # Timestamped copies taken before a file is rewritten
└── logs/                # Log files (opt-in)
"""

import os
from pathlib import Path
from typing import Optional


class TermEditPaths:
    """
    Centralized path configuration for termedit.

    All paths are lazily resolved relative to project_root.
    Default project_root is current working directory.
    """

    # Directory name for all termedit data
    TERMEDIT_DIR = ".termedit"

    # File names (without paths)
    CONFIG_NAME = "config.json"

    # Subdirectory names
    BACKUPS_DIR = "backups"
    LOGS_DIR = "logs"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize paths configuration.

        Args:
            project_root: Root directory for the project. Defaults to CWD.
        """
        self._project_root = project_root

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        if self._project_root is None:
            return Path.cwd()
        return self._project_root

    @property
    def termedit_dir(self) -> Path:
        """Get the .termedit directory path."""
        return self.project_root / self.TERMEDIT_DIR

    @property
    def global_dir(self) -> Path:
        """Get the per-user directory (~/.termedit, or $TERMEDIT_HOME)."""
        override = os.getenv("TERMEDIT_HOME")
        if override:
            return Path(override)
        return Path.home() / self.TERMEDIT_DIR

    @property
    def local_config(self) -> Path:
        """Get the project-local config file path."""
        return self.termedit_dir / self.CONFIG_NAME

    @property
    def global_config(self) -> Path:
        """Get the per-user config file path."""
        return self.global_dir / self.CONFIG_NAME

    @property
    def backups_dir(self) -> Path:
        """Get the backups directory path."""
        return self.termedit_dir / self.BACKUPS_DIR

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.termedit_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create all necessary directories if they don't exist."""
        self.termedit_dir.mkdir(parents=True, exist_ok=True)
        self.backups_dir.mkdir(exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)


# Global instance for convenience
_default_paths: Optional[TermEditPaths] = None


def get_paths(project_root: Optional[Path] = None) -> TermEditPaths:
    """
    Get the paths configuration.

    Args:
        project_root: Optional project root override

    Returns:
        TermEditPaths instance
    """
    global _default_paths
    if project_root is not None:
        return TermEditPaths(project_root)
    if _default_paths is None:
        _default_paths = TermEditPaths()
    return _default_paths


def reset_paths() -> None:
    """Reset the global paths instance (useful for testing)."""
    global _default_paths
    _default_paths = None
