"""
CLI Configuration

Centralized configuration for the termedit CLI subsystem.
"""

import os
import sys
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Plain mode (no colors or rich renderables)
    _plain_mode: Optional[bool] = None

    @classmethod
    def set_plain_mode(cls, enabled: Optional[bool]) -> None:
        """Force plain output on or off; None restores auto-detection"""
        cls._plain_mode = enabled

    @classmethod
    def is_plain_mode(cls) -> bool:
        """
        Check if plain mode is active.

        Plain mode is used whenever stdout is not a terminal, so piped output
        and scripts always see bare text. NO_COLOR and TERMEDIT_PLAIN force it.
        """
        if cls._plain_mode is not None:
            return cls._plain_mode
        if os.getenv("NO_COLOR") or os.getenv("TERMEDIT_PLAIN", "").lower() in ("1", "true", "yes"):
            return True
        isatty = getattr(sys.stdout, "isatty", None)
        return not (isatty and isatty())

    @classmethod
    def reset(cls) -> None:
        """Reset all switches (useful for testing)"""
        cls._plain_mode = None
