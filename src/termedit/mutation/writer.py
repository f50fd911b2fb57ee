"""
ConfigWriter: the save step for re-serialized documents.

Writes go through a temp file in the target directory followed by an
atomic rename, optionally after a timestamped backup. Line endings are
never touched: the serialized text already carries the original ones.
"""

import difflib
import os
import shutil
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from termedit.logging_config import logger
from .config import get_mutation_config


class ConfigWriter:
    """
    Deliver new text to its destination.

    Destinations, in priority order: unified diff (nothing written),
    standard output, an alternate output path, or the original file.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize writer with optional config.

        Args:
            config: Optional config overrides (merges with get_mutation_config())
        """
        self.config = get_mutation_config(config)

    def save(
        self,
        path: Path,
        original: str,
        new_text: str,
        output: Optional[Path] = None,
        to_stdout: bool = False,
        diff: bool = False,
        stream=None,
    ) -> Optional[str]:
        """
        Save `new_text` according to the requested destination.

        Args:
            path: File the original text was read from
            original: Original text (for diffs)
            new_text: Re-serialized text
            output: Alternate output path
            to_stdout: Print the new text instead of writing
            diff: Print a unified diff instead of writing
            stream: Text stream for stdout/diff output (defaults to sys.stdout)

        Returns:
            Path written to, or None when nothing was written to disk

        Raises:
            OSError: If the file cannot be written
        """
        stream = stream or sys.stdout

        if diff:
            stream.write(self.unified_diff(str(path), original, new_text))
            return None

        if to_stdout:
            stream.write(new_text)
            return None

        target = Path(output) if output is not None else Path(path)
        if target.exists() and self.config["backup_enabled"]:
            self.create_backup(target)

        self.atomic_write(target, new_text)
        logger.info(f"Wrote {target}")
        return str(target)

    def unified_diff(self, file_path: str, original: str, modified: str) -> str:
        """
        Unified diff between original and modified text.

        Args:
            file_path: Path shown in the diff headers
            original: Original text
            modified: Modified text

        Returns:
            Diff text (empty if identical)
        """
        original_lines = original.splitlines(keepends=True)
        modified_lines = modified.splitlines(keepends=True)

        lines = []
        for line in difflib.unified_diff(
            original_lines,
            modified_lines,
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
            n=self.config["diff_context"],
        ):
            lines.append(line if line.endswith("\n") else line + "\n")
        return "".join(lines)

    def create_backup(self, file_path: Path) -> str:
        """
        Create a timestamped backup of a file.

        Args:
            file_path: Path to file to backup

        Returns:
            Path to the backup file
        """
        backup_dir = Path(self.config["backup_dir"])
        backup_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        backup_path = backup_dir / f"{file_path.name}.{timestamp}.backup"

        shutil.copy2(str(file_path), str(backup_path))
        logger.debug(f"Created backup: {backup_path}")
        return str(backup_path)

    def atomic_write(self, file_path: Path, content: str) -> None:
        """
        Write file atomically using temp file + rename.

        Args:
            file_path: Target file path
            content: Content to write
        """
        # Same directory as the target keeps the rename on one filesystem
        fd, temp_path = tempfile.mkstemp(
            dir=str(file_path.parent),
            prefix=f".{file_path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            if file_path.exists():
                shutil.copymode(str(file_path), temp_path)
            os.replace(temp_path, str(file_path))
        except BaseException:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise
        logger.debug(f"Atomic write completed: {file_path}")
