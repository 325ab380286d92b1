"""
Atomic file writer for generated code.

Ensures that an interrupted write never leaves a truncated output file.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .errors import GenerationIOError


class AtomicWriter:
    """Handles atomic file writes.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Atomically replace the target file
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically, creating parent directories.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            GenerationIOError: If a file operation fails
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GenerationIOError(path.parent, "create directory", e) from e

        try:
            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise GenerationIOError(path, "create temporary file", e) from e

        temp_path = Path(temp_path_str)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise GenerationIOError(path, "write", e) from e
