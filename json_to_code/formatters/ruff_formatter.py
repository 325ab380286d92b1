"""
Ruff formatter for Python code.
"""

from __future__ import annotations

import subprocess

from ..config import FormatterConfig
from ..errors import FormatError
from .base import Formatter


class RuffFormatter(Formatter):
    """Formatter using the ruff command line for Python code."""

    def __init__(self):
        self._available = None

    def is_available(self) -> bool:
        """Check if ruff is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    ["ruff", "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Python code using ruff.

        Args:
            code: Python source code to format
            config: Formatter configuration

        Returns:
            Formatted code

        Raises:
            FormatError: If ruff is missing or rejects the code
        """
        if not self.is_available():
            raise FormatError("ruff is not installed")

        # Build ruff format command, reading from stdin
        cmd = ["ruff", "format", "--stdin-filename", "code.py"]

        if config.line_length:
            cmd.extend(["--line-length", str(config.line_length)])

        if config.target_version:
            cmd.extend(["--target-version", config.target_version])

        cmd.append("-")

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            raise FormatError(f"ruff format failed: {e}") from e

        if result.returncode != 0:
            raise FormatError(f"Generated Python code is not valid: {result.stderr.strip()}")
        return result.stdout
