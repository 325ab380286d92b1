"""
Black formatter for Python code.
"""

from __future__ import annotations

import logging

from ..config import FormatterConfig
from ..errors import FormatError
from .base import Formatter

logger = logging.getLogger(__name__)


class BlackFormatter(Formatter):
    """Formatter using black for Python code."""

    def __init__(self):
        self._black = None
        self._available = None

    def is_available(self) -> bool:
        """Check if black is installed."""
        if self._available is None:
            try:
                import black

                self._black = black
                self._available = True
            except ImportError:
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Python code using black.

        Args:
            code: Python source code to format
            config: Formatter configuration

        Returns:
            Formatted code

        Raises:
            FormatError: If black is missing or rejects the code
        """
        if not self.is_available():
            raise FormatError("black is not installed")

        black = self._black

        # Parse target version, unknown versions let black infer it
        target_versions = set()
        if config.target_version:
            target_version = getattr(black.TargetVersion, config.target_version.upper(), None)
            if target_version is not None:
                target_versions.add(target_version)
            else:
                logger.debug("black does not know target version %s, inferring it", config.target_version)

        # Create mode
        mode = black.Mode(
            target_versions=target_versions,
            line_length=config.line_length,
            string_normalization=config.string_normalization,
            magic_trailing_comma=config.magic_trailing_comma,
        )

        try:
            return black.format_str(code, mode=mode)
        except black.InvalidInput as e:
            raise FormatError(f"Generated Python code is not valid: {e}") from e

