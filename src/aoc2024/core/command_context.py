"""
Command context for shared initialization across CLI commands.

Bundles config loading and validation with the per-day lookups every command
needs (input file locations, solver parameters, known answers).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .config import ConfigManager


logger = logging.getLogger(__name__)


class CommandContext:
    """Encapsulates shared initialization logic for CLI commands.

    Example:
        ```python
        with CommandContext(config_path) as ctx:
            if ctx.has_input(5):
                text = ctx.read_input(5)
                params = ctx.day_params(5)
        ```
    """

    def __init__(self, config_path: Optional[str] = None):
        """Load and validate the configuration.

        Args:
            config_path: Path to main config file (None = use default)

        Raises:
            ValueError: If configuration is invalid
        """
        self.config_manager = ConfigManager(config_path)

        if not self.config_manager.validate_config():
            raise ValueError("Invalid configuration. Run 'aoc2024 status' for details.")

        self.config = self.config_manager.load_config()

        logger.debug(f"CommandContext initialized with config from {self.config_manager.config_path}")

    def input_path(self, day: int) -> Path:
        """Return where the puzzle input for *day* is expected."""
        return self.config_manager.get_input_path(day)

    def has_input(self, day: int) -> bool:
        return self.input_path(day).is_file()

    def read_input(self, day: int) -> str:
        """Read the configured puzzle input for *day*.

        Raises:
            FileNotFoundError: If the input file does not exist
        """
        path = self.input_path(day)
        if not path.is_file():
            raise FileNotFoundError(f"No puzzle input for day {day} at {path}")
        return path.read_text(encoding="utf-8")

    def day_params(self, day: int, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Configured solver parameters for *day*, with *overrides* taking precedence."""
        params = self.config_manager.get_day_params(day)
        params.update(overrides or {})
        return params

    def expected_answers(self, day: int) -> Optional[Tuple[Any, Any]]:
        return self.config_manager.get_expected_answers(day)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Nothing is held open between commands.
        return None
