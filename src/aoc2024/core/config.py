"""Configuration management for the YAML config file."""

import inspect
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .paths import default_config_path, get_system_path, resolve_data_file
from .registry import DAYS, get_solver

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = default_config_path()
DEFAULT_CONFIG_DIR = DEFAULT_CONFIG_PATH.parent
_TEMPLATE_CONFIG = get_system_path("config", "config.yaml")

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for aoc2024
inputs:
  dir: "inputs"
  pattern: "day{day:02d}.txt"

days:
  14:
    width: 101
    height: 103
    seconds: 100
    tree_neighbors: 200
    max_seconds: 10000
  18:
    width: 71
    height: 71
    fallen: 1024
  20:
    max_cheat: 2
    min_save: 100
    max_cheat2: 20
    min_save2: 100
  21:
    robots: 3
    robots2: 26

answers: {}
"""


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


def _solver_params(day: int) -> set:
    """Return the keyword parameter names accepted by a day's solver."""
    signature = inspect.signature(get_solver(day))
    return {
        name
        for name, param in signature.parameters.items()
        if param.kind in (param.KEYWORD_ONLY, param.POSITIONAL_OR_KEYWORD) and name != "text"
    }


class ConfigManager:
    """Manages loading and validation of the YAML configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure a baseline config file exists."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self.base_dir = str(path.parent)
        self._config = None
        self._ensure_default_config()

    def load_config(self) -> Dict[str, Any]:
        """Load the main configuration file."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
                logger.debug("Loaded configuration from %s", self.config_path)
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

        return self._config

    def _ensure_default_config(self) -> None:
        """Create the default configuration file if it is missing."""
        config_file = Path(self.config_path)
        if config_file.exists():
            return

        config_file.parent.mkdir(parents=True, exist_ok=True)
        if _TEMPLATE_CONFIG.exists():
            try:
                shutil.copyfile(_TEMPLATE_CONFIG, config_file)
                logger.info("Created default config.yaml at %s", config_file)
                return
            except OSError as exc:
                logger.warning("Failed to copy template config: %s", exc)
        _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
        logger.info("Created fallback default config.yaml at %s", config_file)

    def get_inputs_dir(self) -> Path:
        """Return the directory holding puzzle inputs (relative to the data dir)."""
        inputs = self.load_config().get('inputs') or {}
        return resolve_data_file(str(inputs.get('dir') or 'inputs'))

    def get_input_path(self, day: int) -> Path:
        """Return the expected input file path for *day*."""
        inputs = self.load_config().get('inputs') or {}
        pattern = inputs.get('pattern') or 'day{day:02d}.txt'
        return self.get_inputs_dir() / pattern.format(day=day)

    def get_day_params(self, day: int) -> Dict[str, Any]:
        """Get the solver keyword parameters configured for *day*."""
        days = self.load_config().get('days') or {}
        params = days.get(day, days.get(str(day))) or {}
        return dict(params)

    def get_expected_answers(self, day: int) -> Optional[Tuple[Any, Any]]:
        """Get the known ``(part1, part2)`` answers for *day*, if recorded."""
        answers = self.load_config().get('answers') or {}
        expected = answers.get(day, answers.get(str(day)))
        if expected is None:
            return None
        return tuple(expected)

    def validate_config(self) -> bool:
        """Validate the configuration file."""
        try:
            config = self.load_config()

            if not isinstance(config, dict):
                logger.error("Config root must be a mapping")
                return False

            inputs = config.get('inputs')
            if not isinstance(inputs, dict):
                logger.error("Missing required section 'inputs' in main config")
                return False
            pattern = inputs.get('pattern', 'day{day:02d}.txt')
            try:
                pattern.format(day=1)
            except (AttributeError, KeyError, IndexError, ValueError) as e:
                logger.error(f"inputs.pattern is not a valid day pattern: {e}")
                return False

            for section in ('days', 'answers'):
                value = config.get(section)
                if value is not None and not isinstance(value, dict):
                    logger.error(f"'{section}' must be a mapping of day number to values")
                    return False

            for key, params in (config.get('days') or {}).items():
                day = int(key)
                if day not in DAYS:
                    logger.error(f"'days' contains unknown day '{key}'")
                    return False
                if params is None:
                    continue
                if not isinstance(params, dict):
                    logger.error(f"Parameters for day {day} must be a mapping")
                    return False
                unknown = set(params) - _solver_params(day)
                if unknown:
                    logger.error(f"Day {day} does not accept parameters: {', '.join(sorted(unknown))}")
                    return False

            for key, expected in (config.get('answers') or {}).items():
                if int(key) not in DAYS:
                    logger.error(f"'answers' contains unknown day '{key}'")
                    return False
                if not isinstance(expected, list) or len(expected) != 2:
                    logger.error(f"Answers for day {key} must be a [part1, part2] list")
                    return False

            logger.debug("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_DIR",
]
