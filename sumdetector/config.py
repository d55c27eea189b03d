"""
Configuration management for the sum detector.

This module handles loading, saving, and validating the YAML configuration
used by the command-line front end, with environment variable overrides.
"""

import os
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .algorithms.selector import AlgorithmStrategy, DEFAULT_ALGORITHM
from .engine.errors import ConfigurationError
from .performance.memory import PROBE_NAMES


OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DetectorConfig:
    """Configuration for analysis runs and their presentation."""

    # Analysis
    default_algorithm: str = DEFAULT_ALGORITHM
    memory_probe: str = "psutil"  # psutil, tracemalloc or none
    max_input_size: Optional[int] = None  # None means unbounded
    normalize_input: bool = False

    # Presentation
    output_format: str = "text"
    log_level: str = "WARNING"
    log_file: Optional[str] = None  # JSON lines, one record per log call

    # Benchmark defaults
    benchmark_sizes: List[int] = field(default_factory=lambda: [10, 20, 40, 80])
    benchmark_seed: int = 42
    benchmark_value_range: int = 100

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DetectorConfig':
        """
        Create from dictionary.

        Raises:
            ConfigurationError: If the dictionary has keys this class lacks
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                details={'unknown_keys': unknown}
            )
        return cls(**data)

    def type_errors(self) -> List[str]:
        """Problems with value types, as YAML can hand back anything."""
        errors = []

        for name in ("default_algorithm", "memory_probe", "output_format", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str):
                errors.append(f"{name} must be a string, got {value!r}")

        for name in ("benchmark_seed", "benchmark_value_range"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} must be an integer, got {value!r}")

        if self.max_input_size is not None and (
                isinstance(self.max_input_size, bool) or not isinstance(self.max_input_size, int)):
            errors.append(f"max_input_size must be an integer or null, got {self.max_input_size!r}")

        if not isinstance(self.normalize_input, bool):
            errors.append(f"normalize_input must be true or false, got {self.normalize_input!r}")

        if self.log_file is not None and not isinstance(self.log_file, str):
            errors.append(f"log_file must be a path string or null, got {self.log_file!r}")

        sizes = self.benchmark_sizes
        if not isinstance(sizes, list) or any(isinstance(s, bool) or not isinstance(s, int) for s in sizes):
            errors.append(f"benchmark_sizes must be a list of integers, got {sizes!r}")

        return errors

    def validate(self) -> List[str]:
        """Return a list of problems, empty when the configuration is valid."""
        errors = self.type_errors()
        if errors:
            return errors

        if AlgorithmStrategy.from_identifier(self.default_algorithm) is None:
            choices = ", ".join(s.value for s in AlgorithmStrategy)
            errors.append(f"default_algorithm must be one of {choices}, got '{self.default_algorithm}'")

        if self.memory_probe not in PROBE_NAMES:
            errors.append(f"memory_probe must be one of {', '.join(PROBE_NAMES)}, got '{self.memory_probe}'")

        if self.max_input_size is not None and self.max_input_size < 1:
            errors.append(f"max_input_size must be positive, got {self.max_input_size}")

        if self.output_format not in OUTPUT_FORMATS:
            errors.append(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got '{self.output_format}'")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")

        if not self.benchmark_sizes or any(size < 1 for size in self.benchmark_sizes):
            errors.append("benchmark_sizes must be a non-empty list of positive sizes")

        if self.benchmark_value_range < 0:
            errors.append(f"benchmark_value_range must be non-negative, got {self.benchmark_value_range}")

        return errors


def _parse_optional_int(value: str) -> Optional[int]:
    if value.strip().lower() in ("", "none", "null"):
        return None
    return int(value)


def _parse_optional_path(value: str) -> Optional[str]:
    return value.strip() or None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "yes", "1", "on")


# Environment variable -> (attribute, parser)
ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "SUMDETECTOR_ALGORITHM": ("default_algorithm", str),
    "SUMDETECTOR_MEMORY_PROBE": ("memory_probe", str),
    "SUMDETECTOR_MAX_INPUT_SIZE": ("max_input_size", _parse_optional_int),
    "SUMDETECTOR_NORMALIZE_INPUT": ("normalize_input", _parse_bool),
    "SUMDETECTOR_OUTPUT_FORMAT": ("output_format", str),
    "SUMDETECTOR_LOG_LEVEL": ("log_level", str),
    "SUMDETECTOR_LOG_FILE": ("log_file", _parse_optional_path),
}


class ConfigManager:
    """Manages sum detector configuration."""

    DEFAULT_CONFIG_FILE = ".sumdetector.yml"

    def __init__(self, config_path: Optional[Path] = None, console: Optional[Console] = None):
        """
        Initialize config manager.

        Args:
            config_path: Path to configuration file
            console: Console for status messages (stderr by default)
        """
        self.console = console or Console(stderr=True)
        self.config_path = Path(config_path) if config_path else Path(self.DEFAULT_CONFIG_FILE)
        self._config: Optional[DetectorConfig] = None

    def load(self) -> DetectorConfig:
        """
        Load configuration from file or create default.

        Returns:
            Loaded or default configuration

        Raises:
            ConfigurationError: If the file or an environment override is invalid
        """
        if self._config is not None:
            return self._config

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Could not parse {self.config_path}: {e}",
                    source=str(self.config_path)
                ) from e
            if data is not None and not isinstance(data, dict):
                raise ConfigurationError(
                    f"{self.config_path} must contain a mapping",
                    source=str(self.config_path)
                )
            self._config = DetectorConfig.from_dict(data or {})
        else:
            self._config = DetectorConfig()

        self._apply_env_overrides()

        return self._config

    def save(self, config: Optional[DetectorConfig] = None) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration to save (uses current if None)

        Returns:
            True if successful
        """
        config = config or self._config or DetectorConfig()

        try:
            with open(self.config_path, 'w') as f:
                yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            self.console.print(f"[red]Error saving config: {e}[/red]")
            return False

        self._config = config
        self.console.print(f"[green]Saved config to {self.config_path}[/green]")
        return True

    def reset(self) -> DetectorConfig:
        """
        Reset to default configuration.

        Returns:
            Default configuration
        """
        self._config = DetectorConfig()
        return self._config

    def display(self, config: Optional[DetectorConfig] = None, console: Optional[Console] = None):
        """
        Display configuration in a formatted panel.

        Args:
            config: Configuration to display (uses current if None)
            console: Console to print to (uses the manager's if None)
        """
        config = config or self._config or self.load()

        yaml_str = yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)

        syntax = Syntax(yaml_str, "yaml", theme="monokai", line_numbers=True)
        panel = Panel(
            syntax,
            title="[bold cyan]Sum Detector Configuration[/bold cyan]",
            border_style="cyan"
        )

        (console or self.console).print(panel)

    def _apply_env_overrides(self):
        """Apply environment variable overrides."""
        if self._config is None:
            return

        for env_var, (attribute, parse) in ENV_OVERRIDES.items():
            raw = os.getenv(env_var)
            if raw is None:
                continue
            try:
                setattr(self._config, attribute, parse(raw))
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid environment variable {env_var}={raw}: {e}",
                    source=env_var
                ) from e


def get_config(config_path: Optional[Path] = None) -> DetectorConfig:
    """
    Load configuration from a path, the default file, or defaults.

    Args:
        config_path: Optional path to config file

    Returns:
        Current configuration
    """
    return ConfigManager(config_path).load()


def create_default_config_file(path: Optional[Path] = None) -> bool:
    """
    Create a default configuration file.

    Args:
        path: Path for config file

    Returns:
        True if successful
    """
    manager = ConfigManager(path)
    return manager.save(DetectorConfig())
