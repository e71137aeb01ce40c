"""Configuration loading and management for Class Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.class-insight.toml)
    3. Project config (./class-insight.toml)
    4. Explicit config file
    5. Environment variables (CLASS_INSIGHT_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ClassInsightError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "CLASS_INSIGHT_"
CONFIG_FILENAME = "class-insight.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        File selection:
            extensions: Suffixes of files to analyze (case-insensitive)
            exclude_patterns: Glob patterns skipped by the directory loader
            max_file_size_mb: Maximum size of a local file to read (MB)

        Performance tuning:
            workers: Parallel workers for the body reference pass
                (None or 1 = sequential)

        Heuristic windows:
            modifier_lookback: Characters searched before a declaration
                keyword for the ``abstract`` modifier
            field_lookback: Characters searched before a field name for the
                ``private`` modifier
            singleton_accessors: Static accessor names that mark singleton
                access (``Type.getInstance()``) and singleton declarations

        Zones (Martin metrics):
            zone_abstractness_threshold: Abstractness threshold
            zone_instability_threshold: Instability threshold

        Output control:
            diagram_layout: PlantUML layout pragma ("" omits the line)
            verbosity: Logging verbosity level
    """

    # File selection
    extensions: list[str] = field(default_factory=lambda: [".java"])
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            ".git/*",
            "build/*",
            "target/*",
            "out/*",
            ".gradle/*",
            ".mvn/*",
            ".idea/*",
            "node_modules/*",
        ]
    )
    max_file_size_mb: float = 10.0

    # Performance tuning
    workers: Optional[int] = None

    # Heuristic windows
    modifier_lookback: int = 80
    field_lookback: int = 80
    singleton_accessors: list[str] = field(
        default_factory=lambda: ["getInstance", "instance", "get"]
    )

    # Zones
    zone_abstractness_threshold: float = 0.30
    zone_instability_threshold: float = 0.30

    # Output control
    diagram_layout: str = "smetana"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "at least one extension is required")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("extensions", ext, "extensions must start with '.'")

        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")

        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")

        if self.modifier_lookback < 1:
            raise InvalidConfigError("modifier_lookback", self.modifier_lookback, "must be at least 1")
        if self.field_lookback < 1:
            raise InvalidConfigError("field_lookback", self.field_lookback, "must be at least 1")

        if not self.singleton_accessors:
            raise InvalidConfigError(
                "singleton_accessors", self.singleton_accessors, "at least one accessor is required"
            )
        for name in self.singleton_accessors:
            if not name.isidentifier():
                raise InvalidConfigError("singleton_accessors", name, "must be an identifier")

        for field_name in ("zone_abstractness_threshold", "zone_instability_threshold"):
            value = getattr(self, field_name)
            if not 0.0 <= value <= 0.5:
                raise InvalidConfigError(field_name, value, "must be between 0.0 and 0.5")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "must be quiet, normal or verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    def accepts(self, path: str) -> bool:
        """Return True if *path* has one of the configured extensions."""
        lower = path.lower()
        return any(lower.endswith(ext.lower()) for ext in self.extensions)


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ClassInsightError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ClassInsightError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ClassInsightError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ClassInsightError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ClassInsightError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Verbosity flags map onto the verbosity literal
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise ClassInsightError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CLASS_INSIGHT_* environment variables.

    List-valued fields (extensions, exclude_patterns, singleton_accessors)
    are not read from the environment.

    Returns:
        Dict of field_name -> parsed_value for any CLASS_INSIGHT_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ClassInsightError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the type is not supported

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ClassInsightError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ClassInsightError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
