"""
go-reorder configuration

Config file (.go-reorder.toml) structure:

    [sections]
    order = ["imports", "main", ...]        # Section order, 14 known names

    [types]
    type_layout = ["typedef", "constructors", "exported_methods", "unexported_methods"]
    enum_layout = ["typedef", "iota", "exported_methods", "unexported_methods"]

    [behavior]
    mode = "strict"                          # strict | warn | append | drop

Unset fields fall back to defaults.
"""
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

try:  # Python 3.11+
    import tomllib
except ImportError:  # pragma: no cover - fallback for older environments
    import tomli as tomllib

from goreorder.exceptions import ConfigValidationError
from goreorder.logging_config import logger
from goreorder.schemas import (
    DEFAULT_ENUM_LAYOUT,
    DEFAULT_MODE,
    DEFAULT_SECTION_ORDER,
    DEFAULT_TYPE_LAYOUT,
    EnumElement,
    Mode,
    Section,
    TypeElement,
)

CONFIG_FILE_NAME = ".go-reorder.toml"

# Markers that bound the upward search for a config file
PROJECT_ROOT_MARKERS = (".git", "go.mod")


class SectionsConfig(BaseModel):
    """Controls declaration ordering."""
    model_config = ConfigDict(extra="forbid")

    order: List[str] = Field(default_factory=lambda: list(DEFAULT_SECTION_ORDER))


class TypesConfig(BaseModel):
    """Controls element order inside type and enum groups."""
    model_config = ConfigDict(extra="forbid")

    type_layout: List[str] = Field(default_factory=lambda: list(DEFAULT_TYPE_LAYOUT))
    enum_layout: List[str] = Field(default_factory=lambda: list(DEFAULT_ENUM_LAYOUT))


class BehaviorConfig(BaseModel):
    """Controls how code outside the configured sections is handled."""
    model_config = ConfigDict(extra="forbid")

    mode: str = DEFAULT_MODE


class ReorderConfig(BaseModel):
    """All configuration for go-reorder."""
    model_config = ConfigDict(extra="forbid")

    sections: SectionsConfig = Field(default_factory=SectionsConfig)
    types: TypesConfig = Field(default_factory=TypesConfig)
    behavior: BehaviorConfig = Field(default_factory=BehaviorConfig)

    def check(self) -> None:
        """
        Validate names and mode against the known vocabularies.

        Raises:
            ConfigValidationError: Listing every problem found.
        """
        problems: List[str] = []
        if not self.sections.order:
            problems.append("sections.order must list at least one section")
        problems.extend(_check_names("sections.order", self.sections.order, Section))
        problems.extend(_check_names("types.type_layout", self.types.type_layout, TypeElement))
        problems.extend(_check_names("types.enum_layout", self.types.enum_layout, EnumElement))

        valid_modes = [m.value for m in Mode]
        if self.behavior.mode not in valid_modes:
            problems.append(
                f"behavior.mode: invalid mode '{self.behavior.mode}' (valid: {', '.join(valid_modes)})"
            )

        if problems:
            raise ConfigValidationError("invalid config: " + "; ".join(problems), problems)

    @property
    def mode(self) -> Mode:
        return Mode(self.behavior.mode)


def _check_names(label: str, names: List[str], vocabulary: Type[Enum]) -> List[str]:
    valid = [member.value for member in vocabulary]
    problems = []
    seen = set()
    for name in names:
        if name not in valid:
            problems.append(f"{label}: unknown name '{name}' (valid: {', '.join(valid)})")
        elif name in seen:
            problems.append(f"{label}: duplicate name '{name}'")
        seen.add(name)
    return problems


def default_config() -> ReorderConfig:
    """Returns the default configuration."""
    return ReorderConfig()


def config_from_dict(data: Dict[str, Any]) -> ReorderConfig:
    """
    Build and validate a config from parsed TOML data.

    Missing tables and keys keep their defaults.

    Raises:
        ConfigValidationError: On unknown keys, wrong value types or invalid names.
    """
    try:
        config = ReorderConfig.model_validate(data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ConfigValidationError("invalid config: " + "; ".join(problems), problems) from e
    config.check()
    return config


def load_config(path: Union[str, Path]) -> ReorderConfig:
    """
    Load configuration from a TOML file.

    A missing file yields the defaults.

    Args:
        path: Path to the config file.

    Returns:
        Validated configuration.

    Raises:
        ConfigValidationError: If the file is not valid TOML or holds invalid values.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Config file {path} not found, using defaults")
        return default_config()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"failed to parse config {path}: {e}") from e

    config = config_from_dict(data)
    logger.debug(f"Loaded config from {path}")
    return config


def find_config(start_dir: Union[str, Path]) -> Optional[Path]:
    """
    Search for .go-reorder.toml from start_dir upward.

    The search stops after the first directory holding a project root marker
    (.git or go.mod), so config files outside the project are never picked up.

    Returns:
        Path of the config file, or None if none was found.
    """
    current = Path(start_dir).resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if any((current / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return None
        if current.parent == current:
            return None
        current = current.parent


def render_default_config() -> str:
    """The commented config file written by ``go-reorder --init``."""
    order = "\n".join(f'  "{name}",' for name in DEFAULT_SECTION_ORDER)
    type_layout = ", ".join(f'"{name}"' for name in DEFAULT_TYPE_LAYOUT)
    enum_layout = ", ".join(f'"{name}"' for name in DEFAULT_ENUM_LAYOUT)
    return f"""# go-reorder configuration

[sections]
# Order of declaration sections in each file
# Remove sections you don't want, or reorder as needed
order = [
{order}
]

[types]
# How to order elements within a type group
type_layout = [{type_layout}]

# How to order elements within an enum group
enum_layout = [{enum_layout}]

[behavior]
# strict: Error if code has no matching section (default)
# warn:   Append unmatched code at end with warning
# append: Silently append unmatched code at end
# drop:   Discard unmatched code (dangerous!)
mode = "{DEFAULT_MODE}"
"""
