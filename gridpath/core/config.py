"""
Configuration management for gridpath runs with Pydantic validation
"""

from typing import Dict, Union, Optional, Any, Literal, Tuple
from pathlib import Path
import yaml
import os
import re
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from .exceptions import ConfigError
from ..routing.types import Connectivity, Position


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class GridSection(BaseModel):
    """Grid dimensions"""
    width: int = Field(41, gt=0, description="Number of columns")
    height: int = Field(21, gt=0, description="Number of rows")


class SearchSection(BaseModel):
    """Search settings"""
    connectivity: int = Field(8, description="4 for cardinal moves only, 8 to allow diagonals")
    mode: Literal['path', 'smooth', 'corners'] = Field('smooth', description="Query to run")

    @field_validator('connectivity')
    @classmethod
    def validate_connectivity(cls, v):
        """Only 4- and 8-connected lattices are supported"""
        if v not in (4, 8):
            raise ValueError(f"connectivity must be 4 or 8, got {v}")
        return v


class MazeSection(BaseModel):
    """Maze generation settings"""
    enabled: bool = Field(True, description="Fill the grid with a generated maze before searching")
    seed: Optional[int] = Field(None, description="Random seed (unset for a different maze each run)")


class OutputSection(BaseModel):
    """Console output settings"""
    show_directions: bool = Field(True, description="Print the step directions")
    show_timings: bool = Field(True, description="Print maze and search timings")
    show_explored: bool = Field(False, description="Mark cells expanded by the search")


class GridPathConfigModel(BaseModel):
    """Pydantic model for gridpath configuration validation"""
    model_config = ConfigDict(extra='ignore')  # Ignore extra fields in YAML

    # Metadata (optional)
    version: Optional[Union[int, float, str]] = None
    description: Optional[str] = None

    grid: GridSection = Field(default_factory=GridSection)
    search: SearchSection = Field(default_factory=SearchSection)
    maze: MazeSection = Field(default_factory=MazeSection)
    output: OutputSection = Field(default_factory=OutputSection)

    start: Tuple[int, int] = Field((0, 0), description="Start cell as [x, y]")
    end: Optional[Tuple[int, int]] = Field(None, description="End cell as [x, y] (default: far corner)")

    @field_validator('start', 'end', mode='before')
    @classmethod
    def parse_position(cls, v):
        """Accept "x,y" strings as well as [x, y] lists"""
        if isinstance(v, str):
            parts = [p.strip() for p in v.split(',')]
            if len(parts) != 2:
                raise ValueError(f"Position must look like 'x,y', got '{v}'")
            return (parts[0], parts[1])
        return v

    @model_validator(mode='after')
    def validate_positions(self):
        """Ensure start and end lie inside the grid"""
        width, height = self.grid.width, self.grid.height

        for name, pos in (('start', self.start), ('end', self.end)):
            if pos is None:
                continue
            x, y = pos
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"{name} ({x}, {y}) is outside the {width}x{height} grid")

        return self


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports multiple formats:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}  (with default)

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            default_value = match.group(3)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            if default_value is not None:
                return default_value
            raise ConfigError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ConfigError(f"Environment variable '{var_name}' is not set")
            return env_value

        return re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    return value


def default_end(start: Position, width: int, height: int) -> Position:
    """Farthest cell from the origin on the start's stride-2 lattice."""
    x = start.x + ((width - 1 - start.x) // 2) * 2
    y = start.y + ((height - 1 - start.y) // 2) * 2
    return Position(x, y)


# ============================================================================
# GridPathConfig Class (wrapper around Pydantic model)
# ============================================================================

class GridPathConfig:
    """Configuration for a gridpath run with validation"""

    def __init__(self, config_dict: Optional[Dict] = None):
        """Initialize from dictionary (parsed from YAML) with Pydantic validation"""
        config_dict = _substitute_env_vars(config_dict or {})

        try:
            self._model = GridPathConfigModel(**config_dict)
        except Exception as e:
            raise ConfigError(f"Configuration validation failed: {str(e)}") from e

        self.version = self._model.version
        self.description = self._model.description

        # Grid
        self.width = self._model.grid.width
        self.height = self._model.grid.height

        # Search
        self.connectivity = Connectivity(self._model.search.connectivity)
        self.mode = self._model.search.mode

        # Maze
        self.maze_enabled = self._model.maze.enabled
        self.seed = self._model.maze.seed

        # Endpoints
        self.start = Position.of(self._model.start)
        if self._model.end is not None:
            self.end = Position.of(self._model.end)
        else:
            self.end = default_end(self.start, self.width, self.height)

        # Output
        self.show_directions = self._model.output.show_directions
        self.show_timings = self._model.output.show_timings
        self.show_explored = self._model.output.show_explored

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'GridPathConfig':
        """Load configuration from YAML file with validation"""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        if config_dict is not None and not isinstance(config_dict, dict):
            raise ConfigError(f"Configuration root must be a mapping, got {type(config_dict).__name__}")

        return cls(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GridPathConfig':
        return cls(config_dict)

    def with_overrides(self, **overrides: Any) -> 'GridPathConfig':
        """
        Return a new config with command-line style overrides applied

        Recognised keys: width, height, connectivity, mode, seed, maze_enabled,
        start, end. None values are ignored.

        Args:
            **overrides: Values replacing the configured ones

        Returns:
            Revalidated configuration
        """
        config_dict = self.to_dict()

        sections = {
            'width': ('grid', 'width'),
            'height': ('grid', 'height'),
            'connectivity': ('search', 'connectivity'),
            'mode': ('search', 'mode'),
            'seed': ('maze', 'seed'),
            'maze_enabled': ('maze', 'enabled'),
        }

        for key, value in overrides.items():
            if value is None:
                continue
            if key in sections:
                section, field_name = sections[key]
                config_dict[section][field_name] = value
            elif key in ('start', 'end'):
                config_dict[key] = value
            else:
                raise ConfigError(f"Unknown configuration override: {key}")

        return GridPathConfig(config_dict)

    def to_dict(self) -> Dict:
        """Export configuration as a plain dictionary"""
        return self._model.model_dump()

    def __repr__(self) -> str:
        return (
            f"GridPathConfig({self.width}x{self.height}, mode={self.mode}, "
            f"connectivity={int(self.connectivity)}, start={self.start}, end={self.end})"
        )

