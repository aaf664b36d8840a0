"""Configuration loading from pyproject.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ._errors import ConfigError

TOOL_SECTION = "jsonwalk"


class EngineConfig(BaseModel):
    """Evaluation settings.

    Read from the ``[tool.jsonwalk]`` table of pyproject.toml, or constructed
    directly and passed to ``execute``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: int = Field(
        default=64,
        ge=1,
        description="Maximum nesting of relative paths inside filter and index scripts.",
    )
    sort_keys: bool = Field(
        default=False,
        description="Order object keys alphabetically when normalising mapping documents.",
    )


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> EngineConfig:
    """Load and validate the [tool.jsonwalk] table from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed EngineConfig (defaults when the table is absent)

    Raises:
        ConfigError: If the file is not valid TOML or the table is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get(TOOL_SECTION, {})
    if not isinstance(section, dict):
        msg = f"Invalid [tool.{TOOL_SECTION}] in {pyproject_path}: expected a table"
        raise ConfigError(msg)

    try:
        return EngineConfig.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.{TOOL_SECTION}] in {pyproject_path}: {e}"
        raise ConfigError(msg) from e


def get_config() -> EngineConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        EngineConfig (defaults if no pyproject.toml or no [tool.jsonwalk] table)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return EngineConfig()
    return load_config(pyproject_path)
