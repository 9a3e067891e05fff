"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .graph_query import Algorithm


class ConfigError(Exception):
    """Error in graphkit configuration."""


@dataclass(slots=True, frozen=True)
class GraphkitConfig:
    """Configuration loaded from the ``[tool.graphkit]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    input: Path | None = None
    weight: str = "weight"
    algorithm: Algorithm = Algorithm.AUTO
    project_root: Path | None = None


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
            # Reached filesystem root
            return None
        current = parent


def _parse_string(section: dict[str, object], key: str) -> str | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.graphkit].{key}: expected string"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> GraphkitConfig:
    """Load and validate [tool.graphkit] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphkitConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("graphkit", {})
    if not section:
        # No [tool.graphkit] section - return empty config
        return GraphkitConfig(project_root=project_root)

    # Parse input path
    input_path: Path | None = None
    input_value = _parse_string(section, "input")
    if input_value is not None:
        input_path = Path(input_value)
        if not input_path.is_absolute():
            input_path = project_root / input_path

    weight = _parse_string(section, "weight") or "weight"

    algorithm = Algorithm.AUTO
    algorithm_value = _parse_string(section, "algorithm")
    if algorithm_value is not None:
        try:
            algorithm = Algorithm(algorithm_value)
        except ValueError as e:
            choices = ", ".join(a.value for a in Algorithm)
            msg = f"Invalid [tool.graphkit].algorithm '{algorithm_value}'. Expected one of: {choices}"
            raise ConfigError(msg) from e

    return GraphkitConfig(
        input=input_path,
        weight=weight,
        algorithm=algorithm,
        project_root=project_root,
    )


def get_config() -> GraphkitConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphkitConfig (may be empty if no pyproject.toml or no [tool.graphkit] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphkitConfig()
    return load_config(pyproject_path)
