"""YAML configuration loading for Coursestr.

Uses ``yaml.safe_load`` so configuration files can only produce plain
strings, numbers, lists and dicts, never arbitrary Python objects.

See Also:
    [CodecConfig.from_yaml()][coursestr.core.config.CodecConfig.from_yaml]:
        The consumer that validates the returned dictionary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a nested dictionary. An existing but empty
        file yields an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
