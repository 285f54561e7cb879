"""Search configuration loading."""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .mcts.search import SearchConfig


def _search_section(values: Any) -> Dict[str, Any]:
    """Return the `search` section of a config mapping, or the mapping itself."""
    if values is None:
        return {}
    if not isinstance(values, dict):
        raise ValueError(f"Search config must be a mapping, got {type(values).__name__}")
    if 'search' not in values:
        return dict(values)

    section = values['search']
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'search' section must be a mapping, got {type(section).__name__}")
    return dict(section)


def config_from_dict(values: Dict[str, Any]) -> SearchConfig:
    """Build a SearchConfig from a mapping.

    Keys may sit at the top level or under a `search` section.

    Raises:
        ValueError: On unknown keys, invalid values or a non-mapping config
    """
    values = _search_section(values)

    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown search config keys: {', '.join(unknown)}")

    return SearchConfig(**values)


def load_config(path: Optional[Union[str, Path]] = None, **overrides) -> SearchConfig:
    """Load search configuration from YAML.

    Args:
        path: YAML file, or None for defaults
        **overrides: Values replacing the file's; None values are ignored

    Returns:
        SearchConfig
    """
    values: Dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, 'r') as f:
            values = _search_section(yaml.safe_load(f))

    for key, value in overrides.items():
        if value is not None:
            values[key] = value

    return config_from_dict(values)
