"""
Configuration loading.

Settings come from three layers, later layers winning:

    1. RunConfig defaults
    2. YAML file (--config), e.g.

           threshold: 1.0e-10
           max_iterations: 200
           damping: 0.5
           once: true

    3. CLI flags (--debug, -q, --once)
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from orchestration.config import RunConfig


def load_config(path: Optional[Union[str, Path]] = None) -> RunConfig:
    """Read a YAML config file over the defaults. None → defaults."""
    if path is None:
        return RunConfig()
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping of settings, got {type(cfg).__name__}")
    return RunConfig.from_dict(cfg)
