import os
import json
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError

from satsort.core.errors import ConfigError

# Literals travel through the solver bindings as C ints.
MAX_VARIABLE = 2**31 - 1

class SortConfig(BaseModel):
    """Configuration for a single sorting run."""
    solver_name: str = "cadical153"
    max_lines: int = Field(default=1 << 12, ge=0)
    max_line_bytes: int = Field(default=1 << 12, ge=0)
    verify: bool = True

    @classmethod
    def from_env_or_file(cls) -> 'SortConfig':
        # 1. Config file
        data: Dict[str, Any] = {}
        config_path = os.environ.get("SATSORT_CONFIG_PATH")
        if config_path:
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Cannot read config file '{config_path}': {e}")
            if not isinstance(data, dict):
                raise ConfigError(f"Config file '{config_path}' must hold a JSON object")

        # 2. Env vars override the file
        overrides = {
            "SATSORT_SOLVER": "solver_name",
            "SATSORT_MAX_LINES": "max_lines",
            "SATSORT_MAX_LINE_BYTES": "max_line_bytes",
        }
        for env_key, field_name in overrides.items():
            value = os.environ.get(env_key)
            if value:
                data[field_name] = value

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}")
