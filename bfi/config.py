"""VM configuration loaded from YAML or JSON."""

import json
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

import yaml

from .cells import DEFAULT_CELL_TYPE, resolve_cell_type
from .errors import CellTypeError, ConfigError

DEFAULT_CELLS = 30000


@dataclass
class VMConfig:
    cells: int = DEFAULT_CELLS
    cell_type: str = DEFAULT_CELL_TYPE
    wraparound: bool = True
    max_steps: int = 0  # 0 = unbounded

    def validate(self) -> 'VMConfig':
        if isinstance(self.cells, bool) or not isinstance(self.cells, int) or self.cells <= 0:
            raise ConfigError(f"cells must be a positive integer, got {self.cells!r}")
        if isinstance(self.max_steps, bool) or not isinstance(self.max_steps, int) or self.max_steps < 0:
            raise ConfigError(f"max_steps must be a non-negative integer, got {self.max_steps!r}")
        if not isinstance(self.wraparound, bool):
            raise ConfigError(f"wraparound must be true or false, got {self.wraparound!r}")
        try:
            resolve_cell_type(self.cell_type)
        except CellTypeError as e:
            raise ConfigError(str(e)) from e
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VMConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**data).validate()


def load_config(path: str) -> VMConfig:
    """Load a VMConfig from a .yml/.yaml or .json file.

    The options may sit at the top level or under a ``vm`` key.
    """
    with open(path, 'r') as f:
        if path.endswith(('.yml', '.yaml')):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if isinstance(data, dict) and "vm" in data:
        data = data["vm"]
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping in {path}, got {type(data).__name__}")
    return VMConfig.from_dict(data)
