"""
YAML configuration for the FFT engine, logging and the benchmark.

Example (configs/default.yaml)::

    engine:
      preload_sizes: [256, 1024]
      jit_warmup: true
    logging:
      level: WARNING
      file: null
    benchmark:
      sizes: [64, 100, 256, 1000, 1024]
      n_iter: 50
      seed: 42
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import ConfigError
from .utils.mathutils import is_power_of_2


@dataclass
class EngineConfig:
    """Twiddle tables to build up front and whether to compile the JIT kernels at start."""
    preload_sizes: List[int] = field(default_factory=list)
    jit_warmup: bool = False

    def validate(self) -> None:
        for n in self.preload_sizes:
            if not isinstance(n, int) or not is_power_of_2(n):
                raise ConfigError(f"engine.preload_sizes: {n!r} is not a power of 2")


@dataclass
class LoggingConfig:
    level: str = 'WARNING'
    file: Optional[str] = None

    def validate(self) -> None:
        if not isinstance(self.level, str) or self.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigError(f"logging.level: unknown level {self.level!r}")


@dataclass
class BenchmarkConfig:
    sizes: List[int] = field(default_factory=lambda: [64, 100, 256, 1000, 1024, 4096])
    n_iter: int = 50
    seed: Optional[int] = 42

    def validate(self) -> None:
        if not self.sizes or any(not isinstance(n, int) or n < 1 for n in self.sizes):
            raise ConfigError(f"benchmark.sizes: expected positive integers, got {self.sizes!r}")
        if self.n_iter < 1:
            raise ConfigError(f"benchmark.n_iter must be >= 1, got {self.n_iter}")


_SECTIONS = {
    'engine': EngineConfig,
    'logging': LoggingConfig,
    'benchmark': BenchmarkConfig,
}


def _build_section(name: str, cls, data: Any):
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(data).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown keys in section '{name}': {sorted(unknown)}")
    section = cls(**data)
    section.validate()
    return section


@dataclass
class Config:
    """Top-level configuration."""
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Config':
        """Build a config from a parsed YAML mapping. Missing sections get defaults."""
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping, got {type(data).__name__}")
        unknown = set(data) - set(_SECTIONS)
        if unknown:
            raise ConfigError(f"Unknown configuration sections: {sorted(unknown)}")
        return cls(**{
            name: _build_section(name, section_cls, data.get(name))
            for name, section_cls in _SECTIONS.items()
        })

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file. If None, defaults are returned.

    Returns:
        Parsed and validated Config
    """
    if config_path is None:
        return Config()
    with open(config_path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    return Config.from_dict(data)
