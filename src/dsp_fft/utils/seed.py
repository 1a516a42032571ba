import random
from typing import Optional

import numpy as np


def set_seed(seed: int) -> np.random.Generator:
    """Seed the global RNGs and return a fresh NumPy generator for the same seed."""
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)


def get_seed_from_config(config) -> Optional[int]:
    if config is None:
        return None
    if isinstance(config, dict):
        seed = config.get('seed', None)
        if seed is None:
            benchmark = config.get('benchmark', {})
            if isinstance(benchmark, dict):
                seed = benchmark.get('seed', None)
        return int(seed) if seed is not None else None
    seed = getattr(config, 'seed', None)
    if seed is None:
        seed = getattr(getattr(config, 'benchmark', None), 'seed', None)
    return int(seed) if seed is not None else None
