"""
Utility modules.
"""

from .logging import setup_logging, setup_logging_from_config
from .mathutils import is_power_of_2, get_next_power_of_2, floor_log2
from .seed import set_seed, get_seed_from_config

__all__ = [
    'setup_logging',
    'setup_logging_from_config',
    'is_power_of_2',
    'get_next_power_of_2',
    'floor_log2',
    'set_seed',
    'get_seed_from_config',
]
