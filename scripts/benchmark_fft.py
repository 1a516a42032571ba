#!/usr/bin/env python3
"""
Run the FFT benchmark from a source checkout.

Usage:
    python scripts/benchmark_fft.py --config configs/default.yaml
    python scripts/benchmark_fft.py --sizes 100 1024 --n-iter 20 --output results/
"""

import sys
from pathlib import Path

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from dsp_fft.benchmark import main


if __name__ == "__main__":
    sys.exit(main())
