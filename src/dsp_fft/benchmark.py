#!/usr/bin/env python3
"""
Speed and accuracy benchmark for the FFT engine.

For each configured length this measures:
  1. Complex forward FFT time (ms per call)
  2. Real spectrum time (ms per call)
  3. Max absolute error against numpy.fft

Usage:
    python -m dsp_fft.benchmark [--config CONFIG_PATH] [--output OUTPUT_DIR]
    dsp-fft-bench --sizes 100 1024 --n-iter 20
"""

import argparse
import json
import logging
import time
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from .complex_array import ComplexArray
from .config import Config, load_config
from .fft import FftEngine
from .real import fft_real_spectrum
from .utils.logging import setup_logging_from_config
from .utils.mathutils import is_power_of_2
from .utils.seed import set_seed

console = Console()
logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timing and accuracy for a single transform length."""
    n: int
    strategy: str
    fft_time_ms: float
    fft_std_ms: float
    numpy_time_ms: float
    real_spectrum_time_ms: float
    fft_max_error: float
    real_spectrum_max_error: float

    def to_dict(self) -> Dict:
        return asdict(self)


def _time_calls(func, n_iter: int) -> List[float]:
    times = []
    for _ in range(n_iter):
        start = time.perf_counter()
        func()
        times.append((time.perf_counter() - start) * 1000)  # ms
    return times


def measure_size(engine: FftEngine, n: int, n_iter: int, rng: np.random.Generator) -> BenchmarkResult:
    """Benchmark one transform length."""
    z = rng.standard_normal(n) + 1j * rng.standard_normal(n)
    x = ComplexArray.from_complex(z)
    samples = rng.standard_normal(n)

    # Warm up (JIT compilation, twiddle tables)
    X = engine.fft(x)
    spectrum = fft_real_spectrum(samples, engine=engine)

    fft_times = _time_calls(lambda: engine.fft(x), n_iter)
    numpy_times = _time_calls(lambda: np.fft.fft(z), n_iter)
    real_times = _time_calls(lambda: fft_real_spectrum(samples, engine=engine), n_iter)

    fft_error = float(np.abs(X.to_numpy() - np.fft.fft(z)).max())

    reference = np.fft.rfft(samples)[:len(spectrum)] / n
    reference[1:] *= 2
    if n % 2 == 0 and len(spectrum) > n // 2:
        reference[n // 2] /= 2
    real_error = float(np.abs(spectrum.to_numpy() - reference).max())

    return BenchmarkResult(
        n=n,
        strategy='radix-2' if is_power_of_2(n) else 'bluestein',
        fft_time_ms=float(np.mean(fft_times)),
        fft_std_ms=float(np.std(fft_times)),
        numpy_time_ms=float(np.mean(numpy_times)),
        real_spectrum_time_ms=float(np.mean(real_times)),
        fft_max_error=fft_error,
        real_spectrum_max_error=real_error,
    )


def display_results_table(results: List[BenchmarkResult]):
    """Display benchmark results."""
    table = Table(title="FFT Benchmark Results", box=box.ROUNDED)
    table.add_column("N", justify="right", style="bold")
    table.add_column("Strategy")
    table.add_column("FFT (ms)", justify="right")
    table.add_column("NumPy (ms)", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_column("Real spectrum (ms)", justify="right")
    table.add_column("Max error", justify="right")

    for r in results:
        ratio = r.fft_time_ms / r.numpy_time_ms if r.numpy_time_ms > 0 else float('inf')
        table.add_row(
            str(r.n),
            r.strategy,
            f"{r.fft_time_ms:.3f}±{r.fft_std_ms:.3f}",
            f"{r.numpy_time_ms:.3f}",
            f"{ratio:.1f}x",
            f"{r.real_spectrum_time_ms:.3f}",
            f"{max(r.fft_max_error, r.real_spectrum_max_error):.2e}",
        )

    console.print(table)


def run_benchmark(config: Config, output_dir: Optional[Path] = None,
                  show_progress: bool = True) -> List[BenchmarkResult]:
    """
    Run the benchmark for all sizes in ``config.benchmark``.

    Args:
        config: Full configuration (engine, logging and benchmark sections)
        output_dir: If given, results are written to ``timing.json`` there
        show_progress: Show a rich progress bar

    Returns:
        One BenchmarkResult per size
    """
    bench_cfg = config.benchmark
    rng = set_seed(bench_cfg.seed) if bench_cfg.seed is not None else np.random.default_rng()
    engine = FftEngine.from_config(config.engine)

    logger.info(f"Benchmark started: sizes={bench_cfg.sizes}, n_iter={bench_cfg.n_iter}")

    results = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("[cyan]Benchmarking", total=len(bench_cfg.sizes))

        for n in bench_cfg.sizes:
            progress.update(task, description=f"[cyan]N={n}")
            result = measure_size(engine, n, bench_cfg.n_iter, rng)
            results.append(result)
            logger.info(f"N={n}: fft={result.fft_time_ms:.3f}ms, err={result.fft_max_error:.2e}")
            progress.update(task, advance=1)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        results_dict = {
            'timestamp': datetime.now().isoformat(),
            'config': config.to_dict(),
            'results': [r.to_dict() for r in results],
        }
        with open(output_dir / 'timing.json', 'w') as f:
            json.dump(results_dict, f, indent=2)
        logger.info(f"Results saved to {output_dir / 'timing.json'}")

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FFT engine benchmark")
    parser.add_argument('--config', type=str, default=None, help='Path to configuration file')
    parser.add_argument('--sizes', type=int, nargs='+', default=None, help='Transform lengths (overrides config)')
    parser.add_argument('--n-iter', type=int, default=None, help='Calls per measurement (overrides config)')
    parser.add_argument('--output', type=str, default=None, help='Directory for timing.json')
    parser.add_argument('--quiet', action='store_true', help='Do not show the progress bar')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    if args.sizes is not None:
        config.benchmark.sizes = args.sizes
    if args.n_iter is not None:
        config.benchmark.n_iter = args.n_iter
    config.benchmark.validate()
    setup_logging_from_config(config.logging)

    console.print(Panel.fit(
        "[bold blue]FFT Benchmark[/bold blue]\n"
        f"Sizes: {config.benchmark.sizes}",
        border_style="blue"
    ))

    output_dir = Path(args.output) if args.output else None
    results = run_benchmark(config, output_dir, show_progress=not args.quiet)

    console.print("\n")
    display_results_table(results)
    if output_dir is not None:
        console.print(f"\n[green]✓[/green] Results saved to {output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
