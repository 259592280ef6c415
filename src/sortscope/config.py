# src/sortscope/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_SIZES: Tuple[int, ...] = (10, 100, 1_000, 10_000, 50_000)
DEFAULT_TRIALS = 3

QUICK_SIZES: Tuple[int, ...] = (100, 1_000, 5_000)
QUICK_TRIALS = 1

# quadratic algorithms are not run above this input size
QUADRATIC_SIZE_LIMIT = 50_000


@dataclass(frozen=True)
class BenchmarkConfig:
    sizes: Tuple[int, ...] = DEFAULT_SIZES
    trials: int = DEFAULT_TRIALS
    quadratic_limit: int = QUADRATIC_SIZE_LIMIT
    warmup: int = 0
    gc_collect: bool = True
    seed: Optional[int] = None

    def validate(self) -> "BenchmarkConfig":
        if not isinstance(self.trials, int) or self.trials < 1:
            raise ValueError("trials must be an integer >= 1.")
        for n in self.sizes:
            if not isinstance(n, int) or n < 0:
                raise ValueError("All sizes must be non-negative integers.")
        if self.warmup < 0:
            raise ValueError("warmup must be non-negative.")
        if self.quadratic_limit < 0:
            raise ValueError("quadratic_limit must be non-negative.")
        return self


DEFAULT = BenchmarkConfig()
QUICK = BenchmarkConfig(sizes=QUICK_SIZES, trials=QUICK_TRIALS)
