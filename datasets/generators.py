"""
generators.py — Input Array Factories
======================================
Seeded builders for the input distributions the dataset panel offers.

Every builder draws from its own `random.Random(seed)`, so the same seed
always yields the same array and nothing touches the global RNG.  With
`seed=None` the array is different on every call.

    make_array("random", 16, seed=42)
    make_array("few", 20, uniques=3, seed=7)
    make_array("sawtooth", 12, period=4)
"""

import math
import random
import re
from typing import Callable, Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Individual distributions
# ---------------------------------------------------------------------------
def _random(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    return [rng.randint(lo, hi) for _ in range(n)]


def _gaussian(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    """Bell-shaped around the middle of [lo, hi], clamped to the range."""
    out = []
    for _ in range(n):
        z = min(1.0, max(0.0, rng.gauss(0.5, 0.15)))
        out.append(round(lo + z * (hi - lo)))
    return out


def _sorted_inc(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    return sorted(_random(rng, n, lo, hi))


def _sorted_dec(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    return sorted(_random(rng, n, lo, hi), reverse=True)


def _nearly(rng: random.Random, base: List[int]) -> List[int]:
    # ~10% adjacent swaps, at least one
    n = len(base)
    if n < 2:
        return base
    for _ in range(max(1, n // 10)):
        i = rng.randrange(n - 1)
        base[i], base[i + 1] = base[i + 1], base[i]
    return base


def _nearly_inc(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    return _nearly(rng, _sorted_inc(rng, n, lo, hi))


def _nearly_dec(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    return _nearly(rng, _sorted_dec(rng, n, lo, hi))


def _few(rng: random.Random, n: int, lo: int, hi: int, uniques: int = 5, **_) -> List[int]:
    pool = [rng.randint(lo, hi) for _ in range(max(2, uniques))]
    return [rng.choice(pool) for _ in range(n)]


def _duplicates(rng: random.Random, n: int, lo: int, hi: int, **_) -> List[int]:
    # two values dominate
    return _few(rng, n, lo, hi, uniques=2)


def _sawtooth(rng: random.Random, n: int, lo: int, hi: int, period: int = 5, **_) -> List[int]:
    period = max(2, period)
    return [round(lo + (i % period) / (period - 1) * (hi - lo)) for i in range(n)]


DISTRIBUTIONS: Dict[str, Callable[..., List[int]]] = {
    "random":     _random,
    "gaussian":   _gaussian,
    "sorted_inc": _sorted_inc,
    "sorted_dec": _sorted_dec,
    "nearly_inc": _nearly_inc,
    "nearly_dec": _nearly_dec,
    "reversed":   _sorted_dec,
    "few":        _few,
    "duplicates": _duplicates,
    "sawtooth":   _sawtooth,
}


# Slider bounds of the dataset panel
UNIQUES_RANGE = (2, 20)
PERIOD_RANGE  = (2, 64)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def make_array(
    distribution: str = "random",
    n: int = 16,
    lo: int = 5,
    hi: int = 99,
    seed: Optional[int] = None,
    uniques: int = 5,
    period: int = 5,
) -> List[int]:
    """
    Build an input array.

    Args:
        distribution : One of DISTRIBUTIONS.
        n            : Number of elements (>= 0).
        lo, hi       : Inclusive value range.
        seed         : RNG seed; same seed → same array.
        uniques      : Distinct values for "few" (UNIQUES_RANGE).
        period       : Tooth width for "sawtooth" (PERIOD_RANGE).
    """
    builder = DISTRIBUTIONS.get(distribution)
    if builder is None:
        raise ValueError(f"Unknown distribution: {distribution}")
    if n < 0:
        raise ValueError(f"Array length must be >= 0, got {n}")
    _check_range("uniques", uniques, UNIQUES_RANGE)
    _check_range("period", period, PERIOD_RANGE)
    if lo > hi:
        lo, hi = hi, lo

    rng = random.Random(seed)
    return builder(rng, n, lo, hi, uniques=uniques, period=period)


def _check_range(name: str, value: int, bounds: Tuple[int, int]) -> None:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ValueError(f"{name} must be an integer between {low} and {high}, got {value!r}")


_SEPARATORS = re.compile(r"[,\s]+")


def parse_custom_input(text: str) -> List[float]:
    """
    Parse "5, 3 8\\n1" style text into numbers.  Tokens that are not
    finite numbers are dropped.  Integral values come back as ints.
    """
    out: List[float] = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if not math.isfinite(value):
            continue
        out.append(int(value) if value.is_integer() else value)
    return out
