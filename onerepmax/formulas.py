"""One-rep max regression formulas.

Each formula maps a submaximal set (weight, reps) to an estimated 1RM. Inputs
are not validated: arithmetic runs on float64 so degenerate sets give inf,
NaN or negative estimates instead of raising. Weight and reps may also be
numpy arrays, in which case an array of estimates is returned.
"""
from __future__ import annotations

from functools import wraps
from typing import Callable, Dict, List, Literal

import numpy as np

FormulaName = Literal[
    "epley", "brzycki", "lombardi", "mayhew", "oconner", "wathan", "landers"
]

FORMULA_NAMES: List[str] = [
    "epley", "brzycki", "lombardi", "mayhew", "oconner", "wathan", "landers"
]


def _float_errors(func):
    """Evaluate with IEEE-754 results instead of floating-point warnings."""
    @wraps(func)
    def wrapper(weight, reps):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return func(weight, reps)

    return wrapper


def _as_float(x) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)


@_float_errors
def epley(weight, reps):
    """1RM = weight * (1 + reps / 30)"""
    w, r = _as_float(weight), _as_float(reps)
    return w * (1 + r / 30)


@_float_errors
def brzycki(weight, reps):
    """1RM = weight * 36 / (37 - reps); infinite at 37 reps."""
    w, r = _as_float(weight), _as_float(reps)
    return w * (36 / (37 - r))


@_float_errors
def lombardi(weight, reps):
    """1RM = weight * reps ** 0.1"""
    w, r = _as_float(weight), _as_float(reps)
    return w * np.power(r, 0.1)


@_float_errors
def mayhew(weight, reps):
    w, r = _as_float(weight), _as_float(reps)
    return (100 * w) / (52.2 + 41.9 * np.exp(-0.055 * r))


@_float_errors
def oconner(weight, reps):
    w, r = _as_float(weight), _as_float(reps)
    return w * (1 + 0.025 * r)


@_float_errors
def wathan(weight, reps):
    w, r = _as_float(weight), _as_float(reps)
    return (100 * w) / (48.8 + 53.8 * np.exp(-0.075 * r))


@_float_errors
def landers(weight, reps):
    """Singular near 37.9 reps (101.3 / 2.67123), negative beyond."""
    w, r = _as_float(weight), _as_float(reps)
    return (100 * w) / (101.3 - 2.67123 * r)


FORMULAS: Dict[str, Callable] = {
    "epley": epley,
    "brzycki": brzycki,
    "lombardi": lombardi,
    "mayhew": mayhew,
    "oconner": oconner,
    "wathan": wathan,
    "landers": landers,
}
