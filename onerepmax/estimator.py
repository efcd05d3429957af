from __future__ import annotations

from typing import Callable, Dict, Optional

from .formulas import FORMULA_NAMES, FORMULAS, FormulaName
from .logger import log_function_call
from .utils import round_fixed

# The average always rounds each formula to this many places first.
AVERAGE_DECIMALS = 2


class UnknownFormulaError(ValueError):
    """Raised when a formula name is not one of FORMULA_NAMES."""

    def __init__(self, formula):
        self.formula = formula
        super().__init__(f"Unknown formula: {formula!r}. Expected one of {FORMULA_NAMES}")


def resolve_formula(formula: str) -> Callable:
    """Return the formula function for a name, or raise UnknownFormulaError."""
    fn = FORMULAS.get(formula) if isinstance(formula, str) else None
    if fn is None:
        raise UnknownFormulaError(formula)
    return fn


@log_function_call
def get_one_rep_max(
    weight: float,
    reps: float,
    decimals: int = 2,
    formula: Optional[FormulaName] = None,
) -> float:
    """Estimate a one-rep max from a submaximal set.

    Args:
        weight: Weight lifted (kg or lbs, the result uses the same unit)
        reps: Repetitions performed with that weight
        decimals: Decimal places to round the result to (default: 2)
        formula: One of FORMULA_NAMES. If omitted or empty, the average of
            all formulas is returned.

    Raises:
        UnknownFormulaError: formula is given but not a known formula name

    Example:
        >>> get_one_rep_max(100, 5, formula="epley")
        116.67
    """
    if not formula:
        return round_fixed(average_one_rep_max(weight, reps), decimals)

    return round_fixed(resolve_formula(formula)(weight, reps), decimals)


def average_one_rep_max(weight: float, reps: float) -> float:
    """Average of all formula estimates, each rounded to 2 decimals first.

    The quotient itself is not rounded; get_one_rep_max rounds it to the
    caller's decimals.
    """
    estimates = [
        get_one_rep_max(weight, reps, AVERAGE_DECIMALS, name) for name in FORMULA_NAMES
    ]
    # plain left-to-right addition; sum() compensates on Python 3.12+
    total = 0.0
    for estimate in estimates:
        total += estimate
    return total / len(estimates)


@log_function_call
def get_all_formulas(weight: float, reps: float, decimals: int = 2) -> Dict[str, float]:
    """Return every formula's estimate for comparison, keyed by formula name."""
    return {
        name: round_fixed(FORMULAS[name](weight, reps), decimals) for name in FORMULA_NAMES
    }
