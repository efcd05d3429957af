"""pandas views over the estimator: comparison tables and chart data."""
from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .estimator import get_all_formulas, get_one_rep_max, resolve_formula
from .formulas import FORMULA_NAMES, FORMULAS
from .logger import logger

AVERAGE_LABEL = "average"


def comparison_frame(weight: float, reps: float, decimals: int = 2) -> pd.DataFrame:
    """One row per formula plus a final ``average`` row.

    Columns: formula, one_rep_max.
    """
    estimates = get_all_formulas(weight, reps, decimals)
    rows = [{"formula": name, "one_rep_max": value} for name, value in estimates.items()]
    rows.append({"formula": AVERAGE_LABEL, "one_rep_max": get_one_rep_max(weight, reps, decimals)})
    return pd.DataFrame(rows, columns=["formula", "one_rep_max"])


def rep_range_frame(weight: float, reps_values: Iterable[float], decimals: int = 2) -> pd.DataFrame:
    """Estimates for a fixed weight across several rep counts.

    Index is ``reps``; columns are the formula names followed by ``average``.
    """
    reps_list = list(reps_values)
    records = []
    for r in reps_list:
        row = get_all_formulas(weight, r, decimals)
        row[AVERAGE_LABEL] = get_one_rep_max(weight, r, decimals)
        records.append(row)
    df = pd.DataFrame(records, columns=FORMULA_NAMES + [AVERAGE_LABEL])
    df.index = pd.Index(reps_list, name="reps")
    return df


def add_one_rep_max_column(
    df: pd.DataFrame,
    formula: Optional[str] = None,
    decimals: int = 2,
    weight_col: str = "weight",
    reps_col: str = "reps",
    out_col: str = "one_rep_max",
) -> pd.DataFrame:
    """Return a copy of a lift log with an estimated 1RM column appended.

    Missing weight or reps give NaN for that row. An unknown formula raises
    UnknownFormulaError even when the frame is empty.
    """
    missing = [c for c in (weight_col, reps_col) if c not in df.columns]
    if missing:
        raise KeyError(f"Lift frame is missing columns: {missing}")

    if formula:
        resolve_formula(formula)

    out = df.copy()
    if out.empty:
        out[out_col] = pd.Series(dtype=float)
        return out

    def _row_1rm(row):
        w, r = row[weight_col], row[reps_col]
        if pd.isna(w) or pd.isna(r):
            return float("nan")
        return get_one_rep_max(float(w), float(r), decimals, formula)

    out[out_col] = out.apply(_row_1rm, axis=1)
    logger.debug(f"Added {out_col} to {len(out)} rows (formula={formula or AVERAGE_LABEL})")
    return out


def formula_curves(weight: float, max_reps: float = 12, points: int = 100) -> pd.DataFrame:
    """Unrounded estimates for every formula over reps 1..max_reps, for charting.

    Columns: reps followed by the formula names.
    """
    reps = np.linspace(1, max_reps, points)
    data = {"reps": reps}
    for name in FORMULA_NAMES:
        data[name] = FORMULAS[name](weight, reps)
    return pd.DataFrame(data)
