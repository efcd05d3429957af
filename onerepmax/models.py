from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from onerepmax.estimator import get_all_formulas, get_one_rep_max
from onerepmax.formulas import FormulaName

"""Pydantic models validating calculator input.

The estimator functions accept any numbers; these models are the strict
layer used by the app and scripts before calling them.
"""

# Formula select values that mean "average of all formulas".
AVERAGE_ALIASES = {"", "average", "avg", "all"}


class OneRepMaxRequest(BaseModel):
    """Validated (weight, reps) set plus rounding and formula choice."""

    weight: float = Field(gt=0, description="Weight must be positive")
    reps: float = Field(gt=0, lt=37, description="Reps must be between 0 and 37")
    decimals: int = Field(2, ge=0, le=100, description="Decimal places 0-100")
    formula: Optional[FormulaName] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"weight": 100.0, "reps": 5, "decimals": 2, "formula": "epley"},
                {"weight": 80.0, "reps": 6},
            ]
        }
    )

    @field_validator("formula", mode="before")
    @classmethod
    def normalize_formula(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip().lower()
            return None if v in AVERAGE_ALIASES else v
        return v

    def estimate(self) -> float:
        return get_one_rep_max(self.weight, self.reps, self.decimals, self.formula)

    def compare(self) -> dict[str, float]:
        return get_all_formulas(self.weight, self.reps, self.decimals)
