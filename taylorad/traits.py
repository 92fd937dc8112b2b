"""Classification of numbers, autodiff numbers and vectors."""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from typing import Any

import numpy as np


def is_arithmetic(x: Any) -> bool:
    """Return True if x is a plain real number (bool, int, float or numpy real scalar)."""
    return isinstance(x, numbers.Real)


def _is_autodiff_number(x: Any) -> bool:
    return not is_arithmetic(x) and callable(getattr(x, "seed", None)) and hasattr(x, "order")


def order(x: Any) -> int:
    """Return the derivative order of an autodiff number, or 0 for anything else."""
    if is_arithmetic(x):
        return 0
    value = getattr(x, "order", None)
    if callable(value):
        value = value()
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    return 0


def is_vector(x: Any) -> bool:
    """Return True if x is a vector-like container of numbers."""
    if is_arithmetic(x) or isinstance(x, (str, bytes, bytearray, Mapping)):
        return False
    if _is_autodiff_number(x):
        return False
    if isinstance(x, np.ndarray):
        return x.ndim >= 1
    if isinstance(x, (list, tuple)):
        return True
    return hasattr(x, "__len__") and hasattr(x, "__getitem__")