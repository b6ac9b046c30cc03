"""
Core Type Definitions
=====================

Fundamental type aliases used throughout PySATL Measure.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from typing import Any

import numpy as np

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""

type Integrand[A] = Callable[[A], float]
"""Real-valued function of an outcome that a measure integrates."""

type DensityFunc = Callable[[float], float]
"""Density with respect to the Lebesgue measure on the real line."""

type MassFunc[A] = Callable[[A], float]
"""Probability mass assigned to a single outcome."""


__all__ = [
    "NumPyNumber",
    "Number",
    "ScalarFunc",
    "Integrand",
    "DensityFunc",
    "MassFunc",
]
