"""
Measures subpackage

Measures represented by their integration functional, and the algebra built
on top of them:

- core type and arithmetic interface (:mod:`.measure`);
- composition operators (:mod:`.combinators`);
- constructors from observations, densities and mass functions
  (:mod:`.constructors`);
- tanh-sinh quadrature configuration (:mod:`.quadrature`);
- derived statistics and averaging primitives (:mod:`.statistics`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .combinators import (
    add,
    ap,
    bind,
    combine,
    multiply,
    point_mass,
    pushforward,
    subtract,
)
from .constructors import (
    from_density,
    from_mass_function,
    from_observations,
    identity_measure,
)
from .measure import Measure, UnsupportedOperationError, apply
from .quadrature import (
    QuadratureConfig,
    QuadratureConvergenceWarning,
    default_quadrature_config,
    integrate_real_line,
)
from .statistics import (
    average,
    cdf,
    expectation,
    indicator,
    probability,
    variance,
    volume,
    weighted_average,
)

__all__ = [
    # core
    "Measure",
    "UnsupportedOperationError",
    "apply",
    # combinators
    "point_mass",
    "pushforward",
    "bind",
    "ap",
    "combine",
    "add",
    "subtract",
    "multiply",
    # constructors
    "from_observations",
    "from_density",
    "from_mass_function",
    "identity_measure",
    # quadrature
    "QuadratureConfig",
    "QuadratureConvergenceWarning",
    "default_quadrature_config",
    "integrate_real_line",
    # statistics
    "average",
    "weighted_average",
    "volume",
    "expectation",
    "variance",
    "cdf",
    "indicator",
    "probability",
]
