"""
Derived Statistics
==================

Scalar summaries of a :class:`~pysatl_measure.measures.measure.Measure`, each
obtained by applying the measure to one specific test function:

- :func:`volume` — integral of the constant ``1``;
- :func:`expectation` — integral of the identity;
- :func:`variance` — raw second moment minus the squared mean;
- :func:`cdf` / :func:`probability` — integrals of interval indicators.

It also holds the streaming averaging primitives, :func:`average` and
:func:`weighted_average`, that back empirical measures.

Notes
-----
- :func:`variance` uses ``E[X^2] - E[X]^2``. It loses precision for empirical
  measures with a large mean compared to a two-pass formula.
- :func:`cdf` works the same way for discrete and continuous measures because
  it only relies on :meth:`Measure.apply`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pysatl_measure.measures.measure import Measure
    from pysatl_measure.types import Number, ScalarFunc


def average(xs: Iterable[Number]) -> float:
    """
    Streaming arithmetic mean.

    Uses the running update ``m <- m + (x - m) / (n + 1)`` instead of
    sum-then-divide to bound rounding error over long sequences.

    Parameters
    ----------
    xs : Iterable[float]
        Values to average. Consumed once.

    Returns
    -------
    float
        Mean of ``xs``. An empty iterable returns the seed value ``0.0``.
    """
    m = 0.0
    n = 0
    for x in xs:
        n += 1
        m += (x - m) / n
    return float(m)


def weighted_average[A](f: Callable[[A], Number], xs: Iterable[A]) -> float:
    """Streaming mean of ``f(x)`` over ``xs``."""
    return average(f(x) for x in xs)


def volume(mu: Measure[Any]) -> float:
    """
    Total mass of ``mu``.

    Equals ``1`` for a well-formed probability measure, which makes it a
    convenient diagnostic for densities and mass functions.
    """
    return mu.apply(lambda _: 1.0)


def expectation(mu: Measure[float]) -> float:
    """Mean of a real-valued measure."""
    return mu.apply(lambda x: x)


def variance(mu: Measure[float]) -> float:
    """Variance of a real-valued measure, ``E[X^2] - E[X]^2``."""
    mean = expectation(mu)
    return mu.apply(lambda x: x * x) - mean * mean


def indicator(a: float, b: float) -> ScalarFunc:
    """
    Indicator of the closed interval ``[a, b]``.

    Parameters
    ----------
    a, b : float
        Interval endpoints; infinite endpoints are allowed.

    Returns
    -------
    Callable[[float], float]
        ``x ↦ 1.0`` if ``a <= x <= b`` else ``0.0``.
    """

    def _indicator(x: float) -> float:
        return 1.0 if a <= x <= b else 0.0

    return _indicator


def cdf(mu: Measure[float], b: float) -> float:
    """
    Cumulative distribution function of ``mu`` at ``b``.

    For a density measure the indicator jumps at ``b``, which tanh-sinh
    resolves only to about the abscissa spacing at ``b`` (around ``1e-3`` with
    the default ``max_level``); the quadrature usually reports
    non-convergence there.

    Examples
    --------
    >>> from pysatl_measure.measures.constructors import from_observations
    >>> mu = from_observations(range(1, 11))
    >>> cdf(mu, 0), round(cdf(mu, 1), 12), cdf(mu, 10), cdf(mu, 11)
    (0.0, 0.1, 1.0, 1.0)
    """
    return mu.apply(indicator(-inf, b))


def probability(mu: Measure[float], a: float, b: float) -> float:
    """Mass that ``mu`` assigns to the closed interval ``[a, b]``."""
    return mu.apply(indicator(a, b))
