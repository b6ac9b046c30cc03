"""
Measure Constructors
====================

Build :class:`~pysatl_measure.measures.measure.Measure` values from raw data:

- :func:`from_observations` — empirical measure of a sample;
- :func:`from_density` — measure with a density on the real line, integrated
  by tanh-sinh quadrature;
- :func:`from_mass_function` — discrete measure over an explicit finite
  support;
- :func:`identity_measure` — empirical measure of the empty sample.

Notes
-----
- Input sequences are copied into tuples, so later mutation of the caller's
  list does not change the measure.
- None of the constructors check that the result is normalised. A density
  that does not integrate to one, or masses that do not sum to one over the
  support, silently produce a non-probability measure.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_measure.measures.measure import Measure
from pysatl_measure.measures.quadrature import integrate_real_line
from pysatl_measure.measures.statistics import weighted_average

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_measure.measures.quadrature import QuadratureConfig
    from pysatl_measure.types import DensityFunc, Integrand, MassFunc


def from_observations[A](samples: Iterable[A]) -> Measure[A]:
    """
    Empirical measure of a sample.

    Parameters
    ----------
    samples : Iterable[float]
        Observed values. Should be non-empty; see :func:`identity_measure` for
        the empty case.

    Returns
    -------
    Measure[float]
        ``apply(mu, f)`` is the streaming mean of ``f`` over ``samples``.
    """
    xs = tuple(samples)

    def _integrate(f: Integrand[A]) -> float:
        return weighted_average(f, xs)

    return Measure(_integrate)


def from_density(density: DensityFunc, config: QuadratureConfig | None = None) -> Measure[float]:
    """
    Measure with the given density on the real line.

    Parameters
    ----------
    density : Callable[[float], float]
        Scalar density. It must be defined (possibly zero) on the whole real
        line.
    config : QuadratureConfig, optional
        Quadrature settings used for every integral of this measure.

    Returns
    -------
    Measure[float]
        ``apply(mu, f) = ∫ f(x) density(x) dx`` over ``(-inf, inf)``.

    Notes
    -----
    ``f * density`` must be integrable. Otherwise the result is non-finite or
    unconverged and a
    :class:`~pysatl_measure.measures.quadrature.QuadratureConvergenceWarning`
    is emitted.
    """

    def _integrate(f: Integrand[float]) -> float:
        return integrate_real_line(lambda x: f(x) * density(x), config)

    return Measure(_integrate)


def from_mass_function[A](mass: MassFunc[A], support: Iterable[A]) -> Measure[A]:
    """
    Discrete measure from a mass function over a finite support.

    Parameters
    ----------
    mass : Callable[[A], float]
        Probability mass of each outcome.
    support : Iterable[A]
        Finite enumeration of the outcomes.

    Returns
    -------
    Measure[A]
        ``apply(mu, f) = sum(f(a) * mass(a) for a in support)``.
    """
    points = tuple(support)

    def _integrate(f: Integrand[A]) -> float:
        total = 0.0
        for a in points:
            total += f(a) * mass(a)
        return total

    return Measure(_integrate)


def identity_measure() -> Measure[float]:
    """
    Empirical measure of the empty sample.

    Every test function integrates to ``0.0`` (the seed of the streaming
    mean), so this is the zero measure. Under the independent-combination
    operators it absorbs rather than acts as a neutral element:
    ``identity_measure() + mu`` integrates everything to ``0.0`` as well.
    Folding with it as a seed, ``functools.reduce(add, measures, identity_measure())``,
    therefore yields the zero measure and not the sum of ``measures``.
    """
    return from_observations(())
