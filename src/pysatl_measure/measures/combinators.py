"""
Composition Operators
=====================

Functional forms of the measure combinators.

- :func:`point_mass` — Dirac measure, the unit of sequencing;
- :func:`pushforward` — image measure under a function;
- :func:`bind` — dependent sequencing (Bayesian composition);
- :func:`ap` — apply a measure over functions to a measure over values;
- :func:`combine` — independent combination under a binary operator;
- :func:`add`, :func:`subtract`, :func:`multiply` — sum, difference and
  product of independent random variables.

All of them delegate to :class:`~pysatl_measure.measures.measure.Measure`
methods; ``+``, ``-`` and ``*`` on measures and the functions here share the
single implementation in :meth:`Measure.combine`.

Examples
--------
Posterior-predictive measure of a coin whose bias has a discrete prior:

>>> from pysatl_measure.measures.constructors import from_mass_function
>>> prior = from_mass_function(lambda p: 0.5, [0.25, 0.75])
>>> def likelihood(p):
...     return from_mass_function(lambda k: p if k == 1 else 1 - p, [0, 1])
>>> predictive = bind(prior, likelihood)
>>> predictive.apply(lambda k: k)
0.5
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from typing import TYPE_CHECKING

from pysatl_measure.measures.measure import Measure

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_measure.types import Integrand


def point_mass[A](x: A) -> Measure[A]:
    """
    Dirac measure at ``x``: ``apply(point_mass(x), f) == f(x)``.

    ``bind(point_mass(x), k)`` behaves as ``k(x)`` and ``bind(mu, point_mass)``
    behaves as ``mu``.
    """

    def _integrate(f: Integrand[A]) -> float:
        return f(x)

    return Measure(_integrate)


def pushforward[A, B](mu: Measure[A], h: Callable[[A], B]) -> Measure[B]:
    """Image measure of ``mu`` under ``h``; see :meth:`Measure.map`."""
    return mu.map(h)


def bind[A, B](mu: Measure[A], kernel: Callable[[A], Measure[B]]) -> Measure[B]:
    """Sequence ``mu`` with a measure-valued kernel; see :meth:`Measure.bind`."""
    return mu.bind(kernel)


def ap[A, B](functions: Measure[Callable[[A], B]], mu: Measure[A]) -> Measure[B]:
    """
    Apply a measure over functions to a measure over values.

    ``ap(point_mass(h), mu)`` is ``pushforward(mu, h)``. The function measure
    is integrated on the outside.
    """
    return functions.bind(lambda h: mu.map(h))


def combine[A, B, C](mu: Measure[A], nu: Measure[B], op: Callable[[A, B], C]) -> Measure[C]:
    """
    Measure of ``op(X, Y)`` for independent ``X ~ mu``, ``Y ~ nu``.

    ``mu`` is integrated on the outside; see :meth:`Measure.combine`.
    """
    return mu.combine(nu, op)


def add(mu: Measure[float], nu: Measure[float]) -> Measure[float]:
    """Distribution of ``X + Y`` for independent ``X ~ mu``, ``Y ~ nu``."""
    return combine(mu, nu, operator.add)


def subtract(mu: Measure[float], nu: Measure[float]) -> Measure[float]:
    """Distribution of ``X - Y`` for independent ``X ~ mu``, ``Y ~ nu``."""
    return combine(mu, nu, operator.sub)


def multiply(mu: Measure[float], nu: Measure[float]) -> Measure[float]:
    """Distribution of ``X * Y`` for independent ``X ~ mu``, ``Y ~ nu``."""
    return combine(mu, nu, operator.mul)
