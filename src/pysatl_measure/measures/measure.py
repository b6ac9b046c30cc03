"""
Measure Core Type
=================

This module defines :class:`Measure`, a probability (or general) measure
represented by its *integration functional*.

For any sigma-algebra there is a one-to-one correspondence between measures
and increasing linear functionals on the space of non-negative measurable
functions, ``P(A) = P(I_A)`` for a measurable set ``A`` and its indicator
``I_A``. A :class:`Measure` therefore stores nothing but a callable that takes
a real-valued function of an outcome and returns its integral (expectation).

Everything else in :mod:`pysatl_measure.measures` is built on top of
:meth:`Measure.apply`:

- :meth:`Measure.map` — pushforward (image measure);
- :meth:`Measure.bind` — dependent sequencing (Bayesian composition);
- :meth:`Measure.combine` — independent combination via nested integration,
  which backs ``+``, ``-`` and ``*``.

Notes
-----
- Measures are immutable values. Combinators build new measures whose closures
  reference their operands; operands are never modified.
- Non-finite results (``inf``, ``nan``) are returned unchanged.
- Measures have no interpretation as scalar literals, so building a measure
  from a number or taking its sign raises :class:`UnsupportedOperationError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from dataclasses import dataclass
from numbers import Number as _AbstractNumber
from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_measure.types import Integrand


class UnsupportedOperationError(TypeError):
    """
    Raised when an arithmetic-interface operation has no measure-valued meaning.

    This covers constructing a measure from a bare numeral (including mixed
    arithmetic such as ``0 + mu``), extracting a sign and negation.
    """


@dataclass(frozen=True, slots=True)
class Measure[A]:
    """
    Measure over outcomes of type ``A`` given by its integration functional.

    Parameters
    ----------
    integrator : Callable[[Callable[[A], float]], float]
        Pure function mapping a test function to its integral under the
        measure.

    Notes
    -----
    The type does not check that the measure is normalised; ``volume == 1``
    is a precondition callers maintain when building probability measures.

    Examples
    --------
    >>> mu = Measure(lambda f: 0.5 * f(0.0) + 0.5 * f(1.0))
    >>> mu.apply(lambda x: x)
    0.5
    >>> (mu + mu).apply(lambda x: x)
    1.0
    """

    integrator: Callable[[Integrand[A]], float]

    def apply(self, f: Integrand[A]) -> float:
        """
        Integrate ``f`` against the measure.

        Parameters
        ----------
        f : Callable[[A], float]
            Test function.

        Returns
        -------
        float
            Integral of ``f``; may be non-finite.
        """
        return self.integrator(f)

    def __call__(self, f: Integrand[A]) -> float:
        return self.integrator(f)

    # ------------------------------------------------------------------ #
    # Composition
    # ------------------------------------------------------------------ #

    def map[B](self, h: Callable[[A], B]) -> Measure[B]:
        """
        Pushforward (image) measure of ``h``.

        ``apply(mu.map(h), g) == apply(mu, g ∘ h)``, i.e. the distribution of
        ``h(X)`` for ``X ~ mu``.
        """
        integrator = self.integrator

        def _integrate(g: Integrand[B]) -> float:
            return integrator(lambda x: g(h(x)))

        return Measure(_integrate)

    def bind[B](self, k: Callable[[A], Measure[B]]) -> Measure[B]:
        """
        Dependent sequencing of measures.

        ``apply(mu.bind(k), g) == apply(mu, x ↦ apply(k(x), g))``. With ``mu``
        a prior over a parameter and ``k`` a likelihood kernel this is the
        marginal (posterior-predictive) measure over observations.
        """
        integrator = self.integrator

        def _integrate(g: Integrand[B]) -> float:
            return integrator(lambda x: k(x).apply(g))

        return Measure(_integrate)

    def combine[B, C](self, other: Measure[B], op: Callable[[A, B], C]) -> Measure[C]:
        """
        Measure of ``op(X, Y)`` for independent ``X ~ self`` and ``Y ~ other``.

        The integral is nested with ``self`` on the outside:
        ``apply(result, g) == apply(self, x ↦ apply(other, y ↦ g(op(x, y))))``.
        This order is kept for every operator, commutative or not, so that
        floating-point rounding is reproducible.
        """
        outer = self.integrator
        inner = other.integrator

        def _integrate(g: Integrand[C]) -> float:
            return outer(lambda x: inner(lambda y: g(op(x, y))))

        return Measure(_integrate)

    # ------------------------------------------------------------------ #
    # Arithmetic interface
    # ------------------------------------------------------------------ #

    @classmethod
    def from_number(cls, value: Any) -> NoReturn:
        """Numerals have no measure interpretation; always raises."""
        raise UnsupportedOperationError(
            f"Cannot build a Measure from the number {value!r}: not supported for Measures."
        )

    def sign(self) -> NoReturn:
        """Measures have no sign; always raises."""
        raise UnsupportedOperationError("sign: not supported for Measures.")

    def _binary(self, other: object, op: Callable[[Any, Any], Any]) -> Measure[Any]:
        if isinstance(other, Measure):
            return self.combine(other, op)
        if isinstance(other, _AbstractNumber):
            Measure.from_number(other)
        return NotImplemented

    def _reflected(self, other: object) -> Measure[Any]:
        if isinstance(other, _AbstractNumber):
            Measure.from_number(other)
        return NotImplemented

    def __add__(self, other: object) -> Measure[Any]:
        return self._binary(other, operator.add)

    def __sub__(self, other: object) -> Measure[Any]:
        return self._binary(other, operator.sub)

    def __mul__(self, other: object) -> Measure[Any]:
        return self._binary(other, operator.mul)

    def __radd__(self, other: object) -> Measure[Any]:
        return self._reflected(other)

    def __rsub__(self, other: object) -> Measure[Any]:
        return self._reflected(other)

    def __rmul__(self, other: object) -> Measure[Any]:
        return self._reflected(other)

    def __abs__(self) -> Measure[A]:
        return self

    def __neg__(self) -> NoReturn:
        # negation is 0 - mu, and 0 is a numeral
        Measure.from_number(0)


def apply[A](mu: Measure[A], f: Integrand[A]) -> float:
    """Integrate ``f`` against ``mu``; functional form of :meth:`Measure.apply`."""
    return mu.apply(f)
