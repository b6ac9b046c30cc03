from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math
import warnings

import pytest

from pysatl_measure.measures.quadrature import (
    QuadratureConfig,
    QuadratureConvergenceWarning,
    default_quadrature_config,
    integrate_real_line,
)


class TestQuadratureConfig:
    def test_defaults(self) -> None:
        config = QuadratureConfig()
        assert config.atol == 1e-12
        assert config.rtol == 1e-10
        assert config.min_level == 2
        assert config.max_level == 10
        assert config.warn is True

    def test_default_config_is_cached(self) -> None:
        assert default_quadrature_config() is default_quadrature_config()
        assert default_quadrature_config() == QuadratureConfig()

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            QuadratureConfig().max_level = 3  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"atol": -1.0}, "non-negative"),
            ({"rtol": -1e-3}, "non-negative"),
            ({"max_level": 0}, "max_level"),
            ({"min_level": 5, "max_level": 3}, "min_level"),
            ({"min_level": -1}, "min_level"),
        ],
    )
    def test_invalid_config_raises(self, kwargs, message) -> None:
        with pytest.raises(ValueError, match=message):
            QuadratureConfig(**kwargs)


class TestIntegrateRealLine:
    def test_gaussian_integral(self) -> None:
        value = integrate_real_line(lambda x: math.exp(-x * x))
        assert value == pytest.approx(math.sqrt(math.pi), rel=1e-10)

    def test_heavy_tailed_integrand(self) -> None:
        # Cauchy kernel, polynomial decay
        value = integrate_real_line(lambda x: 1.0 / (1.0 + x * x))
        assert value == pytest.approx(math.pi, rel=1e-6)

    def test_zero_integral_converges_through_atol(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", QuadratureConvergenceWarning)
            value = integrate_real_line(lambda x: x * math.exp(-x * x))
        assert value == pytest.approx(0.0, abs=1e-12)

    def test_integrand_returning_ints(self) -> None:
        config = QuadratureConfig(warn=False)
        value = integrate_real_line(lambda x: 1 if -1.0 <= x <= 1.0 else 0, config)
        assert value == pytest.approx(2.0, abs=5e-2)

    def test_divergence_emits_warning(self) -> None:
        with pytest.warns(QuadratureConvergenceWarning, match="did not converge"):
            integrate_real_line(lambda x: abs(x), QuadratureConfig(max_level=4))

    def test_warning_can_be_disabled(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error", QuadratureConvergenceWarning)
            integrate_real_line(lambda x: abs(x), QuadratureConfig(max_level=4, warn=False))

    def test_infinite_limits_are_never_evaluated(self) -> None:
        seen: list[float] = []

        def f(x: float) -> float:
            seen.append(float(x))
            return math.exp(-x * x)

        integrate_real_line(f)
        assert seen
        assert all(math.isfinite(x) for x in seen)

    def test_integrand_undefined_at_infinity(self) -> None:
        # math.cos(inf) raises ValueError
        value = integrate_real_line(lambda x: math.cos(x) * math.exp(-x * x))
        assert value == pytest.approx(math.sqrt(math.pi) * math.exp(-0.25), rel=1e-9)
