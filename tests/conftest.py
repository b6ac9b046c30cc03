from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable, Generator
from typing import Any

import pytest

from pysatl_measure.measures.quadrature import QuadratureConfig, default_quadrature_config

pytest.importorskip("scipy")

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def _normal_pdf(loc: float = 0.0, scale: float = 1.0) -> Callable[[float], float]:
    # z * z instead of z**2: tanh-sinh abscissae reach ~1e15
    def _pdf(x: float) -> float:
        z = (x - loc) / scale
        return _INV_SQRT_2PI / scale * math.exp(-0.5 * z * z)

    return _pdf


@pytest.fixture(autouse=True)
def _fresh_quadrature_config() -> Generator[None, Any, None]:
    default_quadrature_config.cache_clear()
    yield


@pytest.fixture
def normal_pdf() -> Callable[..., Callable[[float], float]]:
    return _normal_pdf


@pytest.fixture
def standard_normal_pdf() -> Callable[[float], float]:
    return _normal_pdf()


@pytest.fixture
def nested_config() -> QuadratureConfig:
    """Slightly looser tolerances for nested (double) integrals."""
    return QuadratureConfig(atol=1e-10, rtol=1e-8)
