"""
PySATL Measure
==============

Unit tests for measures, combinators, constructors, quadrature and statistics.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
