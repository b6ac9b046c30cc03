"""
PySATL Measure
==============

Probability measures represented by their integration functional, with
pushforward, sequencing and independent arithmetic combinators, constructors
from observations, densities and mass functions, and derived statistics.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .measures import *
from .measures import __all__ as _measures_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-measure")
__all__ = [
    "__version__",
    *_measures_all,
    *_types_all,
]

del _measures_all
del _types_all
