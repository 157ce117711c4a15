# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .population import Particle as Particle
from .population import Population as Population
from .optimization.pso import PSO as PSO
from .optimization.pso import ConfPSO as ConfPSO
from .optimization.base import OptimizationResults as OptimizationResults
from .optimization import callbacks as callbacks
from . import functions as functions


__all__ = [
    "Particle",
    "Population",
    "PSO",
    "ConfPSO",
    "OptimizationResults",
    "callbacks",
    "functions",
    "errors",
    "typing",
]


__version__ = "0.1.0"
