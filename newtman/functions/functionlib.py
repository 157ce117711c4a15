# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import newtman.common.typing as tp
from newtman.common.decorators import Registry
from . import corefuncs
from .base import Benchmark


registry: Registry[tp.Type[Benchmark]] = Registry()


@registry.register
class Sphere(Benchmark):
    """Sphere function :math:`f(x) = \\sum_{i=1}^{d} x_i^2`, minimal at the origin."""

    function = staticmethod(corefuncs.sphere)

    def optimum(self, dimension: int) -> np.ndarray:
        return np.zeros(dimension)


@registry.register
class Easom(Benchmark):
    """2-dimensional Easom function
    :math:`f(x) = -\\cos(x_1) \\cos(x_2) \\exp(-(x_1 - \\pi)^2 - (x_2 - \\pi)^2)`,
    minimal at :math:`(\\pi, \\pi)`.
    """

    function = staticmethod(corefuncs.easom)

    def optimum(self, dimension: int) -> np.ndarray:
        assert dimension == 2, "This is a 2D function"
        return np.array([np.pi, np.pi])


@registry.register
class Ackley(Benchmark):
    """d-dimensional Ackley function, minimal at the origin."""

    function = staticmethod(corefuncs.ackley)

    def optimum(self, dimension: int) -> np.ndarray:
        return np.zeros(dimension)


@registry.register
class Rosenbrock(Benchmark):
    """d-dimensional Rosenbrock function (d >= 2), minimal at (1, ..., 1)."""

    function = staticmethod(corefuncs.rosenbrock)

    def optimum(self, dimension: int) -> np.ndarray:
        return np.ones(dimension)


@registry.register
class GoldsteinPrice(Benchmark):
    function = staticmethod(corefuncs.goldsteinprice)

    def optimum(self, dimension: int) -> np.ndarray:
        assert dimension == 2, "This is a 2D function"
        return np.array([0.0, -1.0])


@registry.register
class Beale(Benchmark):
    function = staticmethod(corefuncs.beale)

    def optimum(self, dimension: int) -> np.ndarray:
        assert dimension == 2, "This is a 2D function"
        return np.array([3.0, 0.5])


@registry.register
class Levy(Benchmark):
    """d-dimensional Levy function, minimal at (1, ..., 1)."""

    function = staticmethod(corefuncs.levy)

    def optimum(self, dimension: int) -> np.ndarray:
        return np.ones(dimension)
