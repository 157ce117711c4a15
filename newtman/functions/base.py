# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import newtman.common.typing as tp
from newtman.common import errors


class Benchmark:
    """Base class for benchmark objective functions.

    Subclasses provide the core function through the :code:`function` attribute,
    and the location of their global minimum through :code:`optimum`.
    Benchmarks are evaluated either by calling them, or through
    :code:`evaluate(benchmark, x)`.

    Notes
    -----
    - benchmarks do not hold any state, so two instances of the same class are equal.
    - bounds are not part of the benchmark: they are provided by the population.
    """

    function: tp.Callable[[np.ndarray], float]

    def evaluate(self, x: tp.ArrayLike) -> float:
        return self.function(np.asarray(x, dtype=float))

    def __call__(self, x: tp.ArrayLike) -> float:
        return self.evaluate(x)

    def optimum(self, dimension: int) -> np.ndarray:
        """Position of the global minimum for the given dimension"""
        raise NotImplementedError

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def __eq__(self, other: tp.Any) -> bool:
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __repr__(self) -> str:
        return f"{self.name}()"


def evaluate(benchmark: Benchmark, x: tp.ArrayLike) -> float:
    """Evaluates a benchmark on a position

    Parameters
    ----------
    benchmark: Benchmark
        the benchmark to evaluate
    x: array-like
        position where to evaluate it

    Returns
    -------
    float
        the value of the benchmark function at this position
    """
    if not isinstance(benchmark, Benchmark):
        raise errors.NewtmanTypeError(f"Expected a Benchmark instance, got {benchmark!r}")
    return benchmark.evaluate(x)
