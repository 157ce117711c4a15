# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
import pytest
from newtman.common import errors
from newtman.common import testing
from . import base
from . import corefuncs
from . import functionlib


def test_registry() -> None:
    testing.printed_assert_equal(
        sorted(functionlib.registry),
        ["Ackley", "Beale", "Easom", "GoldsteinPrice", "Levy", "Rosenbrock", "Sphere"],
    )


@testing.parametrized(
    sphere=(functionlib.Sphere, 3, 0.0),
    easom=(functionlib.Easom, 2, -1.0),
    ackley=(functionlib.Ackley, 5, 0.0),
    rosenbrock=(functionlib.Rosenbrock, 4, 0.0),
    goldsteinprice=(functionlib.GoldsteinPrice, 2, 3.0),
    beale=(functionlib.Beale, 2, 0.0),
    levy=(functionlib.Levy, 3, 0.0),
)
def test_benchmark_optimum(cls: tp.Type[base.Benchmark], dimension: int, expected: float) -> None:
    benchmark = cls()
    optimum = benchmark.optimum(dimension)
    assert optimum.shape == (dimension,)
    np.testing.assert_almost_equal(base.evaluate(benchmark, optimum), expected, decimal=10)
    # slightly away from the optimum is worse
    assert benchmark(optimum + 0.01) > expected


def test_benchmark_call_matches_core_function() -> None:
    x = [0.662, -0.217, -0.968, 1.867]
    benchmark = functionlib.Rosenbrock()
    np.testing.assert_equal(benchmark(x), corefuncs.rosenbrock(np.array(x)))
    np.testing.assert_equal(base.evaluate(benchmark, x), benchmark(x))


def test_benchmark_equality_and_repr() -> None:
    assert functionlib.Sphere() == functionlib.Sphere()
    assert functionlib.Sphere() != functionlib.Ackley()
    assert len({functionlib.Levy(), functionlib.Levy()}) == 1
    assert repr(functionlib.GoldsteinPrice()) == "GoldsteinPrice()"


def test_evaluate_requires_benchmark() -> None:
    with pytest.raises(errors.NewtmanTypeError):
        base.evaluate(corefuncs.sphere, [1.0, 2.0])  # type: ignore
