# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import os
import numpy as np
import pytest
import newtman.common.typing as tp
from newtman.functions import corefuncs
from newtman.functions import functionlib
from newtman.population import Population
from . import pso


KEY = "NEWTMAN_SPECIAL_TESTS"
if not os.environ.get(KEY, ""):
    pytest.skip(f"These tests only run if {KEY} is set in the environment", allow_module_level=True)


NUM_TRIALS = 20


def _success_rate(objective: tp.Any, target: np.ndarray, tol: float, *args: tp.Any, k_max: int) -> float:
    successes = 0
    for seed in range(NUM_TRIALS):
        population = Population(*args, random_state=seed)
        results = pso.PSO(objective, population, k_max, seed=seed)
        successes += int(np.linalg.norm(results.solution - target) <= tol)
    return successes / NUM_TRIALS


@pytest.mark.parametrize("objective", [functionlib.Sphere(), corefuncs.sphere])  # type: ignore
def test_pso_sphere_convergence(objective: tp.Any) -> None:
    rate = _success_rate(objective, np.zeros(30), 1e-11, 30, 30, -10.0, 10.0, k_max=20000)
    assert rate >= 0.9, f"Only {rate:.0%} of the runs converged"


def test_pso_easom_convergence() -> None:
    rate = _success_rate(functionlib.Easom(), np.array([np.pi, np.pi]), 1e-8, 35, 2, -100.0, 100.0, k_max=10000)
    assert rate >= 0.9, f"Only {rate:.0%} of the runs converged"
