# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import functools
import numpy as np
import newtman.common.typing as tp
from newtman.common import tools as ntools
from newtman.common import errors
from newtman.common.decorators import Registry
from newtman.functions import Benchmark
from newtman.functions import evaluate
from newtman.population import Particle
from newtman.population import Population
from newtman.population.particle import get_random_state


logger = logging.getLogger(__name__)
registry: Registry["ConfiguredSolver"] = Registry()
Objective = tp.Union[tp.ObjectiveLike, Benchmark]
_SolverCallBack = tp.Callable[["Solver"], None]
S = tp.TypeVar("S", bound="ConfiguredSolver")


class OptimizationResults(tp.NamedTuple):
    """Summary of an optimization run

    Parameters
    ----------
    solution: np.ndarray
        the solution returned by the algorithm
    objective_value: float
        the objective function evaluated at the solution
    algorithm_name: str
        name of the algorithm which was used
    iterations: int
        number of iterations which were requested
    global_best_position: np.ndarray
        best position evaluated during the run, which can differ from the solution
        (see the algorithm documentation)
    global_best_value: float
        objective function at global_best_position
    """

    solution: np.ndarray
    objective_value: float
    algorithm_name: str
    iterations: int
    global_best_position: np.ndarray
    global_best_value: float


def as_objective(function: Objective) -> tp.Callable[[np.ndarray], float]:
    """Converts a benchmark or a callable into a plain objective callable

    Parameters
    ----------
    function: Benchmark or callable
        either a benchmark, evaluated through :code:`evaluate(benchmark, x)`,
        or any callable taking a position and returning a float.
    """
    if isinstance(function, Benchmark):
        return functools.partial(evaluate, function)
    if callable(function):
        return function
    raise errors.NewtmanTypeError(f"Objective must be a Benchmark or a callable, got {function!r}")


class Solver:
    """Algorithm framework running the iterations of a population based algorithm.

    - :code:`minimize(objective)` initializes the algorithm, runs exactly :code:`k_max` iterations
      and returns the results.
    - :code:`register_callback("iteration", callback)` registers a callable called with the solver
      after each iteration. This can be useful for custom logging.

    This class is abstract, subclasses must override :code:`_internal_initialize`,
    :code:`_internal_iterate` and :code:`provide_recommendation`, and keep
    :code:`best_position` and :code:`best_value` up to date.

    Each solver instance should be used only once, for a single run.

    Parameters
    ----------
    population: Population or sequence of Particle
        population to optimize, which is mutated in place
    k_max: int
        number of iterations
    seed: int, RandomState or None
        seed of the random state used for all draws of the run.
        If None, it is seeded from OS entropy.
    """

    algorithm_name = ""

    def __init__(self, population: tp.Sequence[Particle], k_max: int, seed: tp.Seed = None) -> None:
        if not isinstance(k_max, (int, np.integer)) or isinstance(k_max, bool) or k_max < 0:
            raise errors.NewtmanValueError(f"Number of iterations must be a non-negative integer, got {k_max!r}")
        if not isinstance(population, Population):
            population = Population.from_particles(population)
        self.population = population
        self.k_max = int(k_max)
        self.name = self.__class__.__name__  # printed name in repr
        self.num_iterations = 0
        self.best_position: np.ndarray = np.array(population[0].position, copy=True)
        self.best_value = float("inf")
        # without seed, the generator of the run is seeded from OS entropy
        self._rng = np.random.RandomState() if seed is None else get_random_state(seed)
        self._callbacks: tp.Dict[str, tp.List[_SolverCallBack]] = {}
        self._started = False

    @property
    def dimension(self) -> int:
        return self.population.dimension

    def register_callback(self, name: str, callback: _SolverCallBack) -> None:
        """Add a callback method called after each iteration, with the solver as argument.

        Parameters
        ----------
        name: str
            name of the event to register the callback for (only :code:`iteration` for now)
        callback: callable
            a callable taking the solver as argument
        """
        assert name in ["iteration"], f'Only "iteration" can have callbacks (not {name})'
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def minimize(self, objective: Objective) -> OptimizationResults:
        """Runs the optimization of the objective function on the population

        Parameters
        ----------
        objective: Benchmark or callable
            function to minimize, taking a position (np.ndarray) and returning a float

        Returns
        -------
        OptimizationResults
            the recommended solution, its value, and the best point evaluated during the run

        Note
        ----
        Errors raised by the objective function are propagated as is, leaving the population
        in its partially updated state.
        """
        if self._started:
            raise errors.NewtmanRuntimeError(f"{self.name} instances can only be used for a single run")
        self._started = True
        func = as_objective(objective)
        logger.debug(
            "Starting %s on %s for %s iterations", self.name, self.population, self.k_max
        )
        self._internal_initialize(func)
        for _ in range(self.k_max):
            self._internal_iterate(func)
            self.num_iterations += 1
            for callback in self._callbacks.get("iteration", []):
                callback(self)
        solution = self.provide_recommendation()
        results = OptimizationResults(
            solution=solution,
            objective_value=func(solution),
            algorithm_name=self.algorithm_name,
            iterations=self.k_max,
            global_best_position=np.array(self.best_position, copy=True),
            global_best_value=self.best_value,
        )
        logger.debug(
            "%s finished after %s iterations: solution value %s, best value %s",
            self.name,
            self.num_iterations,
            results.objective_value,
            results.global_best_value,
        )
        return results

    def provide_recommendation(self) -> np.ndarray:
        raise NotImplementedError

    def _internal_initialize(self, objective: tp.Callable[[np.ndarray], float]) -> None:
        raise NotImplementedError

    def _internal_iterate(self, objective: tp.Callable[[np.ndarray], float]) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"Instance of {self.name}(k_max={self.k_max}, population={self.population})"


class ConfiguredSolver:
    """Creates solver-like instances with configuration.

    Parameters
    ----------
    SolverClass: type
        class of the solver to configure
    config: dict
        dictionnary of all the configurations

    Note
    ----
    This provides a default repr which can be bypassed through set_name
    """

    def __init__(self, SolverClass: tp.Type[Solver], config: tp.Dict[str, tp.Any]) -> None:
        self._SolverClass = SolverClass
        config.pop("self", None)  # self comes from "locals()"
        config.pop("__class__", None)  # self comes from "locals()"
        self._config = config
        diff = ntools.different_from_defaults(instance=self, instance_dict=config, check_mismatches=True)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(self, population: tp.Sequence[Particle], k_max: int, seed: tp.Seed = None) -> Solver:
        """Creates a solver for a single run on the population

        Parameters
        ----------
        population: Population
            population to optimize
        k_max: int
            number of iterations
        seed: int, RandomState or None
            seed for the random state of the run
        """
        run = self._SolverClass(population, k_max, seed=seed, config=self)  # type: ignore
        run.name = self.name
        return run

    def minimize(
        self, objective: Objective, population: tp.Sequence[Particle], k_max: int, seed: tp.Seed = None
    ) -> OptimizationResults:
        """Creates a solver and runs it on the objective function"""
        return self(population, k_max, seed=seed).minimize(objective)

    def __repr__(self) -> str:
        return self.name

    def set_name(self: S, name: str, register: bool = False) -> S:
        """Set a new representation for the instance"""
        self.name = name
        if register:
            registry.register_name(name, self)
        return self

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            if self._config == other._config:
                return True
        return False
