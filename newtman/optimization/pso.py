# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import warnings
import numpy as np
import newtman.common.typing as tp
from newtman.common import errors
from newtman.population import Particle
from newtman.population import Population
from . import base
from . import utils


logger = logging.getLogger(__name__)


class SwarmState:
    """Mutable state of a swarm run, shared by all particle updates.
    The global best may change during an iteration, and particles updated later
    in the same iteration see the new value.

    Parameters
    ----------
    best_position: np.ndarray
        best position found by any particle so far
    best_value: float
        objective function at best_position
    inertia: float
        current inertia weight
    """

    def __init__(self, best_position: np.ndarray, best_value: float, inertia: float) -> None:
        self.best_position = best_position
        self.best_value = best_value
        self.inertia = inertia

    def __repr__(self) -> str:
        return f"SwarmState(best_value={self.best_value}, inertia={self.inertia})"


def _initialize_best(objective: tp.Callable[[np.ndarray], float], population: Population, state: SwarmState) -> None:
    """Scans the positions (not the personal bests) of the population in order"""
    for particle in population:
        y = objective(particle.position)
        if y < state.best_value:
            state.best_position[:] = particle.position
            state.best_value = y


def _update(
    objective: tp.Callable[[np.ndarray], float],
    population: Population,
    state: SwarmState,
    rng: np.random.RandomState,
    c1: float,
    c2: float,
) -> None:
    """Updates all particles of the population in order, drawing from a single random state."""
    dimension = population.dimension
    for particle in population:
        rngs = rng.uniform(0.0, 1.0, size=(dimension, 2))
        particle.velocity = (
            state.inertia * particle.velocity
            + c1 * rngs[:, 0] * (particle.personal_best - particle.position)
            + c2 * rngs[:, 1] * (state.best_position - particle.position)
        )
        particle.position = particle.position + particle.velocity
        utils.clip_positions_velocities(particle)
        y = objective(particle.position)
        if y < state.best_value:
            state.best_position[:] = particle.position
            state.best_value = y
        # the personal best value is not cached, it is evaluated again at each update
        if y < objective(particle.personal_best):
            particle.personal_best[:] = particle.position


class _PSO(base.Solver):

    algorithm_name = "PSO"

    def __init__(
        self,
        population: tp.Sequence[Particle],
        k_max: int,
        seed: tp.Seed = None,
        config: tp.Optional["ConfPSO"] = None,
    ) -> None:
        super().__init__(population, k_max, seed=seed)
        self._config = ConfPSO() if config is None else config
        if len(self.population) < 2:
            warnings.warn(
                "PSO with a single particle only follows its own best position",
                errors.InefficientSettingsWarning,
            )
        self._decay = utils.weight_decay(self._config.w, self.k_max)
        logger.debug("Inertia weight decays from %s by %s per iteration", self._config.w, self._decay)
        self.state = SwarmState(self.best_position, self.best_value, self._config.w)

    @property
    def inertia(self) -> float:
        return self.state.inertia

    def _internal_initialize(self, objective: tp.Callable[[np.ndarray], float]) -> None:
        _initialize_best(objective, self.population, self.state)
        self._sync_best()

    def _internal_iterate(self, objective: tp.Callable[[np.ndarray], float]) -> None:
        _update(objective, self.population, self.state, self._rng, self._config.c1, self._config.c2)
        self._sync_best()
        # make the inertia weight decay over time
        self.state.inertia -= self._decay

    def _sync_best(self) -> None:
        self.best_position = self.state.best_position
        self.best_value = self.state.best_value

    def provide_recommendation(self) -> np.ndarray:
        # the personal best of the first particle, not the tracked global best
        return np.array(self.population[0].personal_best, copy=True)


class ConfPSO(base.ConfiguredSolver):
    """`Particle Swarm Optimization <https://en.wikipedia.org/wiki/Particle_swarm_optimization>`_
    with inertia, where the inertia weight decays linearly from :code:`w` to 0.4 over the iterations.

    Parameters
    ----------
    w: float
        initial inertia weight, i.e. how much of the previous velocity is retained
    c1: float
        balance for the influence of the individual's knowledge, i.e. the
        best individual position so far.
    c2: float
        balance for the influence of the population's knowledge, i.e. the
        best global position so far.

    Note
    ----
    - Particles are updated asynchronously: the global best is updated as soon as a particle
      improves it, and the following particles of the same iteration use the new value.
    - Velocities are clipped to [-v_max, v_max] with v_max the maximum of the velocity coordinates.
    - The returned solution is the personal best of the first particle of the population,
      while the best position found by the whole population is provided separately
      (:code:`global_best_position` and :code:`global_best_value` of the results).
    """

    # pylint: disable=unused-argument
    def __init__(self, w: float = 0.9, c1: float = 2.0, c2: float = 2.0) -> None:
        super().__init__(_PSO, locals())
        if c1 < 0 or c2 < 0:
            raise errors.NewtmanValueError(f"Acceleration coefficients must be non-negative (got c1={c1}, c2={c2})")
        self.w = w
        self.c1 = c1
        self.c2 = c2


ConfPSO().set_name("PSO", register=True)


def PSO(
    objective: base.Objective,
    population: tp.Sequence[Particle],
    k_max: int,
    *,
    w: float = 0.9,
    c1: float = 2.0,
    c2: float = 2.0,
    seed: tp.Seed = None,
    callbacks: tp.Iterable[tp.Callable[[base.Solver], None]] = (),
) -> base.OptimizationResults:
    """Minimizes the objective with Particle Swarm Optimization with inertia.

    Parameters
    ----------
    objective: Benchmark or callable
        function to minimize, taking a position (np.ndarray) and returning a float
    population: Population
        population of particles, mutated in place during the run
    k_max: int
        number of iterations
    w: float
        initial inertia weight, which decays linearly down to 0.4 over the iterations
    c1: float
        balance for the influence of the best individual solution so far
    c2: float
        balance for the influence of the best global solution so far
    seed: int or None
        seed of the random generator. If None (default) it is seeded from OS entropy.
    callbacks: iterable of callables
        callables registered to be called with the solver after each iteration

    Returns
    -------
    OptimizationResults
        results of the run, with algorithm name "PSO"

    Example
    -------
    .. code-block:: python

        results = PSO(lambda x: float(x.dot(x)), Population(30, 3, -15.0, 15.0), 10000)
    """
    solver = ConfPSO(w=w, c1=c1, c2=c2)(population, k_max, seed=seed)
    for callback in callbacks:
        solver.register_callback("iteration", callback)
    return solver.minimize(objective)
