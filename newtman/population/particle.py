# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import newtman.common.typing as tp
from newtman.common import errors


DEFAULT_NUM_PARTICLES = 5
P = tp.TypeVar("P", bound="Particle")


def get_random_state(random_state: tp.Seed = None) -> np.random.RandomState:
    """Converts a seed into a random state.
    If nothing is provided, a new random state is seeded from numpy's global random generator,
    so that numpy.random.seed still provides reproducibility.
    """
    if isinstance(random_state, np.random.RandomState):
        return random_state
    if random_state is None:
        random_state = np.random.randint(2 ** 32, dtype=np.uint32)
    return np.random.RandomState(random_state)


def _check_bounds(lower: float, upper: float) -> None:
    if not lower < upper:
        raise errors.NewtmanValueError(f"Lower bound {lower} must be strictly smaller than upper bound {upper}")


def _check_positive(value: int, name: str) -> None:
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
        raise errors.NewtmanValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise errors.NewtmanValueError(f"{name} must be strictly positive, got {value}")


class Particle:
    """Candidate solution of a swarm, holding its current position, its velocity,
    the best position it has visited so far, as well as the bounds of the search space.
    The dimension of the particle is inferred from the length of the arrays.

    Parameters
    ----------
    position: array-like
        current position, i.e. the candidate solution
    velocity: array-like
        velocity related to the position
    personal_best: array-like
        best position visited by the particle
    lower_bound: float
        lower bound, shared by all coordinates
    upper_bound: float
        upper bound, shared by all coordinates

    Note
    ----
    The arrays are copied and converted to float.

    Example
    -------
    particle = Particle(np.zeros(3), np.random.rand(3), np.zeros(3), -1.0, 1.0)
    """

    def __init__(
        self,
        position: tp.ArrayLike,
        velocity: tp.ArrayLike,
        personal_best: tp.ArrayLike,
        lower_bound: float,
        upper_bound: float,
    ) -> None:
        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)
        self.personal_best = np.array(personal_best, dtype=float)
        arrays = (self.position, self.velocity, self.personal_best)
        if any(a.ndim != 1 for a in arrays):
            raise errors.NewtmanValueError("Position, velocity and personal best must be 1-dimensional arrays")
        if not len(self.position) == len(self.velocity) == len(self.personal_best):
            raise errors.NewtmanValueError(
                "Dimension must be unique, got lengths "
                f"{len(self.position)} (position), {len(self.velocity)} (velocity) "
                f"and {len(self.personal_best)} (personal best)"
            )
        if not self.position.size:
            raise errors.NewtmanValueError("Dimension is always positive")
        _check_bounds(lower_bound, upper_bound)
        self.lower_bound = float(lower_bound)
        self.upper_bound = float(upper_bound)

    @classmethod
    def from_bounds(
        cls: tp.Type[P], lower_bound: float, upper_bound: float, dimension: int, random_state: tp.Seed = None
    ) -> P:
        """Creates a particle randomly, using the bounds and the dimension needed.
        Position and velocity are drawn uniformly in [lower_bound, upper_bound], while
        the personal best is drawn uniformly in [0, 1).

        Parameters
        ----------
        lower_bound: float
            lower bound for the position
        upper_bound: float
            upper bound for the position
        dimension: int
            dimension of the position, velocity and personal best
        random_state: RandomState, int or None
            generator (or seed) to draw from
        """
        _check_positive(dimension, "Dimension")
        _check_bounds(lower_bound, upper_bound)
        rng = get_random_state(random_state)
        position = rng.uniform(lower_bound, upper_bound, size=dimension)
        velocity = rng.uniform(lower_bound, upper_bound, size=dimension)
        personal_best = rng.uniform(0.0, 1.0, size=dimension)
        return cls(position, velocity, personal_best, lower_bound, upper_bound)

    @property
    def dimension(self) -> int:
        return self.position.size

    def copy(self: P) -> P:
        return self.__class__(
            self.position, self.velocity, self.personal_best, self.lower_bound, self.upper_bound
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(position={self.position}, velocity={self.velocity}, "
            f"personal_best={self.personal_best}, bounds=[{self.lower_bound}, {self.upper_bound}])"
        )


class Population(tp.Sequence[Particle]):
    """Fixed-size set of particles which are optimized together.
    All particles share the same dimension and bounds.

    Usage
    -----
    - :code:`Population(num_particles, dimension, lower_bound, upper_bound)`
    - :code:`Population(dimension, lower_bound, upper_bound)`, with 5 particles

    Parameters
    ----------
    num_particles: int
        number of particles in the population (defaults to 5 if omitted)
    dimension: int
        dimension of each particle
    lower_bound: float
        lower bound of the search space
    upper_bound: float
        upper bound of the search space
    random_state: RandomState, int or None
        generator (or seed) used for drawing the initial state of all particles.
        If not provided, it is seeded from numpy's global random generator.
    """

    def __init__(self, *args: tp.Any, random_state: tp.Seed = None) -> None:
        if len(args) == 3:
            num_particles = DEFAULT_NUM_PARTICLES
            dimension, lower_bound, upper_bound = args
        elif len(args) == 4:
            num_particles, dimension, lower_bound, upper_bound = args
        else:
            raise errors.NewtmanTypeError(
                "Population expects (num_particles, dimension, lower_bound, upper_bound) "
                f"or (dimension, lower_bound, upper_bound), got {len(args)} arguments"
            )
        _check_positive(dimension, "Dimension")
        _check_positive(num_particles, "Number of particles")
        _check_bounds(lower_bound, upper_bound)
        rng = get_random_state(random_state)
        self._particles = [
            Particle.from_bounds(lower_bound, upper_bound, dimension, random_state=rng)
            for _ in range(num_particles)
        ]

    @classmethod
    def from_particles(cls, particles: tp.Iterable[Particle]) -> "Population":
        """Creates a population from existing particles, which must share
        the same dimension and bounds. The particles are not copied.
        """
        particles = list(particles)
        if not particles:
            raise errors.NewtmanValueError("There must be at least 1 Particle in the Population")
        first = particles[0]
        for particle in particles[1:]:
            if particle.dimension != first.dimension:
                raise errors.NewtmanValueError(
                    f"Particles must share the same dimension, got {particle.dimension} and {first.dimension}"
                )
            if (particle.lower_bound, particle.upper_bound) != (first.lower_bound, first.upper_bound):
                raise errors.NewtmanValueError("Particles must share the same bounds")
        population = cls.__new__(cls)
        population._particles = particles
        return population

    @property
    def dimension(self) -> int:
        return self._particles[0].dimension

    @property
    def bounds(self) -> tp.Tuple[float, float]:
        first = self._particles[0]
        return first.lower_bound, first.upper_bound

    def copy(self) -> "Population":
        """Deep copy of the population, which makes it possible to rerun
        an optimization from the same initial state
        """
        return self.__class__.from_particles(p.copy() for p in self._particles)

    @tp.overload
    def __getitem__(self, index: int) -> Particle:
        ...

    @tp.overload
    def __getitem__(self, index: slice) -> tp.List[Particle]:
        ...

    def __getitem__(self, index: tp.Union[int, slice]) -> tp.Union[Particle, tp.List[Particle]]:
        return self._particles[index]

    def __len__(self) -> int:
        return len(self._particles)

    def __repr__(self) -> str:
        lower, upper = self.bounds
        return (
            f"{self.__class__.__name__}(num_particles={len(self)}, dimension={self.dimension}, "
            f"bounds=[{lower}, {upper}])"
        )
