# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
import pytest
from newtman.common import errors
from newtman.common import testing
from . import particle as pt


@testing.parametrized(
    explicit=((15, 20, -10.0, 10.0), 15, 20),
    default_count=((20, -10.0, 10.0), 5, 20),
    single=((1, 1, 0.0, 1.0), 1, 1),
)
def test_population(args: tp.Tuple[tp.Any, ...], num_particles: int, dimension: int) -> None:
    population = pt.Population(*args)
    lower, upper = args[-2:]
    assert len(population) == num_particles
    assert population.dimension == dimension
    assert population.bounds == (lower, upper)
    for particle in population:
        assert isinstance(particle, pt.Particle)
        for array in (particle.position, particle.velocity, particle.personal_best):
            assert array.shape == (dimension,)
        assert (particle.lower_bound, particle.upper_bound) == (lower, upper)
        testing.assert_in_interval(particle.position, lower, upper)
        testing.assert_in_interval(particle.velocity, lower, upper)
        testing.assert_in_interval(particle.personal_best, 0.0, 1.0)
        assert np.all(particle.personal_best < 1.0)


@testing.parametrized(
    negative_dimension=((15, -1, 1.0, 1.0),),
    no_particle=((0, 5, 1.0, 2.0),),
    negative_particles=((-1, 5, 1.0, 2.0),),
    zero_dimension=((0, -1.0, 1.0),),
    inverted_bounds=((3, 2, 1.0, -1.0),),
    equal_bounds=((3, 2, 1.0, 1.0),),
    float_dimension=((3, 2.5, -1.0, 1.0),),
)
def test_population_errors(args: tp.Tuple[tp.Any, ...]) -> None:
    with pytest.raises(errors.NewtmanValueError):
        pt.Population(*args)


def test_population_arity_error() -> None:
    with pytest.raises(errors.NewtmanTypeError):
        pt.Population(3, 1.0)


def test_population_random_state() -> None:
    pop1 = pt.Population(4, 3, -2.0, 2.0, random_state=12)
    pop2 = pt.Population(4, 3, -2.0, 2.0, random_state=np.random.RandomState(12))
    pop3 = pt.Population(4, 3, -2.0, 2.0, random_state=13)
    for p1, p2 in zip(pop1, pop2):
        np.testing.assert_array_equal(p1.position, p2.position)
        np.testing.assert_array_equal(p1.velocity, p2.velocity)
        np.testing.assert_array_equal(p1.personal_best, p2.personal_best)
    assert not np.array_equal(pop1[0].position, pop3[0].position)
    # particles are drawn one after the other from the same random state
    assert not np.array_equal(pop1[0].position, pop1[1].position)


def test_population_global_seed() -> None:
    np.random.seed(12)
    pop1 = pt.Population(3, 2, -1.0, 1.0)
    np.random.seed(12)
    pop2 = pt.Population(3, 2, -1.0, 1.0)
    np.testing.assert_array_equal(pop1[2].velocity, pop2[2].velocity)


def test_population_copy_and_sequence() -> None:
    population = pt.Population(3, 2, -1.0, 1.0, random_state=0)
    copied = population.copy()
    assert len(copied) == 3
    np.testing.assert_array_equal(copied[1].position, population[1].position)
    copied[1].position[0] = 12
    assert population[1].position[0] != 12
    assert len(population[1:]) == 2
    assert repr(population) == "Population(num_particles=3, dimension=2, bounds=[-1.0, 1.0])"


def test_population_from_particles() -> None:
    particles = [pt.Particle.from_bounds(-1.0, 1.0, 3, random_state=k) for k in range(2)]
    population = pt.Population.from_particles(particles)
    assert population[0] is particles[0]
    with pytest.raises(errors.NewtmanValueError):
        pt.Population.from_particles([])
    with pytest.raises(errors.NewtmanValueError):
        pt.Population.from_particles(particles + [pt.Particle.from_bounds(-1.0, 1.0, 2)])
    with pytest.raises(errors.NewtmanValueError):
        pt.Population.from_particles(particles + [pt.Particle.from_bounds(-1.0, 2.0, 3)])


def test_particle() -> None:
    position = [0.0, 0.5, 1.0]
    particle = pt.Particle(position, np.ones(3), np.zeros(3), -1.0, 1.0)
    assert particle.dimension == 3
    assert particle.position.dtype == float
    particle.position[0] = 12
    assert position[0] == 0  # copied
    copied = particle.copy()
    copied.velocity[0] = 12
    assert particle.velocity[0] == 1
    assert "bounds=[-1.0, 1.0]" in repr(particle)


@testing.parametrized(
    mismatch=((np.zeros(3), np.zeros(2), np.zeros(1), 0.0, 1.0),),
    mismatch_equal_bounds=((np.zeros(3), np.zeros(2), np.zeros(1), 0.0, 0.0),),
    empty=((np.zeros(0), np.zeros(0), np.zeros(0), 0.0, 1.0),),
    matrix=((np.zeros((2, 2)), np.zeros((2, 2)), np.zeros((2, 2)), 0.0, 1.0),),
    inverted_bounds=((np.zeros(2), np.zeros(2), np.zeros(2), 1.0, 0.0),),
)
def test_particle_errors(args: tp.Tuple[tp.Any, ...]) -> None:
    with pytest.raises(errors.NewtmanValueError):
        pt.Particle(*args)


def test_particle_from_bounds() -> None:
    particle = pt.Particle.from_bounds(-5.0, 5.0, 4, random_state=3)
    assert particle.dimension == 4
    testing.assert_in_interval(particle.position, -5.0, 5.0)
    with pytest.raises(errors.NewtmanValueError):
        pt.Particle.from_bounds(-5.0, 5.0, 0)
