# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import newtman.common.typing as tp
from newtman.common import errors
from newtman.common.decorators import Registry


registry: Registry[tp.Callable[[np.ndarray], float]] = Registry()


def _check_dimension(x: np.ndarray, name: str, exact: tp.Optional[int] = None, minimum: int = 1) -> None:
    if x.ndim != 1:
        raise errors.NewtmanValueError(f"{name} expects a 1-dimensional array, got shape {x.shape}")
    if exact is not None and x.size != exact:
        raise errors.NewtmanValueError(f"{name} is a {exact}D function, got dimension {x.size}")
    if x.size < minimum:
        raise errors.NewtmanValueError(f"{name} must be at least {minimum}D, got dimension {x.size}")


def compatible(dimension: int) -> tp.List[str]:
    """Names of the registered core functions which can be evaluated in the given dimension"""
    return registry.select(
        lambda info: info.get("dimension", dimension) == dimension and info.get("min_dimension", 1) <= dimension
    )


@registry.register_with_info(min_dimension=1)
def sphere(x: np.ndarray) -> float:
    """The most classical continuous optimization testbed.

    If you do not solve that one then you have a bug."""
    _check_dimension(x, "sphere")
    return float(x.dot(x))


@registry.register_with_info(dimension=2)
def easom(x: np.ndarray) -> float:
    """Nearly flat everywhere, with a sharp well of value -1 at (pi, pi)."""
    _check_dimension(x, "easom", exact=2)
    term_1 = -np.cos(x[0]) * np.cos(x[1])
    term_2 = np.exp(-((x[0] - np.pi) ** 2) - (x[1] - np.pi) ** 2)
    return float(term_1 * term_2)


@registry.register_with_info(min_dimension=1)
def ackley(x: np.ndarray) -> float:
    """Multimodal function with its global minimum 0 at the origin.

    Note
    ----
    The exponential decay coefficient is 0.02, which makes the outer
    region much flatter than with the more usual 0.2.
    """
    _check_dimension(x, "ackley")
    dimension = x.size
    term_1 = np.exp(-0.02 * np.sqrt(x.dot(x) / dimension))
    term_2 = np.exp(np.sum(np.cos(2.0 * np.pi * x)) / dimension)
    return float(-20.0 * term_1 - term_2 + 20.0 + np.e)


@registry.register_with_info(min_dimension=2)
def rosenbrock(x: np.ndarray) -> float:
    _check_dimension(x, "rosenbrock", minimum=2)
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


@registry.register_with_info(dimension=2)
def goldsteinprice(x: np.ndarray) -> float:
    """Goldstein-Price function, with global minimum 3 at (0, -1)."""
    _check_dimension(x, "goldsteinprice", exact=2)
    x1, x2 = x
    term_1 = (x1 + x2 + 1.0) ** 2
    term_1 *= 19.0 - 14.0 * x1 + 3.0 * x1 ** 2 - 14.0 * x2 + 6.0 * x1 * x2 + 3.0 * x2 ** 2
    term_1 += 1.0
    term_2 = (2.0 * x1 - 3.0 * x2) ** 2
    term_2 *= 18.0 - 32.0 * x1 + 12.0 * x1 ** 2 + 48.0 * x2 - 36.0 * x1 * x2 + 27.0 * x2 ** 2
    term_2 += 30.0
    return float(term_1 * term_2)


@registry.register_with_info(dimension=2)
def beale(x: np.ndarray) -> float:
    _check_dimension(x, "beale", exact=2)
    x1, x2 = x
    term_1 = (1.5 - x1 + x1 * x2) ** 2
    term_2 = (2.25 - x1 + x1 * x2 ** 2) ** 2
    term_3 = (2.625 - x1 + x1 * x2 ** 3) ** 2
    return float(term_1 + term_2 + term_3)


@registry.register_with_info(min_dimension=1)
def levy(x: np.ndarray) -> float:
    """Levy function, with global minimum 0 at (1, ..., 1).

    Note
    ----
    The middle sum runs over all the coordinates (including the last one).
    """
    _check_dimension(x, "levy")
    w = 1.0 + (x - 1.0) / 4.0
    term_1 = np.sin(np.pi * w[0]) ** 2
    term_2 = np.sum((w - 1.0) ** 2 * (1.0 + 10.0 * np.sin(np.pi * w + 1.0) ** 2))
    term_3 = (w[-1] - 1.0) ** 2 * (1.0 + np.sin(2.0 * np.pi * w[-1]) ** 2)
    return float(term_1 + term_2 + term_3)
