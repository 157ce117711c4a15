# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import math
import numpy as np
from newtman.common import errors
from newtman.population import Particle


# minimum value of the linearly annealed inertia weight
INERTIA_FLOOR = 0.4

# Lanczos approximation coefficients (Numerical Recipes, 3rd edition)
_GAMMALN_COEFFS = np.array(
    [
        57.1562356658629235,
        -59.5979603554754912,
        14.1360979747417471,
        -0.491913816097620199,
        0.339946499848118887e-4,
        0.465236289270485756e-4,
        -0.983744753048795646e-4,
        0.158088703224912494e-3,
        -0.210264441724104883e-3,
        0.217439618115212643e-3,
        -0.164318106536763890e-3,
        0.844182239838527433e-4,
        -0.261908384015814087e-4,
        0.368991826595316234e-5,
    ]
)


def clip_positions_velocities(particle: Particle) -> None:
    """Applies boundary conditions to both position and velocity of the particle, in place.
    The position is clamped to the bounds of the particle.
    The velocity is clamped to [-v_max, v_max] where v_max is the maximum
    (not the maximum absolute value) of the velocity itself.

    Note
    ----
    Upper bounds are applied before lower bounds. If all velocities are negative,
    this sets all of them to -v_max (which is positive).
    """
    np.minimum(particle.position, particle.upper_bound, out=particle.position)
    np.maximum(particle.position, particle.lower_bound, out=particle.position)
    max_vel = np.max(particle.velocity)
    np.minimum(particle.velocity, max_vel, out=particle.velocity)
    np.maximum(particle.velocity, -max_vel, out=particle.velocity)


def clip_trajectory(y: np.ndarray, lower: float, upper: float) -> None:
    """Clamps a solution vector to [lower, upper], in place
    """
    if not lower < upper:
        raise errors.NewtmanValueError("First argument should be the lower bound")
    np.minimum(y, upper, out=y)
    np.maximum(y, lower, out=y)


def weight_decay(initial: float, k_max: int) -> float:
    """Computes the step by which the inertia weight must decay at each iteration
    so as to decrease linearly from its initial value to INERTIA_FLOOR in k_max iterations.

    Note
    ----
    The weight itself is not floored, so it keeps decreasing if more than k_max steps are applied.
    """
    if not k_max:
        return 0.0  # no iteration, no decay
    return (initial - INERTIA_FLOOR) / k_max


def gammaln(x: float) -> float:
    """Logarithm of the Gamma function for x > 0,
    computed as in the 3rd edition of Numerical Recipes in C.
    """
    if not x > 0:
        raise errors.NewtmanValueError(f"gammaln is only defined for strictly positive values, got {x}")
    tmp = x + 5.2421875  # rational 671/128
    tmp = (x + 0.5) * math.log(tmp) - tmp
    ser = 0.999999999999997092
    y = x
    for coeff in _GAMMALN_COEFFS:
        y += 1
        ser += coeff / y
    return float(tmp + math.log(2.5066282746310005 * ser / x))
