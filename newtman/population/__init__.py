# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .particle import Particle as Particle
from .particle import Population as Population
from .particle import DEFAULT_NUM_PARTICLES as DEFAULT_NUM_PARTICLES
