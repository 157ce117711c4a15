# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .base import Benchmark as Benchmark
from .base import evaluate as evaluate
from .functionlib import Sphere as Sphere
from .functionlib import Easom as Easom
from .functionlib import Ackley as Ackley
from .functionlib import Rosenbrock as Rosenbrock
from .functionlib import GoldsteinPrice as GoldsteinPrice
from .functionlib import Beale as Beale
from .functionlib import Levy as Levy
from .functionlib import registry as registry
