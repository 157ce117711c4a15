# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import time
import logging
import newtman.common.typing as tp
from . import base

global_logger = logging.getLogger(__name__)


class OptimizationPrinter:
    """Printer to register as callback in a solver, for printing
    best point regularly.

    Parameters
    ----------
    print_interval_iterations: int
        max number of iterations before performing another print
    print_interval_seconds: float
        max number of seconds before performing another print
    """

    def __init__(self, print_interval_iterations: int = 1, print_interval_seconds: float = 60.0) -> None:
        assert print_interval_iterations > 0
        assert print_interval_seconds > 0
        self._print_interval_iterations = int(print_interval_iterations)
        self._print_interval_seconds = print_interval_seconds
        self._next_iteration = self._print_interval_iterations
        self._next_time = time.time() + print_interval_seconds

    def __call__(self, solver: base.Solver) -> None:
        if time.time() >= self._next_time or solver.num_iterations >= self._next_iteration:
            self._next_time = time.time() + self._print_interval_seconds
            self._next_iteration = solver.num_iterations + self._print_interval_iterations
            print(f"After {solver.num_iterations} iterations, best value is {solver.best_value}")


class OptimizationLogger:
    """Logger to register as callback in a solver, for logging
    best value regularly.

    Parameters
    ----------
    logger:
        given logger that callback will use to log
    log_level:
        log level that logger will write to
    log_interval_iterations: int
        max number of iterations before performing another log
    log_interval_seconds:
        max number of seconds before performing another log
    """

    def __init__(
        self,
        *,
        logger: logging.Logger = global_logger,
        log_level: int = logging.INFO,
        log_interval_iterations: int = 1,
        log_interval_seconds: float = 60.0,
    ) -> None:
        assert log_interval_iterations > 0
        assert log_interval_seconds > 0
        self._logger = logger
        self._log_level = log_level
        self._log_interval_iterations = int(log_interval_iterations)
        self._log_interval_seconds = log_interval_seconds
        self._next_iteration = self._log_interval_iterations
        self._next_time = time.time() + log_interval_seconds

    def __call__(self, solver: base.Solver) -> None:
        if time.time() >= self._next_time or solver.num_iterations >= self._next_iteration:
            self._next_time = time.time() + self._log_interval_seconds
            self._next_iteration = solver.num_iterations + self._log_interval_iterations
            self._logger.log(
                self._log_level,
                "After %s/%s iterations, best value is %s at %s",
                solver.num_iterations,
                solver.k_max,
                solver.best_value,
                solver.best_position,
            )


class ConvergenceRecorder:
    """Records the best value after each iteration, to study the convergence of a run

    Example
    -------

    .. code-block:: python

        recorder = ConvergenceRecorder()
        PSO(objective, population, 1000, callbacks=[recorder])
        plt.semilogy(recorder.values)
    """

    def __init__(self) -> None:
        self.values: tp.List[float] = []

    def __call__(self, solver: base.Solver) -> None:
        self.values.append(float(solver.best_value))


class ProgressBar:
    """Progress bar to register as callback in a solver"""

    def __init__(self) -> None:
        self._progress_bar: tp.Any = None
        self._current = 0

    def __call__(self, solver: base.Solver) -> None:
        if self._progress_bar is None:
            # pylint: disable=import-outside-toplevel
            try:
                from tqdm import tqdm  # Inline import to avoid additional dependency
            except ImportError as e:
                raise ImportError(
                    f"{self.__class__.__name__} requires tqdm which is not installed by default "
                    "(pip install tqdm)"
                ) from e
            self._progress_bar = tqdm()
            self._progress_bar.total = solver.k_max
            self._progress_bar.update(self._current)
        self._progress_bar.update(1)
        self._current += 1
        if self._current >= solver.k_max:
            self._progress_bar.close()

    def __getstate__(self) -> tp.Dict[str, tp.Any]:
        """Used for pickling (tqdm is not picklable)"""
        state = dict(self.__dict__)
        state["_progress_bar"] = None
        return state
