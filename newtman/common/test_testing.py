# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
from . import testing


@testing.parametrized(
    inside=([0.0, 0.5, 1.0], ""),
    above=((0.0, 1.5), "Values outside of [0.0, 1.0]: [1.5]"),
    both=((-2.0, 0.2, 3.0), "Values outside of [0.0, 1.0]: [-2.0, 3.0]"),
)
def test_assert_in_interval(values: tp.Iterable[float], message: str) -> None:
    try:
        testing.assert_in_interval(values, 0.0, 1.0)
    except AssertionError as error:
        if not message:
            raise AssertionError("An error has been raised while it should not.")
        np.testing.assert_equal(error.args[0], message)
    else:
        if message:
            raise AssertionError("An error should have been raised.")


def test_printed_assert_equal() -> None:
    testing.printed_assert_equal(0, 0)
    np.testing.assert_raises(AssertionError, testing.printed_assert_equal, 0, 1)
