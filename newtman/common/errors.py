# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


# base classes


class NewtmanError(Exception):
    """Base class for error raised by Newtman"""


class NewtmanWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class NewtmanRuntimeError(RuntimeError, NewtmanError):
    """Runtime error raised by Newtman"""


class NewtmanValueError(ValueError, NewtmanError):
    """Invalid argument provided to Newtman (dimension, bounds, particle count...)"""


class NewtmanTypeError(TypeError, NewtmanError):
    """Unsupported type provided to Newtman"""


# warnings


class NewtmanRuntimeWarning(RuntimeWarning, NewtmanWarning):
    """Runtime warning raise by newtman"""


class InefficientSettingsWarning(NewtmanRuntimeWarning):
    """Optimization settings are not optimal for the optimizer"""
