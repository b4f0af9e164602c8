# sinmod-sandbox: Interactive simulator for the SinMod motion model.
#
# Copyright (C) 2026  sinmod-sandbox contributors
#
# This program is free software: you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public License
# as published by the Free Software Foundation, either version 3 of
# the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program.  If not, see
# <https://www.gnu.org/licenses/>.

"""Text-based parameter implementations.

Parameter values are read from the environment, e.g.

    SINMOD_AMPLITUDE=1.5 SINMOD_HARMONIC_COUNT=7 ./sinmod_sandbox.py
"""

from collections import OrderedDict
import logging
import os

import model


log = logging.getLogger(__name__)


class Parameter(object):

    """A uniform interface for creating parameters from the environment."""

    def require(self, value, allowed_types):
        """Raise an error if `value` is not one of `allowed_types`.

        `allowed_types` may be a tuple or a single type.
        """

        if not isinstance(value, allowed_types):
            if not isinstance(allowed_types, tuple):
                allowed_types = (allowed_types,)
            raise TypeError("Expected one of %s, got %r." % (
                ", ".join(repr(t) for t in allowed_types),
                value
            ))

    def parse(self, text):
        raise NotImplementedError


class NumericParameter(Parameter):

    """A scalar numeric value, with a finite range."""

    def __init__(self, lower, upper, step=1/128.0, default=0.5):
        allowed = (int, float)
        self.require(lower, allowed)
        self.require(upper, allowed)
        self.require(step, allowed)
        self.require(default, allowed)
        self.lower = lower
        self.upper = upper
        self.step = step
        self.default = default

    @classmethod
    def from_range(cls, bounds, default):
        return cls(bounds.lower, bounds.upper, bounds.step, default)

    def parse(self, text):
        value = type(self.default)(text.strip())
        if self.lower <= value <= self.upper:
            return value
        else:
            raise ValueError(
                "{} not in range [{}, {}]".format(value, self.lower, self.upper)
            )


class ParameterGroup(object):

    """Manages the parameters of the SinMod curve."""

    def __init__(self, prefix="SINMOD_", environ=None):
        self.params = OrderedDict()
        self.prefix = prefix
        self.environ = os.environ if environ is None else environ

    @classmethod
    def for_model(cls, **kwargs):
        """A group with one parameter per slider, using the model defaults."""
        group = cls(**kwargs)
        for name, bounds in model.PARAMETER_RANGES.items():
            group.define(
                name,
                NumericParameter.from_range(bounds, model.DEFAULTS[name]))
        return group

    def define(self, name, param):
        """Define a new parameter."""

        if name in self.params:
            raise ValueError("Parameter %s already defined" % name)
        self.params[name] = param

    def variable(self, name):
        return self.prefix + name.upper()

    def getValues(self):
        """Get the current value for each parameter, as dict."""
        return OrderedDict(
            (name, self.getParamValue(name, param))
            for name, param in self.params.items()
        )

    def getParamValue(self, name, param):
        key = self.variable(name)
        if key in self.environ:
            value = param.parse(self.environ[key])
            log.debug("%s=%r from environment", name, value)
            return value
        else:
            return param.default

    def parameterSet(self):
        """Return a fresh model.ParameterSet holding the current values."""
        return model.ParameterSet(**self.getValues())
