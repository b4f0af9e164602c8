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

"""The SinMod curve model.

The curve is a damped Fourier-like series:

    value(x, t) = sum(A * sin(n * omega * x + phi * n + t) / n
                      for n in 1 .. harmonics)

Everything in this module is pure: no drawing, no widgets.
"""

from collections import OrderedDict
import math


# Logical size of the drawing surface.
WIDTH = 600
HEIGHT = 300

# Time advanced per animation frame.
TIME_STEP = 0.05

# Upper bound of the phase slider, kept as a literal rather than
# recomputed.
PHASE_MAX = 6.283185307179586

DEFAULTS = OrderedDict((
    ("amplitude", 1.0),
    ("phase", 0.0),
    ("angular_frequency", 1.0),
    ("period", 2.0),
    ("harmonic_count", 3),
))


class Range(object):

    """Bounds and step of a single slider."""

    def __init__(self, lower, upper, step):
        self.lower = lower
        self.upper = upper
        self.step = step

    def __contains__(self, value):
        return self.lower <= value <= self.upper

    def __repr__(self):
        return "[%g, %g; %g]" % (self.lower, self.upper, self.step)


PARAMETER_RANGES = OrderedDict((
    ("amplitude",         Range(0.1, 2, 0.1)),
    ("phase",             Range(0, PHASE_MAX, 0.1)),
    ("angular_frequency", Range(0.1, 3, 0.1)),
    ("period",            Range(0.5, 5, 0.5)),
    ("harmonic_count",    Range(1, 10, 1)),
))


class ParameterSet(object):

    """The five user-tunable scalars that define the curve.

    Fields are mutated in place with `set()`. Values are coerced to
    float, except `harmonic_count` which is rounded to an int, since
    slider adjustments always deliver floats.
    """

    fields = tuple(DEFAULTS)

    def __init__(self, **values):
        for name, default in DEFAULTS.items():
            self.set(name, values.pop(name, default))
        if values:
            raise KeyError("Unknown parameter(s): %s" % ", ".join(values))

    def set(self, name, value):
        if name not in DEFAULTS:
            raise KeyError("Unknown parameter: %s" % name)
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("%s must be finite, got %r" % (name, value))
        if name == "harmonic_count":
            value = int(round(value))
            if value < 1:
                raise ValueError("harmonic_count must be at least 1")
        setattr(self, name, value)

    def copy(self):
        return ParameterSet(**self.as_dict())

    def as_dict(self):
        return OrderedDict((name, getattr(self, name)) for name in self.fields)

    def evaluate(self, x, t):
        return evaluate(self, x, t)

    def __eq__(self, other):
        return (isinstance(other, ParameterSet) and
                self.as_dict() == other.as_dict())

    def __repr__(self):
        return "ParameterSet(%s)" % ", ".join(
            "%s=%g" % item for item in self.as_dict().items())


def harmonic(params, n, x, t):
    """Return the `n`th term of the series."""
    return params.amplitude * math.sin(
        n * params.angular_frequency * x + params.phase * n + t) / n


def evaluate(params, x, t):
    """Return the curve value at phase coordinate `x` and time `t`."""
    value = 0.0
    for n in range(1, params.harmonic_count + 1):
        value += harmonic(params, n, x, t)
    return value


def scale_x(px, width, period):
    """Map a pixel column to a phase coordinate."""
    return (px / width) * 2 * math.pi * period


def to_pixel_y(value, height):
    """Map a curve value to a pixel row, with the axis at the center."""
    return height / 2 - value * (height / 4)
