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


import cairo
import math


class Helper(object):

    """Wraps a cairo context in a higher-level API.

    New Primitives:
    - circle
    - vertical and horizontal lines
    - polyline

    Transform Context Managers (so you cannot forget `restore()`):
    - save

    Wrapper methods which take Point objects instead of x/y pairs:
    - move_to
    - line_to
    """

    def __init__(self, cr):
        self.cr = cr

    def circle(self, center, radius):
        self.cr.new_sub_path()
        self.cr.arc(center.x, center.y, radius, 0, 2 * math.pi)

    def move_to(self, point):
        self.cr.move_to(*point)

    def line_to(self, point):
        self.cr.line_to(*point)

    def hline(self, pos, rect):
        self.cr.move_to(rect.west().x, pos)
        self.cr.line_to(rect.east().x, pos)

    def vline(self, pos, rect):
        self.cr.move_to(pos, rect.north().y)
        self.cr.line_to(pos, rect.south().y)

    def polyline(self, points):
        """Add an open path through `points`.

        The first point moves the pen, the rest are joined by straight
        segments.
        """
        points = iter(points)
        for point in points:
            self.move_to(point)
            break
        for point in points:
            self.line_to(point)

    def save(self):
        return Save(self.cr)


class Point(object):

    """Reasonably terse 2D Point class."""

    def __init__(self, x, y): self.x = float(x) ; self.y = float(y)
    def __eq__(self, o):
        return isinstance(o, Point) and (self.x, self.y) == (o.x, o.y)
    def __repr__(self):       return "(%g,%g)" % (self.x, self.y)
    def __iter__(self):       yield  self.x ; yield self.y
    def __hash__(self):       return hash((self.x, self.y))

    def binop(func):
        def impl(self, x):
            o = x if isinstance(x, Point) else Point(x, x)
            return Point(func(self.x, o.x), func(self.y, o.y))
        return impl

    __add__  = binop(lambda a, b: a + b)
    __mul__  = binop(lambda a, b: a * b)


class Rect(object):

    """Rectangle operations for layout."""

    def __init__(self, center, width, height):
        self.center = center
        self.width = width
        self.height = height

    @classmethod
    def from_top_left(self, top_left, width, height):
        return Rect(
            Point(top_left.x + width * 0.5, top_left.y + height * 0.5),
            width, height
        )

    def __repr__(self):
        return "(%s, %g, %g)" % (self.center, self.width, self.height)

    def north(self):
        return self.center + Point(0, -0.5 * self.height)

    def south(self):
        return self.center + Point(0, 0.5 * self.height)

    def east(self):
        return self.center + Point(0.5 * self.width, 0)

    def west(self):
        return self.center + Point(-0.5 * self.width, 0)


class Save(object):

    """A context manager which Keeps calls to save() and restore() balanced."""

    def __init__(self, cr):
        self.cr = cr

    def __enter__(self):
        self.cr.save()

    def __exit__(self, unused1, unused2, unused3):
        self.cr.restore()


def frange(lower, upper, step):
    """Like range, but for floats."""
    accum = lower
    while accum < upper:
        yield accum
        accum += step


def hex_color(text, alpha=1.0):
    """Parse a `#RRGGBB` string as a cairo.SolidPattern."""
    text = text.lstrip("#")
    if not len(text) == 6:
        raise ValueError("Could not parse as color: " + text)

    r = int(text[0:2], 16) / 0xFF
    g = int(text[2:4], 16) / 0xFF
    b = int(text[4:6], 16) / 0xFF
    return cairo.SolidPattern(r, g, b, alpha)
