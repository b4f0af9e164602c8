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

"""Paint the SinMod curve onto a cairo context."""

import cairo

from helpers import Helper, Point, Rect, frange, hex_color
import model


BACKGROUND = hex_color("#f9fafb")
AXIS_COLOR = hex_color("#333333")
CURVE_COLOR = hex_color("#0066cc")
MARKER_COLOR = hex_color("#ff6600")

AXIS_WIDTH = 1.0
CURVE_WIDTH = 2.0
MARKER_RADIUS = 4.0
MARKER_COUNT = 10


def curve_point(params, time, px, width, height):
    x = model.scale_x(px, width, params.period)
    return Point(px, model.to_pixel_y(model.evaluate(params, x, time), height))


def curve_points(params, time, width, height):
    """One sample per pixel column in [0, width)."""
    return [curve_point(params, time, px, width, height)
            for px in range(int(width))]


def marker_points(params, time, width, height):
    """Samples every `width / MARKER_COUNT` pixels, starting at 0."""
    return [curve_point(params, time, px, width, height)
            for px in frange(0, width, width / MARKER_COUNT)]


def draw_sinmod(cr, window, params, time):
    """Draw axes, curve and markers into `window`.

    `window` is a Rect whose northwest corner is the origin of `cr`.
    When `cr` is None (e.g. the surface is not realized yet) nothing
    is drawn.
    """
    if cr is None:
        return

    helper = Helper(cr)
    width, height = window.width, window.height

    with helper.save():
        cr.set_operator(cairo.OPERATOR_SOURCE)
        cr.set_source(BACKGROUND)
        cr.paint()

    with helper.save():
        cr.set_source(AXIS_COLOR)
        cr.set_line_width(AXIS_WIDTH)
        helper.hline(height / 2, window)
        cr.stroke()
        helper.vline(window.west().x, window)
        cr.stroke()

    with helper.save():
        cr.set_source(CURVE_COLOR)
        cr.set_line_width(CURVE_WIDTH)
        helper.polyline(curve_points(params, time, width, height))
        cr.stroke()

    with helper.save():
        cr.set_source(MARKER_COLOR)
        for point in marker_points(params, time, width, height):
            helper.circle(point, MARKER_RADIUS)
            cr.fill()


def window_for(width=model.WIDTH, height=model.HEIGHT):
    return Rect.from_top_left(Point(0, 0), width, height)
