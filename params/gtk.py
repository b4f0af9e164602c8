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

"""Slider widgets bound to the SinMod parameters."""

from collections import OrderedDict

import gi
gi.require_version("Gtk", "3.0")
from gi.repository import Gtk

import model


LABELS = OrderedDict((
    ("amplitude",         ("Amplitude (A)", "%.2f")),
    ("phase",             ("Phase (φ)", "%.2f")),
    ("angular_frequency", ("Frequency (ω)", "%.2f")),
    ("period",            ("Period (T)", "%.2f")),
    ("harmonic_count",    ("Harmonics", "%d")),
))


class NumericParameter(object):

    """A scalar numeric value, with a finite range, shown as a slider."""

    def __init__(self, name, title, bounds, default, format="%.2f"):
        self.name = name
        self.title = title
        self.lower = bounds.lower
        self.upper = bounds.upper
        self.step = bounds.step
        self.default = default
        self.format = format
        self.adjustment = None
        self.label = None
        self.callback = None

    def makeWidget(self, callback):
        """Return a labelled slider.

        `callback(name, value)` is called whenever the slider moves.
        """
        self.callback = callback
        self.adjustment = Gtk.Adjustment(
            value=self.default,
            lower=self.lower,
            upper=self.upper,
            step_increment=self.step,
            page_increment=self.step,
            page_size=0)
        self.adjustment.connect("value-changed", self.changed)

        scale = Gtk.Scale(
            orientation=Gtk.Orientation.HORIZONTAL,
            adjustment=self.adjustment)
        scale.set_draw_value(False)
        scale.set_digits(0 if isinstance(self.default, int) else 2)
        scale.set_hexpand(True)

        self.label = Gtk.Label(label=self.text(self.default), xalign=0)

        ret = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
        ret.pack_start(self.label, False, False, 0)
        ret.pack_start(scale, True, True, 0)
        return ret

    def text(self, value):
        return "%s: %s" % (self.title, self.format % value)

    def changed(self, adjustment):
        value = adjustment.get_value()
        self.label.set_text(self.text(value))
        if self.callback is not None:
            self.callback(self.name, value)

    def setValue(self, value):
        self.adjustment.set_value(value)


class ParameterGroup(object):

    """Manages the sliders for the parameter set."""

    def __init__(self, defaults=None):
        self.params = OrderedDict()
        defaults = defaults if defaults is not None else model.ParameterSet()
        for name, bounds in model.PARAMETER_RANGES.items():
            title, format = LABELS[name]
            self.params[name] = NumericParameter(
                name, title, bounds, getattr(defaults, name), format)

    def makeWidgets(self, container, callback):
        """Create a slider for each parameter, adding them into `container`.

        Sliders are laid out two per row. If container already contains
        widgets, they will be removed.
        """
        grid = Gtk.Grid()
        grid.set_row_spacing(12)
        grid.set_column_spacing(24)
        grid.set_column_homogeneous(True)
        grid.set_border_width(12)

        for i, param in enumerate(self.params.values()):
            grid.attach(param.makeWidget(callback), i % 2, i // 2, 1, 1)

        for child in container.get_children():
            child.destroy()

        container.add(grid)
        container.show_all()

    def setValues(self, params):
        """Move each slider to the matching field of `params`."""
        for name, param in self.params.items():
            param.setValue(getattr(params, name))
