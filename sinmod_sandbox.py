#!/usr/bin/python3
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


"""
Interactive SinMod simulator.

Sinusoidal modelling for myocardial motion assessment in cardiac MRI:
tweak the model parameters with sliders and watch the tagging pattern
move.
"""

import gi
gi.require_version("Gtk", "3.0")
gi.require_foreign("cairo")
from gi.repository import GLib
from gi.repository import Gtk

from controller import SinModController
import model
import params.gtk
import params.text
import renderer

import argparse
import logging
import sys


log = logging.getLogger(__name__)


FORMULA = """\
I₁(P, t) = A·cos(ωx + φ + π/2) + φ₁(P, t)
I₂(P, t) = A·cos(ωx + φ - π/2) + φ₂(P, t)

f(x, t) = Σ A·sin(nωx + nφ + t) / n,  n = 1 .. harmonics"""

DESCRIPTION = (
    "SinMod uses several harmonics of a Fourier transform model to build "
    "sine waves that capture the motion of the tagging lines in cardiac "
    "magnetic resonance. Displacement is computed from the local phase of "
    "the analytic signal."
)


class TickScheduler(object):

    """Run callbacks on the next frame of `widget`'s frame clock.

    Each callback runs once; remove_tick_callback() is a no-op for ids
    which have already fired.
    """

    def __init__(self, widget):
        self.widget = widget

    def schedule(self, callback):
        def tick(widget, frame_clock):
            callback()
            return GLib.SOURCE_REMOVE
        return self.widget.add_tick_callback(tick)

    def cancel(self, handle):
        self.widget.remove_tick_callback(handle)


def heading(text, size="large"):
    label = Gtk.Label(xalign=0)
    label.set_markup("<span size='%s' weight='bold'>%s</span>" % (
        size, GLib.markup_escape_text(text)))
    return label


def section(title, child):
    box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
    box.set_border_width(12)
    box.pack_start(heading(title), False, False, 0)
    box.pack_start(child, True, True, 0)
    frame = Gtk.Frame()
    frame.add(box)
    return frame


class GUI(object):

    """Gtk user interface for the SinMod simulator."""

    def __init__(self, initial=None):
        self.da = Gtk.DrawingArea()
        self.da.set_size_request(model.WIDTH, model.HEIGHT)
        self.da.connect('draw', self.draw)

        self.controller = SinModController(
            TickScheduler(self.da),
            self.da.queue_draw,
            initial)

        self.toggle_button = Gtk.Button(label="Start animation")
        self.toggle_button.connect("clicked", self.toggle)
        reset_button = Gtk.Button(label="Reset")
        reset_button.connect("clicked", self.reset)

        buttons = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        buttons.set_halign(Gtk.Align.CENTER)
        buttons.pack_start(self.toggle_button, False, False, 0)
        buttons.pack_start(reset_button, False, False, 0)

        canvas = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        canvas.pack_start(self.da, True, True, 0)
        canvas.pack_start(buttons, False, False, 0)

        self.parameters = Gtk.Box()
        self.param_group = params.gtk.ParameterGroup(self.controller.params)
        self.param_group.makeWidgets(
            self.parameters, self.controller.set_parameter)

        formula = Gtk.Label(xalign=0)
        formula.set_markup("<tt>%s</tt>" % GLib.markup_escape_text(FORMULA))
        formula.set_selectable(True)
        description = Gtk.Label(label=DESCRIPTION, xalign=0)
        description.set_line_wrap(True)
        description.set_max_width_chars(80)
        math_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        math_box.pack_start(formula, False, False, 0)
        math_box.pack_start(description, False, False, 0)

        subtitle = Gtk.Label(
            label="Sinusoidal modelling for myocardial motion "
                  "assessment in cardiac MRI")

        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        content.set_border_width(18)
        title = heading("Interactive SinMod Simulator", "x-large")
        title.set_halign(Gtk.Align.CENTER)
        content.pack_start(title, False, False, 0)
        content.pack_start(subtitle, False, False, 0)
        content.pack_start(section("Visualization", canvas), True, True, 0)
        content.pack_start(
            section("SinMod parameters", self.parameters), False, False, 0)
        content.pack_start(
            section("Mathematical formulation", math_box), False, False, 0)

        scrolled = Gtk.ScrolledWindow()
        scrolled.add(content)

        self.window = Gtk.Window()
        self.window.set_title("SinMod Simulator")
        self.window.connect("destroy", self.quit)
        self.window.add(scrolled)
        self.window.resize(720, 900)
        self.window.show_all()

    def run(self):
        Gtk.main()

    def quit(self, *unused):
        self.controller.dispose()
        Gtk.main_quit()

    def toggle(self, button):
        if self.controller.toggle_animation():
            button.set_label("Stop animation")
        else:
            button.set_label("Start animation")

    def reset(self, *unused):
        self.controller.reset()
        self.param_group.setValues(self.controller.params)

    def draw(self, widget, cr):
        # the curve is laid out in WIDTH x HEIGHT logical units, scaled
        # uniformly and centred so markers stay round.
        alloc = widget.get_allocation()
        scale = min(alloc.width / model.WIDTH, alloc.height / model.HEIGHT)
        cr.translate(
            (alloc.width - model.WIDTH * scale) / 2,
            (alloc.height - model.HEIGHT * scale) / 2)
        cr.scale(scale, scale)
        renderer.draw_sinmod(
            cr,
            renderer.window_for(),
            self.controller.params,
            self.controller.time)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactive simulator for the SinMod motion model.")
    parser.add_argument(
        "--log-level",
        help="Logging verbosity",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
            format='%(asctime)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S')

    initial = params.text.ParameterGroup.for_model().parameterSet()
    log.info("starting with %r", initial)
    GUI(initial).run()


if __name__ == "__main__":
    main(sys.argv[1:])
