#! /usr/bin/python3
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


"""Offline rendering of the SinMod curve.

Renders the curve to a file or stdout as determined by the given
options. Parameters are taken from the environment, see `params.text`.

Intended mainly for batch processing workflows (documentation, unit
tests, etc).

With `--frames N` the animation is started and N consecutive frames
are rendered:
- png          -- each frame as a separate file in the output directory.
- ps, pdf      -- each frame as a separate page in the output file.
- svg          -- single frame only.
"""

import cairo

from collections import OrderedDict
import argparse
import itertools
import logging
import os
import sys

from controller import SinModController
import model
import params.text as params
import renderer


log = logging.getLogger(__name__)


def mm_to_in(mm):
    return mm / 25.4

def in_to_pt(inches):
    return inches * 72

def parse_unit(value):
    # - no unit: assume points (pixels for PNG).
    # - mm: convert to inch, then convert points
    # - in: convert to to points.
    # - pt: do not convert.
    if value.endswith("mm"):
        return in_to_pt(mm_to_in(float(value[:-2])))
    elif value.endswith("in"):
        return in_to_pt(float(value[:-2]))
    elif value.endswith("pt"):
        return float(value[:-2])
    else:
        return float(value)


class UserError(Exception):
    pass


class FrameScheduler(object):

    """Frame scheduling for batch rendering.

    Callbacks scheduled with `schedule()` run when `run_frame()` is
    called, once per rendered frame.
    """

    def __init__(self):
        self.pending = OrderedDict()
        self.ids = itertools.count(1)

    def schedule(self, callback):
        handle = next(self.ids)
        self.pending[handle] = callback
        return handle

    def cancel(self, handle):
        self.pending.pop(handle, None)

    def run_frame(self):
        callbacks = list(self.pending.values())
        self.pending.clear()
        for callback in callbacks:
            callback()


class SurfaceWrapper:
    """Abstract the different output formats cairo supports.

    There are some wierd asymmetries in the cairo API. This family of
    classes attempts to smooth this over.

    In particular, there's no obvious way to create a "blank" PNG
    surface for painting. Rather, one creates an ImageSurface and writes
    it as a .png file.
    """

    @classmethod
    def from_args(self, args):
        fmt = args.format
        if   fmt == "png": return PngSurfaceWrapper(args)
        elif fmt == "ps":  return VectorSurfaceWrapper(cairo.PSSurface, args)
        elif fmt == "pdf": return VectorSurfaceWrapper(cairo.PDFSurface, args)
        elif fmt == "svg": return SvgSurfaceWrapper(args)
        raise UserError("Unsupported format: %s" % fmt)

    def __init__(self, args):
        self.width, self.height = args.size
        self.window = renderer.window_for()

    def render(self, controller):
        try:
            self.cr.save()
            self.cr.scale(self.width / model.WIDTH, self.height / model.HEIGHT)
            renderer.draw_sinmod(
                self.cr, self.window, controller.params, controller.time)
        finally:
            self.cr.restore()

    def end_frame(self, index):
        """Defined by all subclasses."""
        raise NotImplementedError

    def finish(self):
        pass


class PngSurfaceWrapper(SurfaceWrapper):

    def __init__(self, args):
        super().__init__(args)
        self.surface = cairo.ImageSurface(
            cairo.Format.ARGB32, int(self.width), int(self.height))
        self.cr = cairo.Context(self.surface)

        if args.output is None:
            # The only reason for this is that `cairo_surface_write_to_png_stream`
            # is not exposed by pycairo.
            raise UserError("PNG does not support streaming to stdout.")
        elif args.frames > 1:
            self.output_dir = args.output
            os.makedirs(self.output_dir, exist_ok=True)
        else:
            self.output_dir = None
        self.output = args.output

    def path(self, index):
        if self.output_dir is None:
            return self.output
        return os.path.join(self.output_dir, "%04d.png" % index)

    def end_frame(self, index):
        path = self.path(index)
        self.surface.write_to_png(path)
        log.info("wrote %s", path)


class VectorSurfaceWrapper(SurfaceWrapper):

    def __init__(self, surface_class, args):
        super().__init__(args)
        if args.output is None:
            self.output = sys.stdout.buffer
        else:
            self.output = args.output
        self.surface = surface_class(self.output, self.width, self.height)
        self.cr = cairo.Context(self.surface)

    def end_frame(self, index):
        # one page per frame.
        self.cr.show_page()

    def finish(self):
        self.surface.finish()
        log.info("wrote %s", self.output)


class SvgSurfaceWrapper(VectorSurfaceWrapper):

    def __init__(self, args):
        if args.frames > 1:
            raise UserError("The SVG format does not support several frames.")
        super().__init__(cairo.SVGSurface, args)


def render(wrapper, controller, scheduler, frames):
    """Render `frames` frames, advancing the animation between them."""
    if frames > 1:
        controller.toggle_animation()
    try:
        for index in range(frames):
            if index:
                scheduler.run_frame()
            wrapper.render(controller)
            wrapper.end_frame(index)
    finally:
        controller.dispose()
        wrapper.finish()


def make_parser():
    desc = "Generate stand-alone images of the SinMod curve."
    parser = argparse.ArgumentParser(description=desc)

    parser.add_argument(
        "-f", "--format",
        help="Output file format",
        metavar="FMT",
        choices=("png", "ps", "pdf", "svg"),
        required=True
    )

    parser.add_argument(
        "-o", "--output",
        help="The output file path (defaults to `stdout`), "
             "or directory for PNG sequences",
        metavar="FILE",
        type=str
    )

    parser.add_argument(
        "-s", "--size",
        help="The width and height of the output image in physical units",
        nargs=2,
        type=parse_unit,
        default=(model.WIDTH, model.HEIGHT)
    )

    parser.add_argument(
        "-n", "--frames",
        help="Number of animation frames to render",
        metavar="N",
        default=1,
        type=int,
    )

    parser.add_argument(
        "-t", "--time",
        help="Time at the first frame",
        default=0.0,
        type=float,
    )

    parser.add_argument(
        "--log-level",
        help="Logging verbosity",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING"
    )
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
            format='%(asctime)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S')

    if args.frames < 1:
        raise UserError("At least one frame is required.")

    scheduler = FrameScheduler()
    controller = SinModController(
        scheduler, params=params.ParameterGroup.for_model().parameterSet())
    controller.time = args.time
    wrapper = SurfaceWrapper.from_args(args)
    render(wrapper, controller, scheduler, args.frames)


def cli():
    try:
        main()
    except UserError as e:
        print(e, file=sys.stderr)
        sys.exit(-1)


if __name__ == "__main__":
    cli()
