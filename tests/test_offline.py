"""Tests for the offline renderer."""

import os

import cairo
import pytest

import offline
from controller import SinModController
from model import TIME_STEP


class RecordingWrapper(offline.SurfaceWrapper):

    def __init__(self):
        self.times = []
        self.frames = []
        self.finished = False

    def render(self, controller):
        self.times.append(controller.time)

    def end_frame(self, index):
        self.frames.append(index)

    def finish(self):
        self.finished = True


def test_frame_scheduler_runs_each_callback_once():
    scheduler = offline.FrameScheduler()
    calls = []
    scheduler.schedule(lambda: calls.append("a"))
    handle = scheduler.schedule(lambda: calls.append("b"))
    scheduler.cancel(handle)
    scheduler.cancel(handle)
    scheduler.run_frame()
    scheduler.run_frame()
    assert calls == ["a"]


def test_render_advances_time_between_frames():
    scheduler = offline.FrameScheduler()
    controller = SinModController(scheduler)
    wrapper = RecordingWrapper()
    offline.render(wrapper, controller, scheduler, 4)
    assert wrapper.times == pytest.approx([0.0, TIME_STEP, 2 * TIME_STEP, 3 * TIME_STEP])
    assert wrapper.frames == [0, 1, 2, 3]
    assert wrapper.finished
    assert controller.disposed
    assert scheduler.pending == {}


def test_single_frame_does_not_animate():
    scheduler = offline.FrameScheduler()
    controller = SinModController(scheduler)
    wrapper = RecordingWrapper()
    offline.render(wrapper, controller, scheduler, 1)
    assert wrapper.times == [0.0]
    assert not controller.is_animating


def test_png(tmp_path):
    output = tmp_path / "curve.png"
    offline.main(["-f", "png", "-o", str(output)])
    image = cairo.ImageSurface.create_from_png(str(output))
    assert (image.get_width(), image.get_height()) == (600, 300)


def test_png_size(tmp_path):
    output = tmp_path / "curve.png"
    offline.main(["-f", "png", "-o", str(output), "-s", "300", "150"])
    image = cairo.ImageSurface.create_from_png(str(output))
    assert (image.get_width(), image.get_height()) == (300, 150)


def test_png_sequence(tmp_path):
    output = tmp_path / "frames"
    offline.main(["-f", "png", "-o", str(output), "-n", "3"])
    assert sorted(os.listdir(output)) == ["0000.png", "0001.png", "0002.png"]


def test_out_of_range_environment_value_is_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("SINMOD_AMPLITUDE", "9")
    with pytest.raises(ValueError):
        offline.main(["-f", "png", "-o", str(tmp_path / "x.png")])


def test_png_requires_output():
    with pytest.raises(offline.UserError):
        offline.main(["-f", "png"])


def test_svg_is_single_frame(tmp_path):
    with pytest.raises(offline.UserError):
        offline.main(["-f", "svg", "-o", str(tmp_path / "x.svg"), "-n", "2"])


@pytest.mark.parametrize("fmt", ["pdf", "ps", "svg"])
def test_vector_formats(tmp_path, fmt):
    output = tmp_path / ("curve." + fmt)
    offline.main(["-f", fmt, "-o", str(output)])
    assert output.stat().st_size > 0


def test_pdf_pages_grow_with_frames(tmp_path):
    single = tmp_path / "single.pdf"
    several = tmp_path / "several.pdf"
    offline.main(["-f", "pdf", "-o", str(single)])
    offline.main(["-f", "pdf", "-o", str(several), "-n", "3"])
    assert several.stat().st_size > single.stat().st_size


def test_frames_must_be_positive(tmp_path):
    with pytest.raises(offline.UserError):
        offline.main(["-f", "pdf", "-o", str(tmp_path / "x.pdf"), "-n", "0"])


@pytest.mark.parametrize("text, expected", [
    ("72", 72.0),
    ("10pt", 10.0),
    ("1in", 72.0),
    ("25.4mm", 72.0),
])
def test_parse_unit(text, expected):
    assert offline.parse_unit(text) == pytest.approx(expected)
