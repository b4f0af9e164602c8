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


import logging

from model import ParameterSet, TIME_STEP


log = logging.getLogger(__name__)


class AnimationState(object):
    """ABC For the Animation State Machine"""

    is_animating = False

    def toggle(self, controller):
        raise NotImplementedError()

    def frame(self, controller):
        raise NotImplementedError()

    def dispose(self, controller):
        raise NotImplementedError()


class Idle(AnimationState):

    def toggle(self, controller):
        return Animating(controller.scheduler.schedule(controller.frame))

    def frame(self, controller):
        # a tick that raced with a stop request.
        return self

    def dispose(self, controller):
        return Disposed()


class Animating(AnimationState):

    is_animating = True

    def __init__(self, handle):
        self.handle = handle

    def cancel(self, controller):
        if self.handle is not None:
            controller.scheduler.cancel(self.handle)
            self.handle = None

    def toggle(self, controller):
        self.cancel(controller)
        return Idle()

    def frame(self, controller):
        # the handle that just fired is spent. Reschedule before
        # advancing so a toggle from on_change cancels the new one.
        self.handle = controller.scheduler.schedule(controller.frame)
        controller.advance(TIME_STEP)
        return self

    def dispose(self, controller):
        self.cancel(controller)
        return Disposed()


class Disposed(AnimationState):

    def toggle(self, controller):
        return self

    def frame(self, controller):
        return self

    def dispose(self, controller):
        return self


class SinModController(object):

    """Owns the parameter set, the time and the animation state.

    `scheduler` is an object which provides the following methods:
    - schedule(callback) -> handle: run `callback` on the next frame.
    - cancel(handle): forget a scheduled callback.

    Each scheduled callback runs at most once; the controller
    reschedules itself every frame while animating.

    `on_change` is called with no arguments whenever the picture needs
    to be redrawn.
    """

    def __init__(self, scheduler, on_change=None, params=None):
        self.scheduler = scheduler
        self.on_change = on_change
        self.params = params if params is not None else ParameterSet()
        self.defaults = self.params.copy()
        self.time = 0.0
        self.state = Idle()

    @property
    def is_animating(self):
        return self.state.is_animating

    @property
    def disposed(self):
        return isinstance(self.state, Disposed)

    def changed(self):
        if self.on_change is not None:
            self.on_change()

    def set_parameter(self, name, value):
        """Replace a single field, parsing `value` as a number."""
        self.params.set(name, value)
        log.debug("%s = %r", name, getattr(self.params, name))
        self.changed()

    def reset(self):
        """Restore the parameters the controller was created with."""
        for name, value in self.defaults.as_dict().items():
            self.params.set(name, value)
        log.debug("parameters reset: %r", self.params)
        self.changed()

    def advance(self, step):
        self.time += step
        self.changed()

    def toggle_animation(self):
        self.state = self.state.toggle(self)
        log.debug("animating: %s (t=%g)", self.is_animating, self.time)
        return self.is_animating

    def frame(self, *unused):
        state = self.state
        next_state = state.frame(self)
        # on_change may have moved the state machine on already.
        if self.state is state:
            self.state = next_state

    def dispose(self):
        """Cancel any pending frame. Safe to call more than once."""
        if not self.disposed:
            log.info("disposing controller (t=%g)", self.time)
        self.state = self.state.dispose(self)
