import pytest


class FakeScheduler(object):

    """Records every schedule/cancel call; `tick()` plays one frame."""

    def __init__(self):
        self.pending = {}
        self.scheduled = 0
        self.cancelled = 0
        self.next_handle = 0

    def schedule(self, callback):
        self.scheduled += 1
        self.next_handle += 1
        self.pending[self.next_handle] = callback
        return self.next_handle

    def cancel(self, handle):
        self.cancelled += 1
        self.pending.pop(handle, None)

    def tick(self, frames=1):
        for _ in range(frames):
            callbacks = list(self.pending.values())
            self.pending.clear()
            for callback in callbacks:
                callback()


class Redraws(object):

    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def redraws():
    return Redraws()
