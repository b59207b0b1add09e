import pytest

ctk = pytest.importorskip("customtkinter")

from ui.components.alert_banner import AlertBanner


class FakeToast:
    """Records the Tk timer calls AlertBanner makes on itself."""

    _fade_out = AlertBanner._fade_out
    _expire = AlertBanner._expire

    def __init__(self):
        self.scheduled = []
        self.cancelled = []
        self.destroyed = 0
        self._fade_ms = 300
        self._pending = None
        self._label = self

    def after(self, ms, func):
        self.scheduled.append((ms, func))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)

    def configure(self, **kwargs):
        pass

    def destroy(self):
        self.destroyed += 1


def test_close_before_fade_cancels_pending_timer():
    toast = FakeToast()
    toast._pending = "after#1"
    AlertBanner._remove(toast)
    assert toast.cancelled == ["after#1"]
    assert toast._pending is None
    assert toast.destroyed == 1


def test_close_during_fade_cancels_removal_timer():
    toast = FakeToast()
    toast._pending = "after#1"
    AlertBanner._fade_out(toast)
    assert toast._pending == "after#1"
    assert toast.scheduled[-1][0] == 300
    AlertBanner._remove(toast)
    assert toast.cancelled == ["after#1"]
    assert toast.destroyed == 1


def test_expiry_after_fade_destroys_without_cancelling():
    toast = FakeToast()
    toast._pending = "after#1"
    AlertBanner._fade_out(toast)
    AlertBanner._expire(toast)
    assert toast.cancelled == []
    assert toast._pending is None
    assert toast.destroyed == 1
