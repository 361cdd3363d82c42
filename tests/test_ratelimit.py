"""Sliding-window limiter."""

import pytest

from ratelimit import SlidingWindow


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_one_hit_per_window():
    clock = FakeClock()
    window = SlidingWindow(limit=1, window=10, clock=clock)

    assert window.hit("nominate") is True
    clock.now += 9.9
    assert window.hit("nominate") is False
    clock.now += 0.1
    assert window.hit("nominate") is True


def test_identifiers_are_independent():
    window = SlidingWindow(limit=1, window=10, clock=FakeClock())

    assert window.hit("nominate") is True
    assert window.hit("edit") is True
    assert window.hit("nominate") is False


def test_window_slides():
    clock = FakeClock()
    window = SlidingWindow(limit=2, window=10, clock=clock)

    assert window.hit("edit")
    clock.now += 6
    assert window.hit("edit")
    assert not window.hit("edit")
    clock.now += 4  # first hit leaves the window
    assert window.remaining("edit") == 1
    assert window.hit("edit")


def test_rejected_hits_are_not_recorded():
    clock = FakeClock()
    window = SlidingWindow(limit=1, window=10, clock=clock)

    window.hit("nominate")
    clock.now += 5
    window.hit("nominate")
    clock.now += 5
    assert window.hit("nominate") is True


def test_reset():
    window = SlidingWindow(clock=FakeClock())
    window.hit("nominate")

    window.reset()

    assert window.hit("nominate") is True


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        SlidingWindow(limit=0)


def test_each_app_gets_its_own_window(app):
    from app import create_app
    from extensions import rate_limiter

    assert rate_limiter.limit("nominate") is True
    assert rate_limiter.limit("nominate") is False

    other = create_app({"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:"})
    with other.app_context():
        assert rate_limiter.limit("nominate") is True
