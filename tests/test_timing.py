import pytest

from pidcontroller.control import PIDController
from pidcontroller.utils import ElapsedTimer


def fake_clock(*times):
    it = iter(times)
    return lambda: next(it)


def test_first_lap_has_no_interval():
    timer = ElapsedTimer(clock=fake_clock(10.0, 10.25, 10.75))
    assert timer.lap() is None
    assert timer.lap() == 0.25
    assert timer.lap() == 0.5


def test_zero_interval_is_passed_through():
    timer = ElapsedTimer(clock=fake_clock(1.0, 1.0, 2.0))
    timer.lap()
    assert timer.lap() == 0.0
    assert timer.lap() == 1.0


def test_zero_interval_is_rejected_by_controller():
    timer = ElapsedTimer(clock=fake_clock(0.0, 0.01, 0.01))
    pid = PIDController(0.0, 1.0, 0.0, output_limits=(-10.0, 10.0))
    pid.set_point = 1.0
    timer.lap()
    pid.compute_output(timer.lap())
    with pytest.raises(ValueError):
        pid.compute_output(timer.lap())
    assert pid.integral_term == pytest.approx(0.01)


def test_reset_forgets_last_timestamp():
    timer = ElapsedTimer(clock=fake_clock(0.0, 5.0, 6.0))
    timer.lap()
    timer.reset()
    assert timer.lap() is None
    assert timer.lap() == 1.0


def test_feeds_time_scaled_controller():
    timer = ElapsedTimer(clock=fake_clock(0.0, 0.5, 1.0))
    pid = PIDController(0.0, 2.0, 0.0, output_limits=(-10.0, 10.0))
    pid.set_point = 1.0
    timer.lap()
    outputs = []
    for _ in range(2):
        dt = timer.lap()
        outputs.append(pid.compute_output(dt))
    assert outputs == [1.0, 2.0]
