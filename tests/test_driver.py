import time

import pytest

from orbitsim.core.config import OrbitConfig
from orbitsim.core.daylight import compute_solar_time
from orbitsim.core.orbit import compute_position
from orbitsim.runtime import AnimationDriver


def test_tick_advances_by_day_step():
  driver = AnimationDriver()
  frame = driver.tick()
  assert frame.day == pytest.approx(0.1)
  assert driver.day == pytest.approx(0.1)


def test_tick_wraps_at_year_end():
  driver = AnimationDriver(start_day=364.95)
  frame = driver.tick()
  assert frame.day == pytest.approx(0.05)
  assert frame.label == "Jan 1"


def test_start_day_is_wrapped():
  assert AnimationDriver(start_day=400).day == pytest.approx(35)
  assert AnimationDriver(start_day=-1).day == pytest.approx(364)


def test_paused_tick_holds_day():
  driver = AnimationDriver(start_day=10, playing=False)
  assert driver.tick().day == 10
  driver.play()
  assert driver.tick().day == pytest.approx(10.1)
  driver.pause()
  assert driver.tick().day == pytest.approx(10.1)


def test_toggle_flips_flag():
  driver = AnimationDriver()
  assert driver.is_playing()
  assert driver.toggle() is False
  assert driver.toggle() is True


def test_frame_matches_pure_calculators():
  driver = AnimationDriver(start_day=91.25, playing=False)
  frame = driver.current_frame()
  assert frame.orbit == compute_position(91.25)
  assert frame.solar == compute_solar_time(91.25, 45, 23.5)
  assert frame.orbit.angle == frame.solar.angle
  assert frame.label == "Apr 1"
  data = frame.to_dict()
  assert data["display"] == {"sunrise": "6:00", "sunset": "18:00"}


def test_seek_wraps_and_returns_frame():
  driver = AnimationDriver(playing=False)
  frame = driver.seek(365 + 182.5)
  assert frame.day == pytest.approx(182.5)
  assert driver.day == pytest.approx(182.5)


def test_custom_step_from_config():
  driver = AnimationDriver(OrbitConfig(day_step=1.0))
  driver.tick()
  driver.tick()
  assert driver.day == pytest.approx(2.0)


def test_listeners_receive_frames_and_errors_are_isolated():
  driver = AnimationDriver()
  seen = []

  def broken(frame):
    raise RuntimeError("boom")

  driver.add_listener(broken)
  driver.add_listener(seen.append)
  driver.add_listener(seen.append)
  driver.tick()
  driver.tick()
  assert [f.day for f in seen] == pytest.approx([0.1, 0.2])
  assert driver.remove_listener(seen.append) is True
  assert driver.remove_listener(seen.append) is False
  driver.tick()
  assert len(seen) == 2


def test_background_loop_ticks_until_stopped():
  driver = AnimationDriver()
  driver.start(fps=200)
  try:
    deadline = time.time() + 2.0
    while driver.day == 0 and time.time() < deadline:
      time.sleep(0.01)
    assert driver.is_running()
  finally:
    driver.stop()
  assert not driver.is_running()
  stopped_at = driver.day
  assert stopped_at > 0
  time.sleep(0.05)
  assert driver.day == stopped_at


def test_start_rejects_non_positive_fps():
  with pytest.raises(ValueError):
    AnimationDriver().start(fps=0)


@pytest.mark.parametrize("day", [float("inf"), float("-inf"), float("nan")])
def test_seek_rejects_non_finite_day_and_keeps_state(day):
  driver = AnimationDriver(start_day=42, playing=False)
  with pytest.raises(ValueError):
    driver.seek(day)
  assert driver.day == 42
  assert driver.current_frame().label == "Feb 12"


def test_start_day_must_be_finite():
  with pytest.raises(ValueError):
    AnimationDriver(start_day=float("nan"))
