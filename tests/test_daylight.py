import numpy as np
import pytest

from orbitsim.core.config import OrbitConfig
from orbitsim.core.daylight import compute_solar_time, solar_state, solar_times
from orbitsim.core.orbit import compute_position


def test_sunrise_and_sunset_symmetric_about_noon():
  day = 0.0
  while day < 365:
    s = compute_solar_time(day, 45, 23.5)
    assert s.sunrise_hour + s.sunset_hour == pytest.approx(24, abs=1e-6)
    day += 1.7


def test_declination_bounded_by_tilt():
  for day in np.arange(0, 365, 0.25):
    s = compute_solar_time(float(day), 45, 23.5)
    assert -23.5 - 1e-9 <= s.declination_deg <= 23.5 + 1e-9


def test_declination_zero_at_quarter_year():
  s = compute_solar_time(91.25, 45, 23.5)
  assert s.declination_deg == pytest.approx(0, abs=1e-9)
  assert s.day_length_hour == pytest.approx(12)
  assert s.sunrise_hour == pytest.approx(6)
  assert s.sunset_hour == pytest.approx(18)


def test_shortest_day_at_day_zero_at_45n():
  s = compute_solar_time(0, 45, 23.5)
  assert s.declination_deg == pytest.approx(-23.5)
  assert 8.5 < s.day_length_hour < 8.6
  assert s.sunrise_hour == pytest.approx(12 - s.day_length_hour / 2)


def test_longest_day_half_a_year_later():
  winter = compute_solar_time(0, 45, 23.5)
  summer = compute_solar_time(182.5, 45, 23.5)
  assert summer.declination_deg == pytest.approx(23.5)
  assert summer.day_length_hour == pytest.approx(24 - winter.day_length_hour)


def test_polar_night_clamps_to_zero_hours():
  s = compute_solar_time(0, 89, 23.5)
  assert s.day_length_hour == 0.0
  assert s.sunrise_hour == 12.0
  assert s.sunset_hour == 12.0


def test_polar_day_clamps_to_twenty_four_hours():
  s = compute_solar_time(182.5, 89, 23.5)
  assert s.day_length_hour == pytest.approx(24)
  assert s.sunrise_hour == pytest.approx(0)
  assert s.sunset_hour == pytest.approx(24)


def test_equator_always_twelve_hours():
  for day in (0, 60, 182.5, 300):
    assert compute_solar_time(day, 0, 23.5).day_length_hour == pytest.approx(12)


def test_southern_hemisphere_mirrors_northern():
  north = compute_solar_time(0, 45, 23.5)
  south = compute_solar_time(0, -45, 23.5)
  assert north.day_length_hour + south.day_length_hour == pytest.approx(24)


def test_rounded_keeps_two_decimals():
  s = compute_solar_time(0, 45, 23.5).rounded()
  assert s.sunrise_hour == round(s.sunrise_hour, 2)
  assert s.sunset_hour == round(s.sunset_hour, 2)
  assert s.day_length_hour == round(s.day_length_hour, 2)


def test_solar_state_uses_config():
  cfg = OrbitConfig(latitude_deg=60, orbital_tilt_deg=10)
  assert solar_state(30, cfg) == compute_solar_time(30, 60, 10, 365)


def test_vectorized_matches_scalar():
  days = np.arange(0, 365, 0.5)
  out = solar_times(days, 45, 23.5)
  for i in range(0, len(days), 37):
    s = compute_solar_time(float(days[i]), 45, 23.5)
    assert out["declination_deg"][i] == pytest.approx(s.declination_deg)
    assert out["sunrise_hour"][i] == pytest.approx(s.sunrise_hour)
    assert out["sunset_hour"][i] == pytest.approx(s.sunset_hour)
    assert out["day_length_hour"][i] == pytest.approx(s.day_length_hour)


def test_vectorized_clamps_too():
  out = solar_times([0, 182.5], 89, 23.5)
  assert out["day_length_hour"][0] == 0.0
  assert out["day_length_hour"][1] == pytest.approx(24)


def test_vectorized_shares_orbit_phase():
  days = [0.0, 45.7, 91.25, 182.5, 364.9]
  out = solar_times(days, 45, 23.5)
  for i, day in enumerate(days):
    assert out["angle"][i] == compute_position(day).angle
