from dataclasses import dataclass
import math

import numpy as np

from .config import DEFAULT_ORBIT, OrbitConfig
from .orbit import orbital_angle


@dataclass(frozen=True)
class SolarState:
  declination_deg: float
  sunrise_hour: float
  sunset_hour: float
  day_length_hour: float
  angle: float

  def rounded(self, ndigits: int = 2) -> "SolarState":
    # Display precision; hours stay decimal, not H:MM
    return SolarState(
      declination_deg=self.declination_deg,
      sunrise_hour=round(self.sunrise_hour, ndigits),
      sunset_hour=round(self.sunset_hour, ndigits),
      day_length_hour=round(self.day_length_hour, ndigits),
      angle=self.angle,
    )

  def to_dict(self) -> dict:
    return {
      "declination_deg": self.declination_deg,
      "sunrise_hour": self.sunrise_hour,
      "sunset_hour": self.sunset_hour,
      "day_length_hour": self.day_length_hour,
      "angle": self.angle,
    }


def compute_solar_time(day: float, latitude_deg: float, tilt_deg: float, year_days: float = 365) -> SolarState:
  """
  Solar declination and sunrise/sunset clock hours for a day-of-year.

  Declination follows a sinusoid phased so its minimum falls on day 0. The
  hour-angle cosine is clamped to [-1, 1], so polar night and polar day come
  out as 0 h and 24 h day lengths with no separate flag.
  """
  angle = orbital_angle(day, year_days)
  declination = tilt_deg * math.sin(angle - math.pi / 2)
  lat_rad = math.radians(latitude_deg)
  dec_rad = math.radians(declination)
  cos_hour_angle = -math.tan(lat_rad) * math.tan(dec_rad)
  hour_angle = math.acos(max(-1.0, min(1.0, cos_hour_angle)))
  day_length = hour_angle * 24 / math.pi
  return SolarState(
    declination_deg=declination,
    sunrise_hour=12 - day_length / 2,
    sunset_hour=12 + day_length / 2,
    day_length_hour=day_length,
    angle=angle,
  )


def solar_state(day: float, config: OrbitConfig = DEFAULT_ORBIT) -> SolarState:
  return compute_solar_time(day, config.latitude_deg, config.orbital_tilt_deg, config.year_days)


def solar_times(days, latitude_deg: float, tilt_deg: float, year_days: float = 365) -> dict:
  """Vectorized compute_solar_time over an array of days. Returns a dict of numpy arrays."""
  days = np.asarray(days, dtype=float)
  angle = orbital_angle(days, year_days)
  declination = tilt_deg * np.sin(angle - np.pi / 2)
  cos_h = -np.tan(np.radians(latitude_deg)) * np.tan(np.radians(declination))
  day_length = np.arccos(np.clip(cos_h, -1.0, 1.0)) * 24 / np.pi
  return {
    "day": days,
    "angle": angle,
    "declination_deg": declination,
    "sunrise_hour": 12 - day_length / 2,
    "sunset_hour": 12 + day_length / 2,
    "day_length_hour": day_length,
  }

