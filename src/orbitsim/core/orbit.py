from dataclasses import dataclass
import math

from .config import DEFAULT_ORBIT, OrbitConfig


def orbital_angle(day: float, year_days: float = 365) -> float:
  """
  Phase angle (radians) for a day-of-year. Shared by the orbit and solar calculators.

  Not wrapped: the angle lies in [0, 2pi) only for day in [0, year_days). Works on
  numpy arrays as well as floats.
  """
  return (day / year_days) * 2 * math.pi


@dataclass(frozen=True)
class OrbitalState:
  x: float
  y: float
  angle: float
  radius: float

  def to_dict(self) -> dict:
    return {"x": self.x, "y": self.y, "angle": self.angle, "radius": self.radius}


def orbital_radius(angle: float, a: float, e: float) -> float:
  # Polar conic equation, angle measured from periapsis
  return a * (1 - e * e) / (1 + e * math.cos(angle))


def compute_position(day: float, config: OrbitConfig = DEFAULT_ORBIT) -> OrbitalState:
  """
  Position on the elliptical orbit for a (fractional) day-of-year.

  Angle 0 is perihelion at day 0. The diagram labels perihelion "Jan 3" but no
  phase shift is applied here.
  """
  angle = orbital_angle(day, config.year_days)
  r = orbital_radius(angle, config.semi_major_axis, config.eccentricity)
  return OrbitalState(x=r * math.cos(angle), y=r * math.sin(angle), angle=angle, radius=r)
