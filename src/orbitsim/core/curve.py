"""Year-long daylight curve sampling for the sunrise/sunset chart."""
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import Tuple
import logging

from .config import DEFAULT_ORBIT, DEFAULT_PLOT, OrbitConfig, PlotConfig
from .daylight import solar_state

logger = logging.getLogger(__name__)


def _check_step(step_days) -> None:
  if isinstance(step_days, bool) or not isinstance(step_days, int):
    raise ValueError(f"step_days must be an integer, got {step_days!r}")
  if step_days <= 0:
    raise ValueError("step_days must be positive")


@dataclass(frozen=True)
class DaylightSample:
  """One point of the plotted curve, in chart pixel coordinates."""
  day: float
  day_offset_px: float
  sunrise_y: float
  sunset_y: float

  def to_dict(self) -> dict:
    return {
      "day": self.day,
      "day_offset_px": self.day_offset_px,
      "sunrise_y": self.sunrise_y,
      "sunset_y": self.sunset_y,
    }


def sample_year(
    step_days: int = 5,
    config: OrbitConfig = DEFAULT_ORBIT,
    plot: PlotConfig = DEFAULT_PLOT,
) -> Tuple[DaylightSample, ...]:
  """Sample the daylight curve every `step_days` days from day 0 up to (not including) year end.

  Args:
      step_days: Sampling interval in whole days (must be > 0)
      config: Orbit configuration (latitude, tilt, year length)
      plot: Chart geometry

  Returns:
      Samples ordered by ascending day
  """
  _check_step(step_days)
  samples = []
  day = 0
  while day < config.year_days:
    s = solar_state(day, config).rounded(2)
    samples.append(DaylightSample(
      day=float(day),
      day_offset_px=(day / config.year_days) * plot.width,
      sunrise_y=plot.mid - s.sunrise_hour * plot.scale,
      sunset_y=plot.mid - s.sunset_hour * plot.scale,
    ))
    day += step_days
  return tuple(samples)


class DaylightCurveSampler:
  """Caches sampled curves per (step, orbit config, plot config), least recently used first out."""

  def __init__(self, config: OrbitConfig = DEFAULT_ORBIT, plot: PlotConfig = DEFAULT_PLOT, max_entries: int = 16):
    if max_entries <= 0:
      raise ValueError("max_entries must be positive")
    self.config = config
    self.plot = plot
    self.max_entries = max_entries
    self._cache: "OrderedDict[tuple, Tuple[DaylightSample, ...]]" = OrderedDict()
    self._lock = RLock()

  def sample(self, step_days: int = 5) -> Tuple[DaylightSample, ...]:
    _check_step(step_days)
    key = (step_days, self.config, self.plot)
    with self._lock:
      if key in self._cache:
        self._cache.move_to_end(key)
        return self._cache[key]
      logger.debug(f"Sampling daylight curve: step={step_days} lat={self.config.latitude_deg}")
      samples = sample_year(step_days, self.config, self.plot)
      self._cache[key] = samples
      while len(self._cache) > self.max_entries:
        self._cache.popitem(last=False)
      return samples

  def reconfigure(self, config: OrbitConfig = None, plot: PlotConfig = None) -> None:
    """Swap configuration. Curves for the new settings are regenerated on next use."""
    with self._lock:
      if config is not None:
        self.config = config
      if plot is not None:
        self.plot = plot

  def cache_size(self) -> int:
    with self._lock:
      return len(self._cache)

  @staticmethod
  def svg_path(samples, which: str = "sunrise") -> str:
    """Polyline path ("M x,y L x,y ...") through the sunrise or sunset points."""
    if which not in ("sunrise", "sunset"):
      raise ValueError(f"Unknown curve: {which}")
    attr = f"{which}_y"
    if not samples:
      return ""
    return "M " + " L ".join(f"{s.day_offset_px},{getattr(s, attr)}" for s in samples)
