from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from .config import DEFAULT_ORBIT, DEFAULT_PLOT, OrbitConfig, PlotConfig


@dataclass
class Timebase:
  year: int

  def days(self):
    d = datetime(self.year, 1, 1, tzinfo=timezone.utc)
    while d.year == self.year:
      yield d.date()
      d += timedelta(days=1)


def date_for_day(day: float, year: int = 2024) -> date:
  # Fractional days truncate toward the start of the day
  return date(year, 1, 1) + timedelta(days=int(day))


def date_label(day: float, year: int = 2024) -> str:
  d = date_for_day(day, year)
  return f"{d.strftime('%b')} {d.day}"


def format_clock_hour(hour: float) -> str:
  """Decimal hours as H:MM, minutes rounded to the nearest whole minute."""
  total = int(round(hour * 60))
  h, m = divmod(total, 60)
  return f"{h}:{m:02d}"


def marker_x(day: float, config: OrbitConfig = DEFAULT_ORBIT, plot: PlotConfig = DEFAULT_PLOT) -> float:
  return (day / config.year_days) * plot.width


def hour_to_y(hour: float, plot: PlotConfig = DEFAULT_PLOT) -> float:
  return plot.mid - hour * plot.scale
