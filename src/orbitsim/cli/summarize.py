import click
import numpy as np

from ..core.config import OrbitConfig, load_config
from ..core.curve import sample_year
from ..core.daylight import solar_times
from ..core.timebase import Timebase, date_label, format_clock_hour


@click.command()
@click.option("--config", type=click.Path(exists=True), help="Configuration file path")
@click.option("--latitude", type=float, default=None, help="Override latitude (degrees)")
@click.option("--step", type=int, default=5, show_default=True, help="Curve sampling step in days")
def main(config, latitude, step):
  orbit, plot = load_config(config)
  if latitude is not None:
    orbit = OrbitConfig(**{**orbit.model_dump(), "latitude_deg": latitude})
  try:
    samples = sample_year(step, orbit, plot)
  except ValueError as e:
    raise click.BadParameter(str(e), param_hint="--step")

  firsts = [d.timetuple().tm_yday - 1 for d in Timebase(orbit.reference_year).days() if d.day == 1]
  monthly = solar_times(firsts, orbit.latitude_deg, orbit.orbital_tilt_deg, orbit.year_days)
  # Same 2-decimal hours the chart uses
  sunrise = np.round(monthly["sunrise_hour"], 2)
  sunset = np.round(monthly["sunset_hour"], 2)
  length = np.round(monthly["day_length_hour"], 2)

  click.echo("Date   | Sunrise | Sunset | Day length")
  click.echo("-------|---------|--------|-----------")
  for i, day in enumerate(firsts):
    click.echo(
      f"{date_label(day, orbit.reference_year):<6} | {format_clock_hour(sunrise[i]):>7} | "
      f"{format_clock_hour(sunset[i]):>6} | {format_clock_hour(length[i]):>9}"
    )

  year = solar_times(np.arange(0, int(orbit.year_days)), orbit.latitude_deg, orbit.orbital_tilt_deg, orbit.year_days)
  lengths = year["day_length_hour"]
  longest, shortest = int(np.argmax(lengths)), int(np.argmin(lengths))
  click.echo(f"Longest day:  {date_label(longest, orbit.reference_year)} ({format_clock_hour(lengths[longest])})")
  click.echo(f"Shortest day: {date_label(shortest, orbit.reference_year)} ({format_clock_hour(lengths[shortest])})")
  click.echo(f"Mean day length: {format_clock_hour(float(lengths.mean()))}")
  click.echo(f"Latitude: {orbit.latitude_deg}, curve samples: {len(samples)} (step {step}d)")


if __name__ == "__main__":
  main()
