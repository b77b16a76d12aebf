"""CLI command to start the orbit animation server."""

import logging
import click
import uvicorn

from ..api import OrbitAPI
from ..core.config import load_config
from ..runtime import AnimationDriver

logger = logging.getLogger(__name__)


def build_api(config_path=None, start_day: float = 0.0, paused: bool = False, stream_fps: float = 30.0) -> OrbitAPI:
    """Load configuration and wire a driver into the API (driver not started)."""
    orbit_cfg, plot_cfg = load_config(config_path)
    driver = AnimationDriver(orbit_cfg, start_day=start_day, playing=not paused)
    return OrbitAPI(driver, plot_cfg, stream_fps=stream_fps)


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Configuration file path (default: bundled orbit.yaml)",
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind to (default: 127.0.0.1)",
)
@click.option(
    "--port",
    default=8000,
    type=int,
    help="Port to bind to (default: 8000)",
)
@click.option(
    "--fps",
    default=60.0,
    type=float,
    help="Animation ticks per second (default: 60)",
)
@click.option(
    "--start-day",
    default=0.0,
    type=float,
    help="Initial day-of-year (default: 0)",
)
@click.option(
    "--paused",
    is_flag=True,
    help="Start with the animation paused",
)
def main(config, host, port, fps, start_day, paused):
    """Start the orbit animation server.

    Serves the current animation frame, per-day orbit/solar lookups and the
    sampled daylight curve over HTTP, plus a WebSocket frame stream.

    Examples:
        # Start with default settings
        orbitsim-serve

        # Start paused on the June solstice
        orbitsim-serve --start-day 172 --paused
    """
    if fps <= 0:
        click.echo("Error: --fps must be positive", err=True)
        raise SystemExit(1)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        api = build_api(config, start_day=start_day, paused=paused, stream_fps=min(fps, 30.0))
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        logger.exception("Configuration error")
        raise SystemExit(1)

    cfg = api.driver.config
    click.echo(f"Latitude: {cfg.latitude_deg} deg, tilt: {cfg.orbital_tilt_deg} deg")
    click.echo(f"Step: {cfg.day_step} day/frame at {fps} fps")

    api.driver.start(fps)

    click.echo(f"Starting API server on http://{host}:{port}")
    click.echo(f"   Frame:     http://{host}:{port}/api/frame")
    click.echo(f"   Curve:     http://{host}:{port}/api/curve")
    click.echo(f"   WebSocket: ws://{host}:{port}/api/websocket")

    try:
        uvicorn.run(api.get_app(), host=host, port=port, log_level="info")
    except KeyboardInterrupt:
        click.echo("\nShutting down...")
    finally:
        api.driver.stop()
        click.echo("Driver stopped")


if __name__ == "__main__":
    main()
