"""Earth orbit position and daylight-curve simulation."""

from .core.config import OrbitConfig, PlotConfig, load_config
from .core.curve import DaylightCurveSampler, DaylightSample, sample_year
from .core.daylight import SolarState, compute_solar_time, solar_state
from .core.orbit import OrbitalState, compute_position

__version__ = "0.1.0"

__all__ = [
    "OrbitConfig",
    "PlotConfig",
    "load_config",
    "OrbitalState",
    "compute_position",
    "SolarState",
    "compute_solar_time",
    "solar_state",
    "DaylightSample",
    "DaylightCurveSampler",
    "sample_year",
]
