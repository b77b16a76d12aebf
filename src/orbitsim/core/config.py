from pathlib import Path
from typing import Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "orbit.yaml"


class OrbitConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  year_days: float = Field(365.0, gt=0)
  orbital_tilt_deg: float = Field(23.5, ge=0, le=90)
  latitude_deg: float = Field(45.0, ge=-90, le=90)
  semi_major_axis: float = Field(160.0, gt=0)
  eccentricity: float = Field(0.0167, ge=0, lt=1)
  # Animation increment per frame, in days
  day_step: float = Field(0.1, gt=0)
  # Calendar year used for date labels only
  reference_year: int = 2024


class PlotConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  width: float = Field(600.0, gt=0)
  mid: float = 150.0
  scale: float = Field(10.0, gt=0)


DEFAULT_ORBIT = OrbitConfig()
DEFAULT_PLOT = PlotConfig()


def load_config(path: Optional[Union[str, Path]] = None) -> Tuple[OrbitConfig, PlotConfig]:
  """
  Read the `orbit:` and `plot:` sections of a YAML file. Missing keys fall back to model defaults.
  """
  p = Path(path) if path is not None else DEFAULT_CONFIG_PATH
  if not p.exists():
    raise FileNotFoundError(f"Config file not found: {p}")
  cfg = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
  orbit = OrbitConfig(**(cfg.get("orbit") or {}))
  plot = PlotConfig(**(cfg.get("plot") or {}))
  return orbit, plot
