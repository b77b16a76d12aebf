"""REST and WebSocket API serving orbit frames and the daylight curve."""

from datetime import datetime, timezone
from typing import Optional
from fastapi import FastAPI, HTTPException, Query, WebSocket, WebSocketDisconnect
from pydantic import BaseModel
import asyncio
import logging
import math

from ..core.config import DEFAULT_PLOT, PlotConfig
from ..core.curve import DaylightCurveSampler
from ..core.daylight import solar_state
from ..core.orbit import compute_position
from ..core.timebase import format_clock_hour, hour_to_y, marker_x
from ..runtime.driver import AnimationDriver

logger = logging.getLogger(__name__)


def _finite_day(day: float) -> float:
    if not math.isfinite(day):
        raise HTTPException(status_code=400, detail="day must be finite")
    return day


class SeekData(BaseModel):
    """Seek request data."""
    day: float


class OrbitAPI:
    """HTTP surface over the animation driver and the pure calculators."""

    def __init__(
        self,
        driver: AnimationDriver,
        plot: PlotConfig = DEFAULT_PLOT,
        stream_fps: float = 30.0,
    ):
        """Initialize the API.

        Args:
            driver: Animation driver owning the current day
            plot: Chart geometry for curve and marker coordinates
            stream_fps: Frame rate of the WebSocket frame stream
        """
        if stream_fps <= 0:
            raise ValueError("stream_fps must be positive")

        self.driver = driver
        self.plot = plot
        self.stream_fps = stream_fps
        self.sampler = DaylightCurveSampler(driver.config, plot)
        self.app = FastAPI(
            title="Orbit Daylight API",
            description="Earth orbit position and daylight curve",
            version="1.0.0",
        )

        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/api/")
        async def api_discovery():
            """API discovery endpoint."""
            return {
                "message": "API running.",
                "version": "1.0.0",
            }

        @self.app.get("/api/config")
        async def get_config():
            """Get orbit and plot configuration."""
            return {
                "orbit": self.driver.config.model_dump(),
                "plot": self.plot.model_dump(),
            }

        @self.app.get("/api/frame")
        async def get_frame():
            """Current frame plus chart marker coordinates."""
            frame = self.driver.current_frame()
            shown = frame.solar.rounded()
            data = frame.to_dict()
            data["marker"] = {
                "x": marker_x(frame.day, self.driver.config, self.plot),
                "sunrise_y": hour_to_y(shown.sunrise_hour, self.plot),
                "sunset_y": hour_to_y(shown.sunset_hour, self.plot),
            }
            data["playing"] = self.driver.is_playing()
            return data

        @self.app.get("/api/position")
        async def get_position(day: float):
            """Orbital position for an arbitrary day."""
            return compute_position(_finite_day(day), self.driver.config).to_dict()

        @self.app.get("/api/solar")
        async def get_solar(day: float):
            """Solar declination and sunrise/sunset for an arbitrary day."""
            state = solar_state(_finite_day(day), self.driver.config)
            data = state.to_dict()
            shown = state.rounded()
            data["sunrise"] = format_clock_hour(shown.sunrise_hour)
            data["sunset"] = format_clock_hour(shown.sunset_hour)
            return data

        @self.app.get("/api/curve")
        async def get_curve(step: int = Query(5, ge=1, le=365)):
            """Sampled year-long daylight curve."""
            try:
                samples = self.sampler.sample(step)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return {
                "step": step,
                "samples": [s.to_dict() for s in samples],
                "sunrise_path": self.sampler.svg_path(samples, "sunrise"),
                "sunset_path": self.sampler.svg_path(samples, "sunset"),
            }

        @self.app.post("/api/driver/play")
        async def play():
            """Resume the animation."""
            self.driver.play()
            return {"success": True, "playing": True}

        @self.app.post("/api/driver/pause")
        async def pause():
            """Pause the animation."""
            self.driver.pause()
            return {"success": True, "playing": False}

        @self.app.post("/api/driver/toggle")
        async def toggle():
            """Flip play/pause."""
            return {"success": True, "playing": self.driver.toggle()}

        @self.app.post("/api/driver/seek")
        async def seek(data: SeekData):
            """Jump to a day-of-year."""
            try:
                frame = self.driver.seek(data.day)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return {"success": True, "day": frame.day, "label": frame.label}

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "running": self.driver.is_running(),
                "day": self.driver.day,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }

        @self.app.websocket("/api/websocket")
        async def frame_stream(websocket: WebSocket, frames: Optional[int] = None):
            """Push the current frame to the client at stream_fps."""
            await self.handle_connection(websocket, max_frames=frames)

    async def handle_connection(self, websocket: WebSocket, max_frames: Optional[int] = None) -> None:
        """Stream frames over a WebSocket until the client disconnects.

        Args:
            websocket: The WebSocket connection
            max_frames: Stop after this many frames (unbounded if None)
        """
        await websocket.accept()
        sent = 0
        try:
            while max_frames is None or sent < max_frames:
                await websocket.send_json(self.driver.current_frame().to_dict())
                sent += 1
                await asyncio.sleep(1.0 / self.stream_fps)
        except WebSocketDisconnect:
            logger.info("Frame stream client disconnected")
            return
        await websocket.close()

    def get_app(self) -> FastAPI:
        """Get the FastAPI app instance."""
        return self.app
