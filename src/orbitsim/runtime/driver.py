"""Animation driver for the orbit/daylight simulation.

Owns the mutable day-of-year and the play/pause flag, and recomputes the pure
orbit and solar state on every tick.
"""
from dataclasses import dataclass
from threading import Event, RLock, Thread
from typing import Callable, List, Optional
import logging
import math

from ..core.config import DEFAULT_ORBIT, OrbitConfig
from ..core.daylight import SolarState, solar_state
from ..core.orbit import OrbitalState, compute_position
from ..core.timebase import date_label, format_clock_hour

logger = logging.getLogger(__name__)


def _wrap_day(day: float, year_days: float) -> float:
    if not math.isfinite(day):
        raise ValueError(f"day must be finite, got {day!r}")
    return day % year_days


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one animation frame."""
    day: float
    orbit: OrbitalState
    solar: SolarState
    label: str

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dict."""
        shown = self.solar.rounded()
        return {
            "day": self.day,
            "label": self.label,
            "orbit": self.orbit.to_dict(),
            "solar": self.solar.to_dict(),
            "display": {
                "sunrise": format_clock_hour(shown.sunrise_hour),
                "sunset": format_clock_hour(shown.sunset_hour),
            },
        }


class AnimationDriver:
    """Advances the simulated day once per frame."""

    def __init__(
        self,
        config: OrbitConfig = DEFAULT_ORBIT,
        start_day: float = 0.0,
        playing: bool = True,
    ):
        """Initialize the driver.

        Args:
            config: Orbit configuration (year length, per-frame step, latitude)
            start_day: Initial day-of-year, wrapped into [0, year_days)
            playing: Whether ticks advance the day initially
        """
        self.config = config
        self._lock = RLock()
        self._day = _wrap_day(start_day, config.year_days)
        self._playing = playing
        self._listeners: List[Callable[[Frame], None]] = []
        self._stop_event = Event()
        self._thread: Optional[Thread] = None
        self._running = False

    @property
    def day(self) -> float:
        """Current day-of-year."""
        with self._lock:
            return self._day

    def is_playing(self) -> bool:
        """Check if ticks advance the day."""
        with self._lock:
            return self._playing

    def play(self) -> None:
        with self._lock:
            self._playing = True

    def pause(self) -> None:
        with self._lock:
            self._playing = False

    def toggle(self) -> bool:
        """Flip play/pause.

        Returns:
            The new playing flag
        """
        with self._lock:
            self._playing = not self._playing
            return self._playing

    def seek(self, day: float) -> Frame:
        """Jump to a day-of-year (wrapped into the year).

        Args:
            day: Target day (must be finite)

        Returns:
            Frame for the new day
        """
        wrapped = _wrap_day(day, self.config.year_days)
        with self._lock:
            self._day = wrapped
            return self.current_frame()

    def current_frame(self) -> Frame:
        """Compute the frame for the current day without advancing."""
        with self._lock:
            day = self._day
        return Frame(
            day=day,
            orbit=compute_position(day, self.config),
            solar=solar_state(day, self.config),
            label=date_label(day, self.config.reference_year),
        )

    def tick(self) -> Frame:
        """Advance one frame (if playing) and notify listeners.

        Returns:
            The frame for the (possibly advanced) day
        """
        with self._lock:
            if self._playing:
                self._day = (self._day + self.config.day_step) % self.config.year_days
            frame = self.current_frame()
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(frame)
            except Exception as e:
                logger.error(f"Error in frame listener: {e}")
        return frame

    def add_listener(self, callback: Callable[[Frame], None]) -> None:
        """Register a callback receiving every ticked frame."""
        with self._lock:
            if callback not in self._listeners:
                self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[Frame], None]) -> bool:
        """Remove a frame listener.

        Returns:
            True if removed, False if it was not registered
        """
        with self._lock:
            if callback in self._listeners:
                self._listeners.remove(callback)
                return True
            return False

    def start(self, fps: float = 60.0) -> None:
        """Tick on a background thread at a fixed frame rate.

        Args:
            fps: Frames per second (must be > 0)
        """
        if fps <= 0:
            raise ValueError("fps must be positive")

        if self._running:
            logger.warning("Animation driver already running")
            return

        self._running = True
        self._stop_event.clear()
        self._thread = Thread(target=self._run_loop, args=(1.0 / fps,), daemon=True)
        self._thread.start()
        logger.info(f"Animation driver started at {fps} fps")

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the background loop.

        Args:
            timeout: Maximum time to wait for the thread to finish
        """
        if not self._running:
            return

        self._running = False
        self._stop_event.set()

        if self._thread:
            self._thread.join(timeout=timeout)
            self._thread = None

        logger.info("Animation driver stopped")

    def is_running(self) -> bool:
        """Check if the background loop is running."""
        return self._running

    def _run_loop(self, interval: float) -> None:
        while self._running and not self._stop_event.is_set():
            self.tick()
            self._stop_event.wait(interval)

    def __repr__(self) -> str:
        status = "playing" if self._playing else "paused"
        return f"AnimationDriver(day={self._day:.2f}, {status})"
