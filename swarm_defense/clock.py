"""
Game clock - drives the simulation at a fixed tick rate.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class TickStats:
    """Statistics for tick timing."""

    tick_number: int
    duration_ms: float
    dt: float


class GameClock:
    """
    Fixed-rate tick loop on asyncio.

    Each tick calls `on_tick(dt)` with the seconds elapsed since the
    previous executed tick. A tick runs to completion before the next
    sleep starts, so ticks never overlap. While paused no ticks run and
    no time is delivered.
    """

    def __init__(self, tick_rate_ms: int, on_tick: Callable[[float], Any]) -> None:
        if tick_rate_ms <= 0:
            raise ValueError(f"tick_rate_ms must be positive, got {tick_rate_ms}")

        self._tick_rate_ms = tick_rate_ms
        self._on_tick = on_tick

        self._tick_number = 0
        self._is_running = False
        self._is_paused = False
        self._task: asyncio.Task | None = None
        self._stop_event = asyncio.Event()
        self._last_tick: float | None = None

        # Tick statistics
        self._recent_stats: list[TickStats] = []
        self._max_stats_history = 100

    @property
    def tick_number(self) -> int:
        """Current tick number."""
        return self._tick_number

    @property
    def tick_rate_ms(self) -> int:
        return self._tick_rate_ms

    @property
    def is_running(self) -> bool:
        """Whether the clock is actively ticking (not paused)."""
        return self._is_running and not self._is_paused

    @property
    def is_paused(self) -> bool:
        """Whether the clock is paused."""
        return self._is_paused

    @property
    def recent_stats(self) -> list[TickStats]:
        return list(self._recent_stats)

    async def start(self) -> None:
        """Start the tick loop."""
        if self._task is not None:
            return

        self._is_running = True
        self._last_tick = None
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"Game clock started (rate: {self._tick_rate_ms}ms)")

    async def stop(self) -> None:
        """Stop the tick loop."""
        if self._task is None:
            return

        self._is_running = False
        self._stop_event.set()

        # Loop already ended (a tick raised); the error belongs to wait()
        if self._task.done():
            self._task = None
            logger.info("Game clock stopped")
            return

        try:
            await asyncio.wait_for(self._task, timeout=5.0)
        except asyncio.TimeoutError:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        self._task = None
        logger.info("Game clock stopped")

    async def wait(self) -> None:
        """Wait until the loop exits (stop() called or a tick raised)."""
        if self._task is not None:
            await asyncio.shield(self._task)

    def pause(self) -> None:
        """Pause the clock."""
        self._is_paused = True
        logger.info(f"Game clock paused at tick {self._tick_number}")

    def resume(self) -> None:
        """Resume the clock. Time spent paused is not delivered."""
        self._is_paused = False
        self._last_tick = None
        logger.info(f"Game clock resumed at tick {self._tick_number}")

    async def step(self) -> None:
        """Execute a single nominal tick (when paused)."""
        if not self._is_paused:
            return

        self._process_tick(self._tick_rate_ms / 1000)
        logger.info(f"Manual tick step executed: {self._tick_number}")

    async def _run_loop(self) -> None:
        """
        Main tick loop.
        Fail-fast: errors raised by the tick callback propagate and end the loop.
        """
        while self._is_running:
            tick_start = time.perf_counter()

            if not self._is_paused:
                if self._last_tick is None:
                    dt = self._tick_rate_ms / 1000
                else:
                    dt = tick_start - self._last_tick
                self._last_tick = tick_start
                self._process_tick(dt)

            # Calculate sleep time to maintain tick rate
            tick_duration = (time.perf_counter() - tick_start) * 1000
            sleep_time = max(0, (self._tick_rate_ms - tick_duration) / 1000)

            # Wait for either sleep time or stop signal
            try:
                await asyncio.wait_for(
                    self._stop_event.wait(),
                    timeout=sleep_time,
                )
                # Stop event was set
                break
            except asyncio.TimeoutError:
                # Normal tick interval elapsed
                pass

    def _process_tick(self, dt: float) -> None:
        """Process a single tick."""
        tick_start = time.perf_counter()
        self._tick_number += 1

        self._on_tick(dt)

        # Record stats
        tick_duration = (time.perf_counter() - tick_start) * 1000
        self._recent_stats.append(TickStats(
            tick_number=self._tick_number,
            duration_ms=tick_duration,
            dt=dt,
        ))
        if len(self._recent_stats) > self._max_stats_history:
            self._recent_stats.pop(0)

        if tick_duration > self._tick_rate_ms:
            logger.warning(
                f"Tick {self._tick_number} took {tick_duration:.1f}ms "
                f"(target: {self._tick_rate_ms}ms)"
            )
