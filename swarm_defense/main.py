#!/usr/bin/env python3
"""
Swarm Defense - Main Entry Point

Hold off a descending alien swarm. Shoot down carrier aliens to drop
power-ups: extra life, shield, or spread shot.

Usage:
    swarm-defense [--seed N] [--log-level DEBUG]

Controls:
    Left/Right or A/D: Move
    Space: Fire
    P: Pause / resume
    R: Play again (after game over)
    Escape: Quit
"""
import argparse
import asyncio
import logging
import random

import pygame

from .config import get_settings
from .clock import GameClock
from .gameplay.game import Game
from .ui.renderer import Renderer
from .ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


async def run(seed, tick_rate_ms: int) -> None:
    """Wire the game, pygame adapters and clock together until quit."""
    settings = get_settings()

    game = Game(
        width=settings.viewport_width,
        height=settings.viewport_height,
        rng=random.Random(seed),
    )

    renderer = Renderer(game, title=settings.window_title, show_fps=settings.show_fps)
    renderer.init_display()
    input_handler = InputHandler(game)

    quit_requested = asyncio.Event()

    def on_tick(dt: float) -> None:
        """Sample input, advance the simulation, draw."""
        if input_handler.pump():
            quit_requested.set()
            return

        events = game.update(dt, input_handler.sample_controls())
        renderer.handle_events(events)
        if dt > 0:
            renderer.measured_fps = 1.0 / dt
        renderer.render()

    clock = GameClock(tick_rate_ms, on_tick)
    await clock.start()

    quit_task = asyncio.create_task(quit_requested.wait())
    clock_task = asyncio.create_task(clock.wait())
    try:
        done, _ = await asyncio.wait(
            {quit_task, clock_task}, return_when=asyncio.FIRST_COMPLETED
        )
        # Re-raise a tick error
        for task in done:
            task.result()
    finally:
        quit_task.cancel()
        clock_task.cancel()
        await clock.stop()
        pygame.quit()

    logger.info(f"Final score {game.score} at level {game.level}")


def main():
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Swarm Defense")
    parser.add_argument("--seed", type=int, default=settings.random_seed, help="Random seed")
    parser.add_argument("--tick-rate-ms", type=int, default=settings.tick_rate_ms, help="Tick interval")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Swarm Defense - Starting...")
    asyncio.run(run(args.seed, args.tick_rate_ms))


if __name__ == "__main__":
    main()
