"""
Renderer - Reads gameplay snapshots and draws them with pygame.
This is a THIN ADAPTER - no game logic here.
"""
from typing import List, Optional

import pygame

from ..gameplay.game import (
    Game, GameEvent, PhaseChangedEvent, PlayerHitEvent, LevelChangedEvent,
)
from ..gameplay.entities import AlienType, PowerUpType
from ..gameplay.progression import GamePhase
from ..gameplay.snapshot import GameSnapshot
from ..gameplay.constants import HITS_PER_LIFE, TICK_RATE


# Colors
COLOR_BG = (0, 0, 0)
COLOR_PLAYER = (255, 255, 255)
COLOR_PLAYER_SHIELDED = (0, 255, 255)
COLOR_PLAYER_SHOT = (0, 255, 0)
COLOR_ALIEN_SHOT = (255, 0, 0)
COLOR_HUD = (220, 220, 220)
COLOR_HIT = (255, 255, 0)
COLOR_LIFE_LOST = (255, 0, 0)

ALIEN_COLORS = {
    AlienType.BASIC: (255, 255, 255),
    AlienType.EXTRA_LIFE_CARRIER: (255, 255, 0),
    AlienType.SHIELD_CARRIER: (0, 255, 255),
    AlienType.SPREAD_SHOT_CARRIER: (255, 0, 255),
}

POWERUP_COLORS = {
    PowerUpType.EXTRA_LIFE: (255, 255, 0),
    PowerUpType.SHIELD: (0, 255, 255),
    PowerUpType.SPREAD_SHOT: (255, 0, 255),
}

# How long transient messages stay on screen (ticks)
MESSAGE_TICKS = TICK_RATE

HUD_HEIGHT = 30


class Renderer:
    """
    Draws game snapshots to a pygame window.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, title: str = "Swarm Defense", show_fps: bool = False):
        self.game = game
        self.title = title
        self.show_fps = show_fps

        # Created in init_display()
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.big_font: Optional[pygame.font.Font] = None

        # Transient banner (text, color, ticks left)
        self._message: Optional[str] = None
        self._message_color = COLOR_HUD
        self._message_ticks = 0

        self.measured_fps: float = 0.0

    def init_display(self) -> None:
        """Open the window sized to the game's viewport."""
        pygame.init()
        snapshot = self.game.snapshot()
        self.screen = pygame.display.set_mode((snapshot.width, snapshot.height + HUD_HEIGHT))
        pygame.display.set_caption(self.title)
        self.font = pygame.font.Font(None, 24)
        self.big_font = pygame.font.Font(None, 48)
        self._show_message(f"Level {snapshot.level}", COLOR_HUD)

    def handle_events(self, events: List[GameEvent]) -> None:
        """Turn gameplay events into on-screen messages."""
        for event in events:
            if isinstance(event, LevelChangedEvent):
                self._show_message(f"Level {event.new}", COLOR_HUD)
            elif isinstance(event, PlayerHitEvent):
                if event.life_lost:
                    self._show_message(f"Life Lost! {event.lives} remaining", COLOR_LIFE_LOST)
                else:
                    self._show_message(f"Hit {event.hits}/{HITS_PER_LIFE}", COLOR_HIT)
            elif isinstance(event, PhaseChangedEvent) and event.new_phase == GamePhase.PLAYING:
                if event.old_phase == GamePhase.GAME_OVER:
                    self._show_message(f"Level {self.game.level}", COLOR_HUD)

    def _show_message(self, text: str, color) -> None:
        self._message = text
        self._message_color = color
        self._message_ticks = MESSAGE_TICKS

    def render(self) -> None:
        """Draw one frame."""
        if self.screen is None:
            return

        snapshot = self.game.snapshot()
        self.screen.fill(COLOR_BG)

        self._draw_entities(snapshot)
        self._draw_hud(snapshot)

        if snapshot.phase == GamePhase.GAME_OVER:
            self._draw_game_over(snapshot)
        elif snapshot.phase == GamePhase.PAUSED:
            self._draw_centered("PAUSED", COLOR_HUD, big=True)
        elif self._message_ticks > 0:
            self._draw_centered(self._message, self._message_color, big=True)
            self._message_ticks -= 1

        pygame.display.flip()

    def _draw_entities(self, snapshot: GameSnapshot) -> None:
        top = HUD_HEIGHT
        player = snapshot.player
        player_color = COLOR_PLAYER_SHIELDED if player.has_shield else COLOR_PLAYER
        pygame.draw.rect(self.screen, player_color, (player.x, player.y + top, player.width, player.height))

        for shot in snapshot.player_projectiles:
            pygame.draw.rect(self.screen, COLOR_PLAYER_SHOT, (shot.x, shot.y + top, shot.width, shot.height))

        for alien in snapshot.aliens:
            if alien.alive:
                pygame.draw.rect(
                    self.screen, ALIEN_COLORS[alien.alien_type],
                    (alien.x, alien.y + top, alien.width, alien.height)
                )

        for shot in snapshot.alien_projectiles:
            pygame.draw.rect(self.screen, COLOR_ALIEN_SHOT, (shot.x, shot.y + top, shot.width, shot.height))

        for powerup in snapshot.powerups:
            pygame.draw.rect(
                self.screen, POWERUP_COLORS[powerup.power_up_type],
                (powerup.x, powerup.y + top, powerup.width, powerup.height)
            )

    def _draw_hud(self, snapshot: GameSnapshot) -> None:
        parts = [
            f"Score: {snapshot.score}",
            f"Lives: {snapshot.lives}",
            f"Level: {snapshot.level}",
        ]
        if snapshot.has_shield:
            parts.append(f"Shield {self.game.effect_time_remaining(PowerUpType.SHIELD):.1f}s")
        if snapshot.has_spread_shot:
            parts.append(f"Spread {self.game.effect_time_remaining(PowerUpType.SPREAD_SHOT):.1f}s")
        if self.show_fps:
            parts.append(f"{self.measured_fps:.0f} fps")

        text = self.font.render("   ".join(parts), True, COLOR_HUD)
        self.screen.blit(text, (10, 6))

    def _draw_game_over(self, snapshot: GameSnapshot) -> None:
        self._draw_centered("GAME OVER!", COLOR_HUD, big=True, offset=-40)
        self._draw_centered(f"Final Score: {snapshot.score}", COLOR_HUD, offset=10)
        self._draw_centered(f"Reached Level: {snapshot.level}", COLOR_HUD, offset=40)
        self._draw_centered("Press R to play again, Esc to quit", COLOR_HUD, offset=80)

    def _draw_centered(self, text: str, color, big: bool = False, offset: int = 0) -> None:
        font = self.big_font if big else self.font
        surface = font.render(text, True, color)
        width, height = self.screen.get_size()
        # Centre on the playfield, below the HUD strip
        rect = surface.get_rect(center=(width // 2, height // 2 + HUD_HEIGHT // 2 + offset))
        self.screen.blit(surface, rect)
