"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# VIEWPORT
# =============================================================================
VIEWPORT_WIDTH = 800
VIEWPORT_HEIGHT = 600

# =============================================================================
# TIMING (all in seconds)
# =============================================================================
TICK_RATE = 60                # ticks per second
TICK_SECONDS = 1.0 / TICK_RATE
SHOOT_DELAY = 0.25            # minimum time between player shots
TIME_EPSILON = 1e-9           # slack for accumulated float time
SHIELD_DURATION = 5.0
SPREAD_SHOT_DURATION = 8.0

# =============================================================================
# PLAYER
# =============================================================================
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 30
PLAYER_SPEED = 5              # pixels per tick
PLAYER_BOTTOM_MARGIN = 10
STARTING_LIVES = 5
HITS_PER_LIFE = 5

# =============================================================================
# PROJECTILES
# =============================================================================
PROJECTILE_WIDTH = 3
PROJECTILE_HEIGHT = 15
PLAYER_PROJECTILE_VELOCITY = 7
SPREAD_ANGLES = (0.0, -0.3, 0.3)    # radians, centre lane first
ALIEN_PROJECTILE_BASE_SPEED = 5
ALIEN_PROJECTILE_SPEED_PER_LEVEL = 0.5

# =============================================================================
# ALIEN SWARM
# =============================================================================
ALIEN_WIDTH = 40
ALIEN_HEIGHT = 30
ALIEN_ROWS = 5
ALIEN_COLS = 10
ALIEN_SPACING = 15
ALIEN_GRID_TOP = 50
ALIEN_BASE_STEP = 2
ALIEN_STEP_PER_LEVEL = 0.5
ALIEN_STEP_DOWN = 30
CARRIER_CHANCE = 0.1
BASE_SHOT_CHANCE = 0.02       # per tick
SHOT_CHANCE_PER_LEVEL = 0.005

# =============================================================================
# SCORING
# =============================================================================
BASIC_ALIEN_POINTS = 10
CARRIER_ALIEN_POINTS = 20

# =============================================================================
# POWER-UPS
# =============================================================================
POWERUP_WIDTH = 20
POWERUP_HEIGHT = 20
POWERUP_SEEK_SPEED = 6        # pixels per tick
SEEK_EPSILON = 1e-6           # below this distance a power-up holds still
