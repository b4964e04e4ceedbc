"""Game-wide constants for the simulation and rating rules."""

GAME_TIME_MINUTES = 480
GAME_MINUTES_PER_FRAME = 2
ATTACKER_RESTRICTED_FRAMES = 30
NO_OF_FRAMES = GAME_TIME_MINUTES // GAME_MINUTES_PER_FRAME
MAP_SIZE = 40
TOTAL_ATTACKS_PER_LEVEL = 4
TOTAL_ATTACKS_ON_A_BASE = 4
ROAD_ID = 0
INITIAL_RATING = 1000
WIN_THRESHOLD = 50
SCALE_FACTOR = 20.0
HIGHEST_TROPHY = 2_000.0
BONUS_SCALE = 2
MIN_USERNAME_LENGTH = 6