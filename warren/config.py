"""
Configuration constants.

Centralizes all magic numbers and tuning values used by the dungeon generator.
Organized by functional area for easy maintenance. Runtime, per-dungeon
settings live on `DungeonConfig`; these are the fixed values behind them.
"""

# =============================================================================
# GENERAL
# =============================================================================

# Upper bound for seeds picked automatically when none is configured.
AUTO_SEED_MAX = 2**31 - 1

# =============================================================================
# DUNGEON DEFAULTS
# =============================================================================

DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 50
DEFAULT_MIN_ROOMS = 5
DEFAULT_MAX_ROOMS = 10
DEFAULT_MIN_ROOM_SIZE = 4
DEFAULT_MAX_ROOM_SIZE = 12
DEFAULT_COMPLEXITY_LEVEL = 0.5
DEFAULT_CORRIDOR_WIDTH = 1
DEFAULT_OVERLAP_CHANCE = 0.3
DEFAULT_RNG_ALGORITHM = "mersenne"

# =============================================================================
# ROOM LAYOUT
# =============================================================================

# Candidates generated per requested room
CANDIDATE_MULTIPLIER = 3

# Tiles of solid wall kept between a candidate room and the map edge
ROOM_MARGIN = 1

# Repulsion relaxation
SEPARATION_ITERATIONS = 50
SEPARATION_FORCE = 2.0

# Minimum center spacing for greedy selection, as a fraction of the
# smaller map dimension
SELECTION_SPACING_RATIO = 0.2

# Overlap on either axis must stay below this fraction of the smaller room's
# dimension for two rooms to merge (rules out near-total containment)
MERGE_OVERLAP_RATIO = 0.7

# =============================================================================
# CORRIDORS
# =============================================================================

# A* step costs: reusing carved floor is cheaper than tunnelling
FLOOR_STEP_COST = 0.5
WALL_STEP_COST = 1.0

# Paths longer than this register a corridor entity for reporting
CORRIDOR_ROOM_MIN_PATH = 4

# =============================================================================
# RANDOM SOURCE
# =============================================================================

# Linear congruential recurrence: state = (state * A + C) mod M
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

# =============================================================================
# DEBUG RENDERING
# =============================================================================

ASCII_WALL = "#"
ASCII_FLOOR = "."
ASCII_DOOR = "+"

# Samples kept per pipeline layer for timing percentiles
LAYER_TIMING_SAMPLES = 100
