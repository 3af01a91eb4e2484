# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs. They
describe the frame the demos are drawn in and the defaults of the original
page widgets; everything experimental lives in config.json.
"""

# The demos are drawn in a square view box of [-5, 5] x [-5, 5].
DOMAIN_HALF_EXTENT = 5.0

# Animation speed: every tick's dt (and every spawned velocity) is scaled by this.
DEFAULT_TIME_SCALE = 0.05

# Frame interval handed to tick() by the host loop, in timer units.
DEFAULT_FRAME_DT = 1.0

# --- Particle radius hint ---
# Spread of the size range over the surface height. Radius is reported as a
# percentage of the view box: (RADIUS_BASE - size_range + size_range * height) * RADIUS_SCALE
DEFAULT_SIZE_RANGE = 10.0
RADIUS_BASE = 100.0
RADIUS_SCALE = 0.005

# --- Flocking weights for particles (per axis) ---
# The surface carries the same total weight as the three flocking rules.
DEFAULT_SURFACE_WEIGHT = (1.0, 1.0)
DEFAULT_PARTICLE_RULE_WEIGHT = (0.33, 0.33)

# Neighbour count used by the swarm demo when the config leaves it at 0.
DEFAULT_SWARM_NEIGHBOURS = 5

# --- Flock defaults ---
DEFAULT_BIRD_COUNT = 50
DEFAULT_JITTER = 0.1
