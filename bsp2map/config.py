import os

# Basis classification
# |normal.z| above this is treated as a floor or ceiling. Matches qbsp's
# TextureAxisFromPlane cutoff and must stay a hard threshold.
FLOOR_NORMAL_THRESHOLD = 0.999

# Texture axes whose cross product has less than this much component along
# the face normal no longer project onto the face.
DEGENERATE_AXIS_EPSILON = 0.01

# Output placeholders
NEUTRAL_FLAGS = 0
UNRESOLVED_TEXTURE_INDEX = -1

# Debug output - can be overridden by env var
PRINT_PRECISION = os.environ.get("BSP2MAP_PRINT_PRECISION", "6")
