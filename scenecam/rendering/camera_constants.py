"""
Camera Module Constants

Centralized default and fallback values for the viewer camera.
"""

# === Reset Defaults ===
DEFAULT_FOCUS_LENGTH = 2.0      # eye distance from the origin along +Z
VIEW_ANGLE = 60.0               # degrees - vertical field of view
NEAR_PLANE = 0.01
FAR_PLANE = 20.0
DEFAULT_SCREEN_SIZE = (200, 200)

# === Setter Fallbacks ===
FALLBACK_VIEW_ANGLE = 60.0      # degrees
FALLBACK_NEAR_PLANE = 0.01
FALLBACK_FAR_PLANE = 20.0
FALLBACK_SCREEN_SIZE = (800, 600)

# === Matrix Builder Fallbacks ===
# Used only for the computation; camera fields are left as they are
MATRIX_FALLBACK_SCREEN_SIZE = (1, 1)
MATRIX_FALLBACK_VIEW_ANGLE = 45.0   # degrees
MATRIX_FALLBACK_NEAR_PLANE = 0.1
MATRIX_FALLBACK_FAR_PLANE = 100.0

# === Basis Maintenance ===
REORTHONORMALIZE_EVERY = 0      # incremental rotations between re-orthonormalization, 0 = off
