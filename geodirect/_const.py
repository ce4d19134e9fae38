"""
Constants declarations for geodirect
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.3142  # Minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Vincenty direct iteration bounds
CONVERGENCE_TOLERANCE = 1e-12  # radians of arc on the auxiliary sphere
MAX_ITERATIONS = 200
