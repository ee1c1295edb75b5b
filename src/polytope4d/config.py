"""
Global constants and numerical setup for the 4-polytope engine.

Every tolerance below is part of the geometric contract: the catalog's vertex
and edge counts, the cube cross-sections and the marker classification all
depend on these exact values.

Importing this module switches jax to double precision. The deduplication
tolerance (1e-8 on squared distances) is below float32 resolution for
coordinates of order one, so the 120-cell and 600-cell would lose vertices
without it.
"""

import jax
import numpy as np

jax.config.update("jax_enable_x64", True)


# Golden ratio family used by the 120-cell and 600-cell coordinates
PHI = (1 + np.sqrt(5)) / 2
PHI_INV = 1 / PHI
PHI_SQ = PHI * PHI
PHI_INV_SQ = PHI_INV * PHI_INV
SQRT5 = np.sqrt(5)

# Polytope catalog
DISPLAY_CIRCUMRADIUS = 1.5
DEDUP_TOLERANCE = 1e-8
EDGE_TOLERANCE = 1e-6

# 4D rotation / projection
DEFAULT_VIEWER_DISTANCE = 4.0
ANGULAR_SPEEDS = {'xw': 0.5, 'yw': 0.3, 'zw': 0.4}  # rad/s

# Cross-sections
SLICE_EPSILON = 1e-3
NEGLIGIBLE_SIZE = 1e-3
PARALLEL_COS_THRESHOLD = 0.01

# Logging
LOG_NAMESPACES = ("polytope4d", "cross_sections")
LOG_LEVEL_ENV = "POLYTOPE4D_LOG_LEVEL"
