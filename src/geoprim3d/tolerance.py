"""Numeric thresholds shared by the geometry modules.

Redefine these at your peril.
"""

from __future__ import annotations

# Magnitude below which normalize() reports a numerically unstable result.
STABILITY_EPSILON = 1e-12

# Cross-product magnitude / Gram determinant at or below which two lines
# are treated as parallel.
PARALLEL_EPSILON = 1e-12

# Smallest pairwise vertex distance accepted as a cube edge.
VERTEX_EPSILON = 1e-12

# Working precision (decimal digits) of the closest-point solver.
GRAM_DPS = 30

# Digits after the decimal point in canonical string forms.
DISPLAY_DIGITS = 6
