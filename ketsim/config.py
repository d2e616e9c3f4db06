# ketsim/config.py
"""Package-wide defaults. Functions taking dtype=/eps=/tol= fall back to these."""
import os
import numpy as np

# element type of Matrix and Ket storage
DTYPE = np.complex128

# equality tolerance for Complex, Matrix and Ket
EPSILON = 1e-10

# tolerance for ||psi||^2 == 1 checks
NORM_TOLERANCE = 1e-6

LOG_LEVEL = os.environ.get("KETSIM_LOG_LEVEL", "WARNING").upper()
