from __future__ import annotations

import numpy as np


def interpolate_equidistant(x: float, lo: float, hi: float, y: np.ndarray):
    """Piecewise-linear interpolation on an equidistant grid over [lo, hi].

    ``y`` is either one sample vector or a (rows, samples) array; for the
    latter every row is interpolated at ``x`` and a 1D array is returned.
    Outside [lo, hi] the result is zero.
    """
    yy = np.asarray(y, dtype=float)
    n = int(yy.shape[-1])
    if n < 2:
        raise ValueError("need at least two samples to interpolate")
    if x < lo or x > hi:
        if yy.ndim == 1:
            return 0.0
        return np.zeros(yy.shape[:-1], dtype=float)
    p = (float(x) - lo) / (hi - lo) * (n - 1)
    i = min(int(np.floor(p)), n - 2)
    frac = p - i
    val = yy[..., i] + frac * (yy[..., i + 1] - yy[..., i])
    if yy.ndim == 1:
        return float(val)
    return val
