# MIT License (see LICENSE)
"""
Small 2D vector helpers shared by the engine.

Vectors are numpy float64 arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions and velocities while keeping
    the arithmetic in double precision everywhere.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def distance(a, b) -> float:
    """Euclidean distance between two 2D points."""
    dx = float(b[0]) - float(a[0])
    dy = float(b[1]) - float(a[1])
    return float(np.sqrt(dx * dx + dy * dy))


def pair(value, name: str) -> tuple[float, float]:
    """
    Convert a 2-element sequence into a tuple of finite floats.

    Raises:
        ValueError: If value does not have exactly two finite components.
    """
    if len(value) != 2:
        raise ValueError(f"{name} must have exactly 2 components, got {value!r}")
    x, y = float(value[0]), float(value[1])
    if not (np.isfinite(x) and np.isfinite(y)):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return (x, y)
