"""Cartesian geometry helpers for deriving bonds and angles from coordinates."""

import numpy as np

Point = np.ndarray

ROUND_DIGITS = 3


def as_point(x: float, y: float, z: float) -> Point:
    return np.array([x, y, z], dtype=float)


def bond_length(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points, rounded to 3 decimals."""
    return round(float(np.linalg.norm(np.asarray(p1) - np.asarray(p2))), ROUND_DIGITS)


def bond_angle(center: Point, p1: Point, p2: Point) -> float:
    """
    Angle p1-center-p2 in degrees, rounded to 3 decimals.

    Args:
        center: Vertex coordinates
        p1: First bond partner
        p2: Second bond partner

    Raises:
        ValueError: If a partner coincides with the vertex
    """
    v1 = np.asarray(p1, dtype=float) - np.asarray(center, dtype=float)
    v2 = np.asarray(p2, dtype=float) - np.asarray(center, dtype=float)
    norms = np.linalg.norm(v1) * np.linalg.norm(v2)
    if norms == 0:
        raise ValueError("Cannot measure an angle with a zero-length bond")
    cosine = np.clip(np.dot(v1, v2) / norms, -1.0, 1.0)
    return round(float(np.degrees(np.arccos(cosine))), ROUND_DIGITS)
