from __future__ import annotations

import numpy as np

EPSILON: float = 1e-9 # below this a vector is treated as having no direction

FORWARD: np.ndarray = np.array([0.0, 0.0, 1.0])
UP: np.ndarray = np.array([0.0, 1.0, 0.0])


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


def point(x: float, y: float, z: float) -> np.ndarray:
    """Positions share the vector representation: point - point is a vector, point + vector a point."""
    return np.array([x, y, z], dtype=float)


def vector_length(v: np.ndarray) -> float: #Euclidean length (magnitude) of a vector
    vector_array = np.asarray(v, dtype=float)
    return float(np.sqrt(np.dot(vector_array, vector_array)))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    magnitude = vector_length(vector_array)
    if magnitude < EPSILON:
        raise ValueError("Cannot normalize near-zero vector")
    return vector_array / magnitude


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray: #cross product of two vectors (3D)
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return np.cross(vector_a, vector_b)


def reflect_vector(I: np.ndarray, N: np.ndarray) -> np.ndarray:
    """Calculates the mirror reflection R of the incident vector I about the surface normal N.
       Assumes I points toward the surface"""
    vector_I = np.asarray(I, dtype=float)
    vector_N = np.asarray(N, dtype=float)
    return vector_I - 2.0 * vector_dot(vector_I, vector_N) * vector_N
