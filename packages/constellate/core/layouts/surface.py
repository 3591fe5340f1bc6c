"""Evenly spaced points on a triangular face.

Candidates come from a regular triangular sub-grid of barycentric
coordinates; the requested number of points is then stride-sampled from
the candidate list so the selection spreads across the whole face
instead of clustering in the first rows.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from constellate.core.layouts.geometry import barycentric_point

logger = logging.getLogger(__name__)

DEFAULT_JITTER = 0.05


def grid_resolution(count: int) -> int:
    """Smallest triangular grid resolution holding at least count points.

    A resolution g grid has g * (g + 1) / 2 candidates.

    Example:
        >>> grid_resolution(10)
        4
        >>> grid_resolution(11)
        5
    """
    if count <= 1:
        return 1
    g = math.ceil((math.sqrt(8 * count + 1) - 1) / 2)
    # Guard against float rounding on exact triangular numbers
    while g * (g + 1) // 2 < count:
        g += 1
    while g > 1 and (g - 1) * g // 2 >= count:
        g -= 1
    return g


def barycentric_grid(resolution: int) -> np.ndarray:
    """Barycentric weights of a regular triangular grid.

    Rows run from the v1-v3 edge (row 0) towards v2; within a row u grows
    with the column. Every weight is >= 0 and each row sums to 1.

    Args:
        resolution: Points along one edge (>= 1).

    Returns:
        Array of shape (resolution * (resolution + 1) / 2, 3) holding (u, v, w).
    """
    divisor = max(1, resolution - 1)
    weights: list[tuple[float, float, float]] = []
    for row in range(resolution):
        for col in range(resolution - row):
            u = col / divisor
            v = row / divisor
            weights.append((u, v, max(0.0, 1.0 - u - v)))
    return np.array(weights, dtype=np.float64).reshape(-1, 3)


def stride_sample(candidates: int, count: int) -> list[int]:
    """Pick count indices spread evenly through range(candidates).

    Args:
        candidates: Size of the candidate list (>= count).
        count: Number of indices to pick.

    Returns:
        Strictly increasing indices floor(i * candidates / count).
    """
    if count <= 0:
        return []
    step = candidates / count
    return [int(math.floor(i * step)) for i in range(count)]


def _jittered_weights(
    base: np.ndarray, jitter: float, rng: np.random.Generator
) -> np.ndarray:
    perturbed = base + rng.uniform(-jitter / 2.0, jitter / 2.0, size=3)
    perturbed = np.clip(perturbed, 0.0, None)
    total = float(perturbed.sum())
    if total <= 0.0:
        return base
    result: np.ndarray = perturbed / total
    return result


def triangle_surface_weights(
    count: int,
    *,
    resolution: int | None = None,
    jitter: float = DEFAULT_JITTER,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Barycentric weights of count evenly spread points on a triangle.

    When the candidate grid holds fewer than count points (only possible
    with an explicit resolution) the remainder is topped up by jittering
    randomly chosen candidates. The jittered weights are clipped and
    renormalised, so topped-up points still lie on the face and inside
    it. That path draws from rng; without a seeded generator its output
    is not reproducible.

    Args:
        count: Number of points to produce (>= 0).
        resolution: Grid resolution override; defaults to grid_resolution(count).
        jitter: Width of the uniform barycentric perturbation for top-up points.
        rng: Random source for the top-up path. A fresh unseeded generator
            is created when omitted.

    Returns:
        Array of shape (count, 3).
    """
    if count <= 0:
        return np.zeros((0, 3), dtype=np.float64)

    g = resolution if resolution is not None else grid_resolution(count)
    candidates = barycentric_grid(max(1, g))

    if len(candidates) >= count:
        return candidates[stride_sample(len(candidates), count)]

    if rng is None:
        rng = np.random.default_rng()

    missing = count - len(candidates)
    logger.debug(
        f"Candidate grid of {len(candidates)} points is short of {count}; "
        f"topping up {missing} jittered points"
    )
    extra = [
        _jittered_weights(candidates[int(rng.integers(len(candidates)))], jitter, rng)
        for _ in range(missing)
    ]
    return np.vstack([candidates, np.array(extra, dtype=np.float64).reshape(-1, 3)])


def triangle_surface_points(
    v1: np.ndarray,
    v2: np.ndarray,
    v3: np.ndarray,
    count: int,
    *,
    resolution: int | None = None,
    jitter: float = DEFAULT_JITTER,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Generate count evenly spaced points on triangle (v1, v2, v3).

    See triangle_surface_weights for the sampling rules.

    Returns:
        Array of shape (count, 3) with one point per row.
    """
    weights = triangle_surface_weights(count, resolution=resolution, jitter=jitter, rng=rng)
    if len(weights) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    return np.array([barycentric_point(u, v, w, v1, v2, v3) for u, v, w in weights])
